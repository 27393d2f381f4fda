"""Application layer: DTOs, validation rules and use cases."""

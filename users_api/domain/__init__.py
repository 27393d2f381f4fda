"""Domain layer: user model, field constants, repository contract and error kinds."""

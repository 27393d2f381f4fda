"""Infrastructure layer: storage implementations of the domain repositories."""

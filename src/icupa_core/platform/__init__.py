"""Platform layer: use-case factory and port implementations."""

"""Core domain layer: exceptions, context, entity base and ports."""

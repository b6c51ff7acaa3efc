"""Core layer: configuration, errors, result types and the container."""

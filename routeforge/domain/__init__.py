"""Domain layer: protocols (ports) and error constants."""

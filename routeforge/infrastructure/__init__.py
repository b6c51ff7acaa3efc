"""Infrastructure adapters (logging, security, validation)."""

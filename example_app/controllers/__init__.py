"""Request handlers for the example application."""

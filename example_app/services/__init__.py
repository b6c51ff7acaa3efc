"""Services for the example application."""

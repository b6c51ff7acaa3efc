"""Presentation layer: routing engine, HTTP middleware and error handlers."""

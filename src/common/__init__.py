"""Shared helpers: HTTP, logging, dates and error types."""

"""Core infrastructure: settings, logging, error handlers and storage."""

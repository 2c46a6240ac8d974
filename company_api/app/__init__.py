"""
Application package initializer.

The service is split into a few small layers: ``core`` holds
configuration, logging, error handlers and the JSON record store;
``services`` holds the CRUD logic for companies; ``schemas`` holds the
pydantic payload models; and ``api`` maps HTTP routes onto the
service layer.
"""

from .main import app  # noqa: F401

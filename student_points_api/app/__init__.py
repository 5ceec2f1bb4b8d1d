"""
Application package initializer.

The service is organised into a handful of layers: ``core`` holds
configuration, logging, error types and the JSON file storage,
``schemas`` the pydantic payload models, ``services`` the roster
logic and ``api`` the HTTP routes that call into it.
"""

from .main import app  # noqa: F401

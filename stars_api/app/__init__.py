"""
Application package initializer.

The service is split into ``core`` (configuration, logging,
persistence), ``schemas`` (request and response models),
``services`` (the operations on stars) and ``api`` (the HTTP routes
that expose them).
"""

from .main import app  # noqa: F401

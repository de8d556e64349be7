"""
Top-level package for the Stars API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``stars_api.app.main:app``.
"""

__all__ = []

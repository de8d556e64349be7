"""
Service layer abstraction.

Each service encapsulates the operations for a resource and talks to
the store it is constructed with, keeping SQL out of the API handlers.
"""

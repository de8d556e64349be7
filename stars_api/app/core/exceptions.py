"""Exceptions raised by the persistence and service layers."""


class StarsError(Exception):
    """Base class for errors raised by the stars service."""


class StoreConnectionError(StarsError):
    """The SQLite database could not be opened."""


class DuplicateStarError(StarsError):
    """A star with the given name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Star {name!r} already exists")
        self.name = name

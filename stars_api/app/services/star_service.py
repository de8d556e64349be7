"""
Service layer for stars.

``StarService`` implements the five operations of the stars resource
on top of a ``StarStore``.  Lookups report "not found" as ``None``;
the API layer decides whether that becomes an empty record or a 404.
Update and delete treat an unknown name as a no-op, and duplicate
names surface as ``DuplicateStarError``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from stars_api.app.core.db import StarStore
from stars_api.app.core.exceptions import DuplicateStarError
from stars_api.app.schemas.star import StarForm, StarRead

logger = logging.getLogger(__name__)


class StarService:
    """Service class for managing stars."""

    def __init__(self, store: StarStore) -> None:
        self.store = store

    async def list_stars(self) -> List[StarRead]:
        """Return all stars in the order they were created."""
        return [self._row_to_star_read(row) for row in self.store.list_stars()]

    async def get_star(self, name: str) -> Optional[StarRead]:
        """Retrieve a single star by name, or ``None`` if it does not exist."""
        row = self.store.get_star(name)
        if row is None:
            return None
        return self._row_to_star_read(row)

    async def create_star(self, data: StarForm) -> StarRead:
        """Insert a new star and return it.

        Raises ``DuplicateStarError`` when the name is already in use.
        """
        try:
            self.store.insert_star(data.name, data.description, data.url)
        except DuplicateStarError:
            logger.warning("Refused to create duplicate star %r", data.name)
            raise
        logger.info("Created star %r", data.name)
        return StarRead(name=data.name, description=data.description, url=data.url)

    async def update_star(self, name: str, data: StarForm) -> bool:
        """Overwrite the star currently named ``name`` with ``data``.

        ``data.name`` renames the star unless it is empty.  Returns
        ``True`` if a record was updated, ``False`` otherwise.
        """
        try:
            affected = self.store.update_star(name, data.name, data.description, data.url)
        except DuplicateStarError:
            logger.warning("Refused to rename star %r onto existing %r", name, data.name)
            raise
        if affected:
            if data.name and data.name != name:
                logger.info("Updated star %r (renamed to %r)", name, data.name)
            else:
                logger.info("Updated star %r", name)
        return affected > 0

    async def delete_star(self, name: str) -> bool:
        """Delete a star by name.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        affected = self.store.delete_star(name)
        if affected:
            logger.info("Deleted star %r", name)
        return affected > 0

    @staticmethod
    def _row_to_star_read(row: sqlite3.Row) -> StarRead:
        return StarRead(name=row["name"], description=row["description"], url=row["url"])

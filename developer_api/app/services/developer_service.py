"""
Persistence layer for developer records.

``DeveloperRepository`` wraps the ``developers`` table and exposes the
five operations the API needs: insert, lookup by id, full update,
delete and listing.  Each call opens its own SQLite connection and
closes it before returning, so a single repository instance can be
shared by all requests.

All queries use parameterized statements.  ``sqlite3.Error`` is not
caught here; store failures propagate to the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from developer_api.app.core.db import get_connection, get_database_path, init_db
from developer_api.app.schemas.developer import DeveloperInput, DeveloperRead


logger = logging.getLogger(__name__)


class DeveloperRepository:
    """Data access object for the ``developers`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def init_db(self) -> None:
        """Create the schema in this repository's database if missing."""
        init_db(self.db_path)

    async def insert(self, data: DeveloperInput) -> int:
        """Insert a new developer and return its id."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO developers (name, fav_lang) VALUES (?, ?)",
                (data.name, data.fav_lang),
            )
            developer_id = cursor.lastrowid
            conn.commit()
            logger.info("Created developer %s", developer_id)
            return developer_id
        finally:
            conn.close()

    async def find_by_id(self, developer_id: int) -> Optional[DeveloperRead]:
        """Return the developer with ``developer_id`` or ``None``."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                "SELECT * FROM developers WHERE id = ?",
                (developer_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_developer_read(row)
        finally:
            conn.close()

    async def update(self, developer_id: int, data: DeveloperInput) -> bool:
        """Overwrite ``name`` and ``fav_lang`` of an existing developer.

        Both columns are replaced, so a field left out of ``data`` is
        stored as ``NULL``.  Returns ``False`` when no row matched.
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE developers
                SET name = ?, fav_lang = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (data.name, data.fav_lang, developer_id),
            )
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Updated developer %s", developer_id)
            return affected > 0
        finally:
            conn.close()

    async def delete(self, developer_id: int) -> bool:
        """Delete a developer by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        conn = get_connection(self.db_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM developers WHERE id = ?", (developer_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted developer %s", developer_id)
            return affected > 0
        finally:
            conn.close()

    async def list_all(self) -> List[DeveloperRead]:
        """Return every developer in insertion (id) order."""
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute("SELECT * FROM developers ORDER BY id ASC").fetchall()
            return [self._row_to_developer_read(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_developer_read(row: sqlite3.Row) -> DeveloperRead:
        return DeveloperRead(
            id=row["id"],
            name=row["name"],
            fav_lang=row["fav_lang"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

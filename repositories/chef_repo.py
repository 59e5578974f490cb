"""
repositories/chef_repo.py
-------------------------
Data access layer for chef accounts.
All SQL queries related to the `chef` table live here.

Paged reads run two statements on the same connection: a COUNT(*) for the
totals and a LIMIT/OFFSET query for the requested slice.
"""

from typing import Optional

from db.connection import ConnectionProvider
from models.chef import Chef
from utils.logger import get_logger
from utils.pagination import Page, PageOptions

logger = get_logger(__name__)

_COLUMNS = "id, username, email, password, is_admin"

# Public sort key -> SQL column. Only these ever reach an ORDER BY clause.
SORTABLE_COLUMNS = {
    "id": "id",
    "username": "username",
    "email": "email",
    "is_admin": "is_admin",
}


class ChefRepository:
    """Repository for CRUD and search operations on the chef table."""

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    # ── CREATE ────────────────────────────────────────────

    def create(self, chef: Chef) -> int:
        """
        Insert a new chef.

        Args:
            chef: The Chef to persist. Its `id` is ignored.

        Returns:
            The generated primary key. `chef.id` is set to it as well.
        """
        sql = """
            INSERT INTO chef (username, email, password, is_admin)
            VALUES (%s, %s, %s, %s)
            RETURNING id;
        """
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (chef.username, chef.email, chef.password, chef.is_admin))
                chef.id = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Created chef #{chef.id} ({chef.username})")
            return chef.id
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to create chef {chef.username!r}: {e}")
            raise
        finally:
            self.provider.release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[Chef]:
        """Fetch every chef ordered by id."""
        sql = f"SELECT {_COLUMNS} FROM chef ORDER BY id;"
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_chef(r) for r in cur.fetchall()]
        finally:
            self.provider.release_connection(conn)

    def get_all_paged(self, options: PageOptions) -> Page[Chef]:
        """
        Fetch one page of chefs.

        Args:
            options: Page number/size and ordering.

        Returns:
            A Page with the requested slice and overall totals.

        Raises:
            ValueError: If `options.sort_by` is not a sortable column.
        """
        return self._paged("", (), options)

    def get_by_id(self, chef_id: int) -> Optional[Chef]:
        """Fetch a single chef by primary key, or None if absent."""
        sql = f"SELECT {_COLUMNS} FROM chef WHERE id = %s;"
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (chef_id,))
                row = cur.fetchone()
                return self._row_to_chef(row) if row else None
        finally:
            self.provider.release_connection(conn)

    def search(self, term: str) -> list[Chef]:
        """
        Fetch every chef whose username contains `term`, ordered by id.
        LIKE wildcards inside the term match literally.
        """
        sql = f"SELECT {_COLUMNS} FROM chef WHERE username LIKE %s ESCAPE '\\' ORDER BY id;"
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (self._like_pattern(term),))
                return [self._row_to_chef(r) for r in cur.fetchall()]
        finally:
            self.provider.release_connection(conn)

    def search_paged(self, term: str, options: PageOptions) -> Page[Chef]:
        """Paged variant of `search`, ordered as `options` requests."""
        return self._paged(
            "WHERE username LIKE %s ESCAPE '\\'",
            (self._like_pattern(term),),
            options,
        )

    # ── UPDATE ────────────────────────────────────────────

    def update(self, chef: Chef) -> bool:
        """
        Overwrite all columns of an existing chef.

        Args:
            chef: Chef with updated fields (must have id set).

        Returns:
            True if a row was updated, False otherwise.
        """
        if chef.id is None:
            raise ValueError("Cannot update a chef without an id")
        sql = """
            UPDATE chef
            SET username = %s, email = %s, password = %s, is_admin = %s
            WHERE id = %s;
        """
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    chef.username, chef.email, chef.password, chef.is_admin, chef.id,
                ))
                updated = cur.rowcount > 0
            conn.commit()
            if updated:
                logger.info(f"Updated chef #{chef.id}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update chef #{chef.id}: {e}")
            raise
        finally:
            self.provider.release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, chef: Chef) -> bool:
        """
        Delete a chef by its id.

        Returns:
            True if a row was deleted, False otherwise.
        """
        if chef.id is None:
            raise ValueError("Cannot delete a chef without an id")
        sql = "DELETE FROM chef WHERE id = %s;"
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (chef.id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted chef #{chef.id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete chef #{chef.id}: {e}")
            raise
        finally:
            self.provider.release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    def _paged(self, where: str, params: tuple, options: PageOptions) -> Page[Chef]:
        order_by = self._order_by(options)
        count_sql = f"SELECT COUNT(*) FROM chef {where};"
        page_sql = f"SELECT {_COLUMNS} FROM chef {where} ORDER BY {order_by} LIMIT %s OFFSET %s;"

        logger.debug(f"Paged query: {page_sql} params={params} limit={options.page_size} offset={options.offset}")
        conn = self.provider.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(count_sql, params)
                total = cur.fetchone()[0]
                cur.execute(page_sql, params + (options.page_size, options.offset))
                chefs = [self._row_to_chef(r) for r in cur.fetchall()]
            return Page.build(chefs, total, options)
        finally:
            self.provider.release_connection(conn)

    @staticmethod
    def _order_by(options: PageOptions) -> str:
        """Build the ORDER BY body; id breaks ties so pages never overlap."""
        column = SORTABLE_COLUMNS.get(options.sort_by)
        if column is None:
            raise ValueError(
                f"Cannot sort by {options.sort_by!r}; "
                f"expected one of {', '.join(SORTABLE_COLUMNS)}"
            )
        if column == "id":
            return f"id {options.sort_direction}"
        return f"{column} {options.sort_direction}, id ASC"

    @staticmethod
    def _like_pattern(term: str) -> str:
        escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return f"%{escaped}%"

    @staticmethod
    def _row_to_chef(row: tuple) -> Chef:
        """Convert a database row tuple to a Chef domain object."""
        return Chef(
            id=row[0],
            username=row[1],
            email=row[2],
            password=row[3],
            is_admin=bool(row[4]),
        )

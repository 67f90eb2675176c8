"""Catalog queries against information_schema, scoped to the public schema."""
import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection

from models.schema import ColumnRow, ForeignKeyRow

logger = logging.getLogger(__name__)

COLUMNS_SQL = """
    SELECT
      c.table_name,
      c.column_name,
      c.udt_name AS data_type,
      EXISTS (
        SELECT 1
        FROM information_schema.key_column_usage kcu
        JOIN information_schema.table_constraints tc
          ON kcu.constraint_name = tc.constraint_name
         AND kcu.table_schema = tc.table_schema
        WHERE kcu.table_schema = c.table_schema
          AND kcu.table_name = c.table_name
          AND kcu.column_name = c.column_name
          AND tc.constraint_type = 'PRIMARY KEY'
      ) AS is_pk
    FROM information_schema.columns c
    WHERE c.table_schema = 'public'
    ORDER BY c.table_name, c.ordinal_position;
"""

FOREIGN_KEYS_SQL = """
    SELECT
      tc.table_name,
      kcu.column_name,
      ccu.table_name  AS foreign_table_name,
      ccu.column_name AS foreign_column_name
    FROM information_schema.table_constraints tc
    JOIN information_schema.key_column_usage kcu
      ON tc.constraint_name = kcu.constraint_name
     AND tc.table_schema = kcu.table_schema
    JOIN information_schema.constraint_column_usage ccu
      ON ccu.constraint_name = tc.constraint_name
     AND ccu.table_schema = tc.table_schema
    WHERE tc.constraint_type = 'FOREIGN KEY'
      AND tc.table_schema = 'public';
"""


class CatalogReader:
    def __init__(self, conn: Connection):
        self.conn = conn

    def list_columns(self) -> list[ColumnRow]:
        rows = self.conn.execute(text(COLUMNS_SQL)).fetchall()
        logger.debug("Catalog returned %d column rows", len(rows))
        return [ColumnRow(t, c, dt, bool(pk)) for (t, c, dt, pk) in rows]

    def list_foreign_keys(self) -> list[ForeignKeyRow]:
        rows = self.conn.execute(text(FOREIGN_KEYS_SQL)).fetchall()
        logger.debug("Catalog returned %d foreign-key rows", len(rows))
        return [ForeignKeyRow(t, c, ft, fc) for (t, c, ft, fc) in rows]

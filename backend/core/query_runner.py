"""
Query runner: ad-hoc SQL execution and table preview, rows flattened to JSON.
`exec` SQL is trusted and sent verbatim; preview table names are validated
before any connection is opened.
"""
import logging
import re
from typing import Any, Optional

from sqlalchemy.engine import Connection

from config import settings
from core.db_connector import open_connection
from core.value_coercer import coerce_row
from models.connection import ConnectionRequest

logger = logging.getLogger(__name__)

TABLE_NAME_RE = re.compile(r"[A-Za-z0-9_]+")


def validate_table_name(table: str) -> str:
    if not TABLE_NAME_RE.fullmatch(table):
        raise ValueError("Invalid table name")
    return table


def run_query(conn: Connection, sql: str) -> list[dict[str, Any]]:
    """Execute one statement and map every result row through the value coercer."""
    # no_parameters: hand the string to the DBAPI untouched (no %-formatting or :binds)
    result = conn.execution_options(no_parameters=True).exec_driver_sql(sql)
    if result.returns_rows:
        keys = list(result.keys())
        rows = [coerce_row(keys, row) for row in result.fetchall()]
    else:
        rows = []
    conn.commit()
    logger.debug("Query returned %d rows", len(rows))
    return rows


def preview_table(conn: Connection, table: str, limit: Optional[int] = None) -> list[dict[str, Any]]:
    validate_table_name(table)
    limit = settings.PREVIEW_ROW_LIMIT if limit is None else limit
    return run_query(conn, f'SELECT * FROM "{table}" LIMIT {int(limit)}')


def execute(req: ConnectionRequest, sql: str) -> list[dict[str, Any]]:
    with open_connection(req) as conn:
        return run_query(conn, sql)


def preview(req: ConnectionRequest, table: str) -> list[dict[str, Any]]:
    validate_table_name(table)
    with open_connection(req) as conn:
        return preview_table(conn, table)

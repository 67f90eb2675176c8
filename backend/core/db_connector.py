"""
Database connector — per-invocation SQLAlchemy engine and schema reflection.
One engine, one connection, disposed when the operation finishes.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg2.extras
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import OperationalError

from config import settings
from core.catalog_reader import CatalogReader
from core.schema_assembler import assemble
from core.value_coercer import RawJson
from models.connection import ConnectionRequest
from models.schema import SchemaGraph

logger = logging.getLogger(__name__)

# UUID columns arrive as uuid.UUID instead of str
psycopg2.extras.register_uuid()
# json/jsonb stay opaque so scalar documents are not mistaken for str/int/bool
psycopg2.extras.register_default_json(globally=True, loads=RawJson)
psycopg2.extras.register_default_jsonb(globally=True, loads=RawJson)


def create_engine_from_request(req: ConnectionRequest) -> Engine:
    """Build a SQLAlchemy engine from a ConnectionRequest."""
    connect_args = {}
    if req.is_postgres:
        connect_args["connect_timeout"] = settings.CONNECT_TIMEOUT_SECONDS
    return create_engine(req.get_sqlalchemy_url(), pool_pre_ping=True, connect_args=connect_args)


@contextmanager
def open_connection(req: ConnectionRequest) -> Iterator[Connection]:
    """Acquire a single connection for the duration of one operation."""
    engine = create_engine_from_request(req)
    try:
        try:
            conn = engine.connect()
        except OperationalError as e:
            raise ValueError(f"Could not connect to database: {e}") from e
        with conn:
            yield conn
    finally:
        engine.dispose()


def reflect_schema(req: ConnectionRequest) -> SchemaGraph:
    """
    Read the public schema catalog and assemble the table/column/relation graph.
    """
    with open_connection(req) as conn:
        reader = CatalogReader(conn)
        column_rows = reader.list_columns()
        fk_rows = reader.list_foreign_keys()

    graph = assemble(column_rows, fk_rows)
    logger.info("Reflected %d tables (%d foreign keys)", len(graph), len(fk_rows))
    return graph

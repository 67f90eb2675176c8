from models.connection import ConnectionRequest  # noqa: F401
from models.query import ExecRequest, PreviewRequest  # noqa: F401
from models.schema import (  # noqa: F401
    ColumnDescriptor, ColumnRow, ForeignKeyRow, RelationEdge, RelationKind, SchemaGraph, TableDescriptor,
)

"""
Schema assembler: builds the SchemaGraph from catalog rows.

Two passes:
  1. Column rows create tables lazily and append columns in input order.
  2. Foreign-key rows add a "Belongs To" edge on the owning table (tagging
     the column as FK) and a "Has Many" edge on the referenced table.

Inconsistent catalog data never raises: a side whose table is unknown is
skipped, and an edge whose local column is missing is still recorded.
"""
import logging
from typing import Iterable

from models.schema import (
    ColumnDescriptor, ColumnRow, ForeignKeyRow, RelationEdge, RelationKind, SchemaGraph, TableDescriptor,
)

logger = logging.getLogger(__name__)


class SchemaAssembler:
    """Single-owner builder; call build() once both row streams are consumed."""

    def __init__(self):
        self._tables: dict[str, TableDescriptor] = {}

    def add_column(self, row: ColumnRow) -> None:
        table = self._tables.get(row.table_name)
        if table is None:
            table = self._tables[row.table_name] = TableDescriptor()
        table.columns.append(ColumnDescriptor(
            name=row.column_name,
            data_type=row.data_type,
            is_pk=row.is_pk,
        ))

    def add_foreign_key(self, row: ForeignKeyRow) -> None:
        source = self._tables.get(row.table_name)
        if source is not None:
            source.relations.append(RelationEdge(
                relation_type=RelationKind.BELONGS_TO,
                target_table=row.foreign_table_name,
                source_col=row.column_name,
                target_col=row.foreign_column_name,
            ))
            col = source.get_column(row.column_name)
            if col is not None:
                col.is_fk = True
            else:
                logger.debug("FK column %s.%s not in catalog; edge kept untagged",
                             row.table_name, row.column_name)
        else:
            logger.debug("Skipping Belongs To edge: unknown table %s", row.table_name)

        target = self._tables.get(row.foreign_table_name)
        if target is not None:
            target.relations.append(RelationEdge(
                relation_type=RelationKind.HAS_MANY,
                target_table=row.table_name,
                source_col=row.foreign_column_name,
                target_col=row.column_name,
            ))
        else:
            logger.debug("Skipping Has Many edge: unknown table %s", row.foreign_table_name)

    def build(self) -> SchemaGraph:
        return SchemaGraph(self._tables)


def assemble(column_rows: Iterable[ColumnRow], foreign_key_rows: Iterable[ForeignKeyRow]) -> SchemaGraph:
    builder = SchemaAssembler()
    for row in column_rows:
        builder.add_column(row)
    for row in foreign_key_rows:
        builder.add_foreign_key(row)
    return builder.build()


def build_lineage(graph: SchemaGraph) -> dict:
    """Return nodes (tables) and edges (one per Belongs To relation) for graph rendering."""
    nodes: list[dict] = []
    edges: list[dict] = []
    for table_name, table in graph.root.items():
        nodes.append({"id": table_name, "label": table_name, "column_count": len(table.columns)})
        for rel in table.relations:
            if rel.relation_type is not RelationKind.BELONGS_TO:
                continue
            edges.append({
                "source":        table_name,
                "target":        rel.target_table,
                "source_column": rel.source_col,
                "target_column": rel.target_col,
                "label":         f"{rel.source_col} → {rel.target_table}.{rel.target_col}",
            })
    return {
        "node_count": len(nodes),
        "edge_count": len(edges),
        "nodes":      nodes,
        "edges":      edges,
    }

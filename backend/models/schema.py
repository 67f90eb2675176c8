"""Pydantic schemas for the reconstructed table / column / relationship graph."""
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ColumnRow(NamedTuple):
    """One row of the column catalog query, ordered by table then ordinal position."""
    table_name: str
    column_name: str
    data_type: str
    is_pk: bool


class ForeignKeyRow(NamedTuple):
    """One single-column foreign-key constraint: table.column → foreign_table.foreign_column."""
    table_name: str
    column_name: str
    foreign_table_name: str
    foreign_column_name: str


class RelationKind(str, Enum):
    BELONGS_TO = "Belongs To"   # this table holds the FK column
    HAS_MANY = "Has Many"       # another table's FK points here


class ColumnDescriptor(BaseModel):
    name: str
    data_type: str
    is_pk: bool = False
    is_fk: bool = False


class RelationEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    relation_type: RelationKind
    target_table: str
    source_col: str
    target_col: str


class TableDescriptor(BaseModel):
    columns: list[ColumnDescriptor] = Field(default_factory=list)
    relations: list[RelationEdge] = Field(default_factory=list)

    def get_column(self, name: str) -> Optional[ColumnDescriptor]:
        for col in self.columns:
            if col.name == name:
                return col
        return None


class SchemaGraph(RootModel[dict[str, TableDescriptor]]):
    """table name → TableDescriptor, in catalog order."""

    def __getitem__(self, table_name: str) -> TableDescriptor:
        return self.root[table_name]

    def __contains__(self, table_name: str) -> bool:
        return table_name in self.root

    def __len__(self) -> int:
        return len(self.root)

    def table_names(self) -> list[str]:
        return list(self.root.keys())

import logging
from unittest.mock import patch

from core.schema_assembler import SchemaAssembler, assemble, build_lineage
from models.schema import ColumnRow, ForeignKeyRow, RelationKind, TableDescriptor

def test_blog_scenario(blog_column_rows, blog_fk_rows):
    graph = assemble(blog_column_rows, blog_fk_rows)

    users, posts = graph["users"], graph["posts"]
    assert len(users.relations) == 1
    has_many = users.relations[0]
    assert has_many.relation_type == RelationKind.HAS_MANY
    assert (has_many.target_table, has_many.source_col, has_many.target_col) == ("posts", "id", "user_id")

    assert len(posts.relations) == 1
    belongs_to = posts.relations[0]
    assert belongs_to.relation_type == RelationKind.BELONGS_TO
    assert (belongs_to.target_table, belongs_to.source_col, belongs_to.target_col) == ("users", "user_id", "id")

    assert posts.get_column("user_id").is_fk is True
    assert posts.get_column("id").is_fk is False
    assert users.get_column("id").is_pk is True

def test_columns_grouped_in_input_order():
    rows = [
        ColumnRow("a", "z_last", "text", False),
        ColumnRow("a", "a_first", "text", False),
        ColumnRow("b", "id", "int8", True),
        ColumnRow("a", "m_mid", "int4", False),
    ]
    graph = assemble(rows, [])
    assert graph.table_names() == ["a", "b"]
    assert [c.name for c in graph["a"].columns] == ["z_last", "a_first", "m_mid"]
    assert graph["b"].columns[0].data_type == "int8"

def test_table_without_relations_is_present(blog_column_rows):
    graph = assemble(blog_column_rows, [])
    assert graph["users"].relations == []
    assert graph["posts"].relations == []
    assert all(not c.is_fk for c in graph["posts"].columns)

def test_fk_to_unknown_table_is_tolerated():
    rows = [ColumnRow("posts", "id", "int4", True), ColumnRow("posts", "author_id", "int4", False)]
    fks = [ForeignKeyRow("posts", "author_id", "authors", "id")]
    graph = assemble(rows, fks)

    assert "authors" not in graph
    assert len(graph["posts"].relations) == 1
    assert graph["posts"].relations[0].relation_type == RelationKind.BELONGS_TO
    assert graph["posts"].get_column("author_id").is_fk is True

def test_fk_from_unknown_table_adds_only_has_many():
    rows = [ColumnRow("users", "id", "int4", True)]
    fks = [ForeignKeyRow("ghost", "user_id", "users", "id")]
    graph = assemble(rows, fks)

    assert len(graph) == 1
    assert graph["users"].relations[0].relation_type == RelationKind.HAS_MANY
    assert graph["users"].relations[0].target_table == "ghost"

def test_fk_on_missing_column_keeps_edge_untagged(caplog):
    rows = [ColumnRow("posts", "id", "int4", True), ColumnRow("users", "id", "int4", True)]
    fks = [ForeignKeyRow("posts", "dropped_col", "users", "id")]
    with caplog.at_level(logging.DEBUG, logger="core.schema_assembler"):
        graph = assemble(rows, fks)

    assert graph["posts"].relations[0].source_col == "dropped_col"
    assert not any(c.is_fk for c in graph["posts"].columns)
    assert "dropped_col" in caplog.text

def test_has_many_added_even_if_target_column_missing():
    rows = [ColumnRow("posts", "user_id", "int4", False), ColumnRow("users", "uid", "int4", True)]
    graph = assemble(rows, [ForeignKeyRow("posts", "user_id", "users", "id")])
    assert graph["users"].relations[0].source_col == "id"

def test_multiple_fks_to_same_target_are_not_deduplicated():
    rows = [
        ColumnRow("messages", "sender_id", "int4", False),
        ColumnRow("messages", "recipient_id", "int4", False),
        ColumnRow("users", "id", "int4", True),
    ]
    fks = [
        ForeignKeyRow("messages", "sender_id", "users", "id"),
        ForeignKeyRow("messages", "recipient_id", "users", "id"),
        ForeignKeyRow("messages", "sender_id", "users", "id"),
    ]
    graph = assemble(rows, fks)
    assert [r.source_col for r in graph["messages"].relations] == ["sender_id", "recipient_id", "sender_id"]
    assert [r.target_col for r in graph["users"].relations] == ["sender_id", "recipient_id", "sender_id"]

def test_builder_accepts_rows_incrementally(blog_column_rows, blog_fk_rows):
    builder = SchemaAssembler()
    for row in blog_column_rows:
        builder.add_column(row)
    builder.add_foreign_key(blog_fk_rows[0])
    assert builder.build().model_dump() == assemble(blog_column_rows, blog_fk_rows).model_dump()

def test_build_lineage(blog_column_rows, blog_fk_rows):
    lineage = build_lineage(assemble(blog_column_rows, blog_fk_rows))
    assert lineage["node_count"] == 2
    assert lineage["edge_count"] == 1
    assert lineage["nodes"][0] == {"id": "users", "label": "users", "column_count": 2}
    edge = lineage["edges"][0]
    assert (edge["source"], edge["target"]) == ("posts", "users")
    assert edge["label"] == "user_id → users.id"

def test_table_descriptor_created_once_per_table(blog_column_rows):
    with patch("core.schema_assembler.TableDescriptor", wraps=TableDescriptor) as mock_table:
        graph = assemble(blog_column_rows, [])
    assert mock_table.call_count == 2
    assert [c.name for c in graph["users"].columns] == ["id", "name"]

from core.db_connector import open_connection, reflect_schema  # noqa: F401
from core.schema_assembler import assemble, build_lineage  # noqa: F401
from core.value_coercer import coerce  # noqa: F401
from core.query_runner import execute, preview  # noqa: F401

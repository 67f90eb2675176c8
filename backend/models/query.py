"""Request bodies for ad-hoc SQL execution and table preview."""
from pydantic import Field

from models.connection import ConnectionRequest


class ExecRequest(ConnectionRequest):
    sql: str = Field(..., min_length=1, description="Statement executed verbatim")


class PreviewRequest(ConnectionRequest):
    table: str = Field(..., min_length=1, description="Table name, letters/digits/underscore only")

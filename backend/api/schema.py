"""POST /api/schema — reflect the public schema into a table → {columns, relations} map."""
import logging
from fastapi import APIRouter, HTTPException

from core.db_connector import reflect_schema
from models.connection import ConnectionRequest
from models.schema import SchemaGraph

router = APIRouter()
logger = logging.getLogger(__name__)


def load_graph(req: ConnectionRequest) -> SchemaGraph:
    try:
        return reflect_schema(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Schema reflection failed")
        raise HTTPException(status_code=500, detail=f"Schema reflection error: {e}")


@router.post("/schema", response_model=SchemaGraph)
def get_schema(req: ConnectionRequest):
    return load_graph(req)

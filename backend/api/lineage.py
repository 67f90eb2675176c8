"""POST /api/lineage — FK relationship graph as nodes and edges for rendering."""
import logging
from fastapi import APIRouter

from api.schema import load_graph
from core.schema_assembler import build_lineage
from models.connection import ConnectionRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/lineage")
def get_lineage(req: ConnectionRequest):
    """Return nodes (tables) and edges (Belongs To relations)."""
    lineage = build_lineage(load_graph(req))
    logger.info("Lineage: %d nodes, %d edges", lineage["node_count"], lineage["edge_count"])
    return lineage

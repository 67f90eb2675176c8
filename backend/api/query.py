"""POST /api/exec and /api/preview — run SQL and return rows as JSON objects."""
import logging
from fastapi import APIRouter, HTTPException

from core.query_runner import execute, preview
from models.query import ExecRequest, PreviewRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/exec")
def exec_sql(req: ExecRequest):
    try:
        return execute(req, req.sql)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Query execution failed")
        raise HTTPException(status_code=500, detail=f"Query error: {e}")


@router.post("/preview")
def preview_rows(req: PreviewRequest):
    try:
        return preview(req, req.table)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Preview failed for %s", req.table)
        raise HTTPException(status_code=500, detail=f"Preview error: {e}")

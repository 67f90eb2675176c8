"""GET /api/health — liveness check."""
from fastapi import APIRouter

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
def health_check():
    return {"status": "ok", "version": VERSION}

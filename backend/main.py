"""
pgscope — PostgreSQL schema graph and ad-hoc query service.
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import health, schema, lineage, query
from config import settings

# ── Logging ──────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("pgscope")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("pgscope API starting up…")
    yield
    logger.info("pgscope API shutting down.")


# ── App ───────────────────────────────────────────────────────────────────────
app = FastAPI(
    title="pgscope",
    description="Schema relationship graph and ad-hoc SQL results as JSON.",
    version=health.VERSION,
    lifespan=lifespan,
)

# ── CORS ──────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(health.router,  prefix="/api")
app.include_router(schema.router,  prefix="/api")
app.include_router(lineage.router, prefix="/api")
app.include_router(query.router,   prefix="/api")


def run():
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)

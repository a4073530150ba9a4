"""Vessel-type proxy — FastAPI backend."""
import logging
import os
import subprocess
import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

# Request outcomes and connection failures are logged at INFO and above.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import router
from api.vessel_types import error_response, router as vessel_types_router
from db import dispose_connector
from schemas.health import HealthResponse
from utils.config import CORS_ALLOW_ORIGINS, DATABASE_URL, RUN_MIGRATIONS

LOG = logging.getLogger(__name__)

app = FastAPI(
    title="Vessel Type Proxy",
    description="CRUD proxy for the fleet dashboard's vessel-type table",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")
app.include_router(vessel_types_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors (400), not 422."""
    details = "; ".join(str(err.get("msg", "")) for err in exc.errors())
    return error_response(400, "Invalid JSON body", details or None)


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Explicit health route so /api/health is always available."""
    return HealthResponse()


@app.on_event("startup")
def startup() -> None:
    """Run DB migrations when RUN_MIGRATIONS=true and a migration target is configured."""
    if not RUN_MIGRATIONS:
        return
    if not DATABASE_URL:
        raise RuntimeError("RUN_MIGRATIONS=true requires DATABASE_URL")
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    result = subprocess.run(
        [sys.executable, "-m", "alembic", "upgrade", "head"],
        cwd=backend_dir,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Alembic upgrade failed: {result.stderr or result.stdout}")
    LOG.info("Migrations applied")


@app.on_event("shutdown")
def shutdown() -> None:
    """Close pooled database connections."""
    dispose_connector()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "vessel-type-proxy", "docs": "/docs", "health": "/api/health"}

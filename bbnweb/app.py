import logging
import time
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .core.config import Config
from .core.middleware import log_requests, global_exception_handler
from .pages import router as pages_router
from .services.supabase_service import check_connection

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Initialize FastAPI
app = FastAPI(title="Beyond Beauty Network")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(pages_router)


@app.get("/health")
async def health_check():
    """Report whether configuration and the Supabase auth backend are usable.

    Pages still render while Supabase is down (visitors are treated as
    signed out), so an unhealthy report means degraded auth, not an outage.
    """
    started = time.time()
    checks = {"config": "ok", "supabase": "skipped"}
    error = None

    try:
        Config.validate()
    except ValueError as e:
        checks["config"] = "missing"
        error = str(e)
    else:
        try:
            check_connection()
            checks["supabase"] = "ok"
        except Exception as e:
            checks["supabase"] = "unreachable"
            error = str(e)

    elapsed_ms = round((time.time() - started) * 1000, 2)
    body = {
        "status": "unhealthy" if error else "healthy",
        "service": "bbn-website",
        "environment": Config.ENVIRONMENT,
        "checks": checks,
        "timestamp": datetime.now().isoformat(),
        "response_time_ms": elapsed_ms,
    }
    if error:
        logger.error(f"Health check failed: {error} - checks: {checks}")
        body["error"] = error
    return body

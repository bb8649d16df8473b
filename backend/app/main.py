"""Unit Converter — FastAPI application entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from app.config import settings
from app.core.middleware import log_requests, global_exception_handler
from app.api.routes_dimensions import router as dimensions_router
from app.api.routes_convert import router as convert_router
from app.api.routes_session import router as session_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Convert values between units of length, temperature, currency and more.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(dimensions_router, prefix="/api")
app.include_router(convert_router, prefix="/api")
app.include_router(session_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0", "default_dimension": settings.default_dimension}


# ── Serve frontend static files ─────────────────────────────────────────
# When running from PyInstaller, _MEIPASS points to the temp extract dir.
# In development, the frontend/dist folder sits alongside the backend.

def _find_frontend_dist() -> Optional[Path]:
    """Locate the built frontend dist folder."""
    if getattr(sys, "_MEIPASS", None):
        candidate = Path(sys._MEIPASS) / "frontend_dist"
        if candidate.is_dir():
            return candidate
    candidate = Path(__file__).resolve().parent.parent.parent / "frontend" / "dist"
    if candidate.is_dir():
        return candidate
    return None


_frontend = _find_frontend_dist()
if _frontend:
    logger.info("Serving frontend from %s", _frontend)
    app.mount("/assets", StaticFiles(directory=str(_frontend / "assets")), name="static")

    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        """Serve index.html for all non-API routes (SPA fallback)."""
        file = _frontend / full_path
        if full_path and file.is_file():
            return FileResponse(str(file))
        return FileResponse(str(_frontend / "index.html"))

"""
Entry point for the Mountain Service.

Run locally:
    uvicorn mountains.main:app --reload --port 8080
or
    mountain-server

Interactive docs available at:
    http://localhost:8080/docs  (Swagger UI)
    http://localhost:8080/redoc (ReDoc)
"""

import logging

import uvicorn
from fastapi import FastAPI

from mountains.apis.mountain import router as mountain_router
from mountains.config import settings

# ── Logging ───────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)

# ── FastAPI app ───────────────────────────────────────────────────────────────
app = FastAPI(
    title=settings.app_title,
    description=(
        "In-memory CRUD service for mountain records. Data lives for the lifetime "
        "of the process only."
    ),
    version="1.0.0",
    license_info={"name": "MIT"},
)

# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(mountain_router)


# ── Health check ──────────────────────────────────────────────────────────────
@app.get("/health", tags=["Health"], summary="Health check")
def health() -> dict:
    """Returns 200 OK when the service is running."""
    return {"status": "ok"}


def run() -> None:
    """Start the server with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

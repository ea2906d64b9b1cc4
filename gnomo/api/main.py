"""FastAPI application for the Gnomo quote engine.

Note: The engine is pure and cheap, so handlers run it inline. Pool state
comes from the PoolSource provider; nothing here talks to the chain.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gnomo import __version__
from gnomo.api.endpoints import router
from gnomo.errors import EngineError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("GNOMO_HOST", "0.0.0.0")
PORT = int(os.environ.get("GNOMO_PORT", "8000"))
DEBUG = os.environ.get("GNOMO_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Gnomo Quote Engine",
    description="Quotes, slippage figures and price history for the Gnomo DEX",
    version=__version__,
)


@app.exception_handler(EngineError)
async def engine_error_handler(request: Request, exc: EngineError) -> JSONResponse:
    """Map engine input errors (bad price, tick out of range, ...) to 400."""
    logger.info(
        "engine_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - GNOMO_HOST: Host to bind to (default: 0.0.0.0)
    - GNOMO_PORT: Port to bind to (default: 8000)
    - GNOMO_DEBUG: Enable debug/reload mode (default: false)
    - GNOMO_HISTORY_PATH: JSON file for price history (default: in memory)
    """
    uvicorn.run(
        "gnomo.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

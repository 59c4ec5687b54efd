import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from spaserve.config import ServerConfig
from spaserve.errors import FileReadError
from spaserve.static import SPAStaticFiles

logger = logging.getLogger(__name__)


# ─── App Setup ────────────────────────────────────────────────────────────────

def create_app(config: ServerConfig) -> FastAPI:
    """Build the ASGI app serving config.static_root with SPA fallback."""
    # No docs routes: every path belongs to the static site
    app = FastAPI(title="spaserve", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_exception_handler(FileReadError, file_read_error_handler)

    app.mount(
        "/",
        SPAStaticFiles(directory=config.static_root, fallback=config.fallback),
        name="static",
    )
    return app


# ─── Error Handling ───────────────────────────────────────────────────────────

async def file_read_error_handler(request: Request, exc: FileReadError) -> PlainTextResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return PlainTextResponse("Internal Server Error", status_code=500)

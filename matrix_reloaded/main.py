import asyncio
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Union

from fastapi import FastAPI

from matrix_reloaded import __version__
from matrix_reloaded.core.logfire_config import log_info, log_warning, instrument_fastapi
from matrix_reloaded.routers import matrix_router, viewer_router
from matrix_reloaded.services.pipeline import MatrixPipeline
from matrix_reloaded.state.connections import ConnectionStore

VIEWER_PATH = Path(__file__).parent / "static" / "viewer.html"


def read_viewer_html() -> str:
    return VIEWER_PATH.read_text(encoding="utf-8")


def create_app(file_path: Union[str, Path], watch: bool = True) -> FastAPI:
    """
    Build the app for one decision matrix file.

    On startup the file is exported once and, when watch is set, watched for
    changes until shutdown.
    """
    connections = ConnectionStore()
    pipeline = MatrixPipeline(file_path, connections)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events"""
        # Startup
        log_info("matrix-reloaded starting up...", path=str(pipeline.file_path))
        app.state.viewer_html = read_viewer_html()

        # An invalid file is not fatal, the user can fix it and save again
        if not await pipeline.regenerate():
            log_warning("Initial XLSX export failed, serving anyway", path=str(pipeline.file_path))

        stop_event = asyncio.Event()
        watcher = asyncio.create_task(pipeline.watch(stop_event)) if watch else None

        yield

        # Shutdown
        log_info("Shutting down...")
        stop_event.set()
        if watcher is not None:
            await watcher

    app = FastAPI(
        title="matrix-reloaded",
        description="Live decision matrix viewer and Excel exporter",
        version=__version__,
        lifespan=lifespan
    )
    app.state.pipeline = pipeline
    app.state.connections = connections

    # Instrument FastAPI with Logfire for automatic request/response logging
    instrument_fastapi(app)

    app.include_router(viewer_router)
    app.include_router(matrix_router)

    return app

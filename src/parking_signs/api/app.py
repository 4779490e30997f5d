"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from parking_signs.api.capture_page import CAPTURE_PAGE_HTML
from parking_signs.app_logging import configure_logging
from parking_signs.containers import AppContainer
from parking_signs.domain.verdict import AnalysisFailure, AnalysisRequest

ANALYSIS_FAILED = "Failed to analyze parking signs"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    static_root = _resolve_static_root(container.settings.static_dir)
    if container.settings.static_dir and static_root is None:
        logger.warning(
            "Static directory has no index.html, serving built-in page",
            extra={"static_dir": container.settings.static_dir},
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def limit_request_size(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject bodies larger than the configured ceiling."""
        max_bytes = request.app.state.container.settings.max_request_bytes
        length = request.headers.get("content-length")
        if length is not None and length.isdigit():
            too_large = int(length) > max_bytes
        elif request.method in {"POST", "PUT", "PATCH"}:
            # Chunked bodies carry no length header; buffered body is replayed.
            too_large = len(await request.body()) > max_bytes
        else:
            too_large = False
        if too_large:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"error": "Request body too large"},
            )
        return await call_next(request)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/analyze")
    async def analyze(payload: AnalysisRequest, request: Request) -> JSONResponse:
        """Analyze parking sign images and return the model's verdict."""
        state_container: AppContainer = request.app.state.container
        try:
            verdict = await state_container.analysis_service.analyze(payload.images)
        except Exception as exc:
            logger.exception(
                "Parking sign analysis failed",
                extra={"image_count": len(payload.images)},
            )
            failure = AnalysisFailure(error=ANALYSIS_FAILED, details=str(exc))
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=failure.model_dump(),
            )
        return JSONResponse(content=verdict)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def single_page(full_path: str) -> Response:
        """Serve the page entry document for any unmatched route."""
        if static_root is None:
            return HTMLResponse(CAPTURE_PAGE_HTML)
        asset = _resolve_asset(static_root, full_path)
        if asset is not None:
            return FileResponse(asset)
        return FileResponse(static_root / "index.html")

    return app


def _resolve_static_root(static_dir: str | None) -> Path | None:
    """Return the bundle directory when it holds an entry document."""
    if not static_dir:
        return None
    root = Path(static_dir).resolve()
    if not (root / "index.html").is_file():
        return None
    return root


def _resolve_asset(root: Path, relative: str) -> Path | None:
    """Return a file inside the bundle directory, refusing path traversal."""
    if not relative:
        return None
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate

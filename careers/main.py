import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from careers.app.api import routes_auth, routes_jobs
from careers.app.api.errors import install_exception_handlers
from careers.config import Settings, configure_logging
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore
from careers.infrastructure.seed import seed_store

logger = logging.getLogger("uvicorn.access")


class LogRequestsMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and elapsed time for every request."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


def _mount_frontend(app: FastAPI, settings: Settings) -> None:
    """Serve a built frontend from settings.static_dir when it exists."""
    static_path = Path(settings.static_dir)
    if not static_path.is_dir():
        return
    api_root = settings.api_prefix.lstrip("/")

    if (static_path / "assets").is_dir():
        app.mount("/assets", StaticFiles(directory=static_path / "assets"), name="assets")

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(static_path / "index.html")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        if (api_root and full_path.startswith(api_root + "/")) or full_path.startswith("assets/"):
            raise HTTPException(status_code=404, detail="Not found")
        path = static_path / full_path
        if path.is_file():
            return FileResponse(path)
        return FileResponse(static_path / "index.html")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[InMemoryRecordStore] = None,
) -> FastAPI:
    """
    Build the API. A store passed in is used as-is; otherwise a fresh one is
    created and seeded before the app is returned.
    """
    settings = settings or Settings()
    if store is None:
        store = InMemoryRecordStore()
        seed_store(
            store,
            admin_username=settings.admin_username,
            admin_password=settings.admin_password,
            include_sample_jobs=settings.seed_sample_jobs,
        )

    app = FastAPI(title="Careers API", version="0.1.0")
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(LogRequestsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    app.include_router(routes_jobs.router, prefix=settings.api_prefix)
    app.include_router(routes_auth.router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health(request: Request):
        return {"status": "ok", "jobs": request.app.state.store.count_jobs()}

    # Catch-all SPA route must come after the API routes
    _mount_frontend(app, settings)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    configure_logging(app.state.settings.log_level)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=app.state.settings.log_level.lower())

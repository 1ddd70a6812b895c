from contextlib import asynccontextmanager
import logging
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import httpx
import uvicorn

from mangazen.config import Settings
from mangazen.forwarding import forward
from mangazen.routes import FORWARD_ROUTES, ForwardRoute
from mangazen.utils import now_iso_str

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    async with httpx.AsyncClient(follow_redirects=True) as client:
        app.state.http_client = client
        logger.info("MyMangazen Server running on port %s", settings.port)
        logger.info("API Base: http://localhost:%s/api", settings.port)
        logger.info("Frontend: http://localhost:%s", settings.port)
        yield
    logger.info("MyMangazen Server shutting down")


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def _forward_endpoint(route: ForwardRoute):
    async def endpoint(request: Request, client: httpx.AsyncClient = Depends(get_http_client)):
        params = route.extract(request)
        return await forward(client, request.app.state.settings.upstream_url, route, params)

    endpoint.__name__ = f"{route.name}_endpoint"
    return endpoint


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="MyMangazen", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    # Browser frontend may be served from another origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    for route in FORWARD_ROUTES:
        app.add_api_route(route.path, _forward_endpoint(route), methods=["GET"], name=route.name)

    @app.get("/api/health")
    async def health():
        return {
            "status": "OK",
            "message": "MyMangazen API is running!",
            "timestamp": now_iso_str(),
        }

    @app.get("/{full_path:path}")
    async def frontend(full_path: str):
        static_root = Path(settings.static_dir).resolve()
        if full_path:
            try:
                candidate = (static_root / full_path).resolve()
                servable = candidate.is_relative_to(static_root) and candidate.is_file()
            except (ValueError, OSError):
                servable = False
            if servable:
                return FileResponse(candidate)
        index = static_root / "index.html"
        if not index.is_file():
            raise StarletteHTTPException(status_code=404, detail="Not Found")
        return FileResponse(index)

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("main:create_app", factory=True, host=settings.host, port=settings.port, reload=False)

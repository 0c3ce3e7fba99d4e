import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse


# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

from atomic_offchain import AtomicExplorerContext
from fields_api.config import explorer_settings, settings
from fields_api.routers.api_v1.api import api_router


logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Opens one explorer API client shared by all requests and closes it on
    shutdown. A client already placed on app.state (tests) is left alone.
    """
    owns_explorer = getattr(app.state, "explorer", None) is None
    if owns_explorer:
        app.state.explorer = AtomicExplorerContext(explorer_settings)

    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Explorer API: {explorer_settings.api_root}")
    logger.info(f"API key configured: {'Yes' if settings.api_key else 'No'}")

    yield  # Application runs here

    logger.info("Shutting down API")
    if owns_explorer:
        await app.state.explorer.aclose()
        app.state.explorer = None
        logger.info("Explorer API client closed")


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Basic HTML response."""
    body = (
        "<html>"
        "<body style='padding: 10px;'>"
        "<h1>Welcome to the AtomicAssets Fields API</h1>"
        "<div>"
        "Check the docs: <a href='/docs'>here</a>"
        "</div>"
        "</body>"
        "</html>"
    )

    return HTMLResponse(content=body)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        - status: "healthy" if the explorer client is initialized
        - explorer: explorer endpoint configuration
        - api_version: API version
        - environment: Current environment
    """
    explorer = getattr(app.state, "explorer", None)
    health_status = {
        "status": "healthy" if explorer is not None else "unhealthy",
        "api_version": settings.api_version,
        "environment": settings.environment,
        "explorer": {
            "base_url": explorer_settings.base_url,
            "namespace": explorer_settings.namespace,
            "initialized": explorer is not None,
        },
    }

    return JSONResponse(content=health_status, status_code=200 if explorer is not None else 503)


app.include_router(api_router, prefix=settings.API_V1_STR)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fields_api.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )

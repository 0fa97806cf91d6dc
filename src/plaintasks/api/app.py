"""FastAPI application factory for the todo REST API."""

from fastapi import APIRouter, FastAPI

from plaintasks.api.routes import register_routes
from plaintasks.utils.dates import DEFAULT_TIMESTAMP_FORMAT


def create_app(timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> FastAPI:
    """Build and return a FastAPI app serving the todo tools under /api."""
    app = FastAPI(title="plaintasks", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_routes(api, timestamp_format=timestamp_format)
    app.include_router(api)

    return app

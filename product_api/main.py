# product_api/main.py
import asyncio
import logging
from typing import Optional

import uvicorn

from .config import Settings, get_settings
from .database import ProductStore
from .graphql_api import create_graphql_app
from .rest import create_rest_app

logger = logging.getLogger(__name__)

# ---------------------------
# Process-wide store, shared by both apps
# ---------------------------
store = ProductStore()
app = create_rest_app(store)
graphql_app = create_graphql_app(store)


def _display_host(host: str) -> str:
    return "localhost" if host in ("0.0.0.0", "::") else host


async def serve(settings: Optional[Settings] = None) -> None:
    """Run the REST and GraphQL listeners side by side in one event loop."""
    settings = settings or get_settings()

    rest_server = uvicorn.Server(uvicorn.Config(
        app, host=settings.host, port=settings.rest_port, log_level=settings.log_level,
    ))
    graphql_server = uvicorn.Server(uvicorn.Config(
        graphql_app, host=settings.host, port=settings.graphql_port, log_level=settings.log_level,
    ))

    host = _display_host(settings.host)
    logger.info(f"GraphQL server running at http://{host}:{settings.graphql_port}/graphql")
    logger.info(f"REST server running at http://{host}:{settings.rest_port}")
    logger.info(f"Swagger docs at http://{host}:{settings.rest_port}/api-docs")

    await asyncio.gather(rest_server.serve(), graphql_server.serve())


def run(settings: Optional[Settings] = None) -> None:
    asyncio.run(serve(settings))

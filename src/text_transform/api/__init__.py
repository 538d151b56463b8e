"""
Text Transform REST API

FastAPI application exposing the tool catalog and transformations.

Usage:
    txtx serve
    uvicorn text_transform.api:create_app --factory
"""

from typing import Optional

from fastapi import FastAPI

from text_transform import __version__
from text_transform.api.errors import ApiException, register_exception_handlers
from text_transform.api.routes import router
from text_transform.config import Settings, get_settings
from text_transform.logging_config import get_logger
from text_transform.runner import Toolkit, get_toolkit

logger = get_logger("api")


def create_app(toolkit: Optional[Toolkit] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create the API application.

    Args:
        toolkit: Registries to serve (default: the packaged catalog)
        settings: Runtime settings (default: from the environment)
    """
    app = FastAPI(
        title="Text Transform API",
        description="Catalog of text and data transformation tools",
        version=__version__,
    )
    app.state.toolkit = toolkit or get_toolkit()
    app.state.settings = settings or get_settings()

    register_exception_handlers(app)
    app.include_router(router)

    logger.info("API ready with %d tools", app.state.toolkit.tools.total_tool_count())
    return app


__all__ = ["ApiException", "create_app"]

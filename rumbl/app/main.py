"""
Main entrypoint for the Rumbl web application.

This module assembles the FastAPI application: it sets up logging,
builds the Jinja2 template renderer, includes the HTML page router at
the root and the versioned JSON router under ``/api/v1``.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn rumbl.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.templating import build_templates
from .web.router import router as web_router

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


async def render_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    """Render 404s on page routes with the ``errors/404.html`` template.

    API routes and every other status keep FastAPI's JSON error body.
    """
    if exc.status_code == 404 and not request.url.path.startswith("/api/"):
        logger.info("Page not found: %s", request.url.path)
        return request.app.state.templates.TemplateResponse(
            request,
            "errors/404.html",
            {"detail": exc.detail},
            status_code=exc.status_code,
        )
    return await http_exception_handler(request, exc)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.templates = build_templates(app_settings.templates_dir)

    app.include_router(web_router)
    app.include_router(v1_router, prefix=API_PREFIX)
    app.add_exception_handler(StarletteHTTPException, render_http_exception)

    logger.debug("Templates loaded from %s", app_settings.templates_dir)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

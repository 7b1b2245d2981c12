"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See pastebox.core.lifespan and pastebox.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from pastebox.api import api_router
from pastebox.core.config import get_settings
from pastebox.core.exception_handlers import register_exception_handlers
from pastebox.core.lifespan import create_lifespan
from pastebox.middleware import RequestSizeLimitMiddleware
from pastebox.pages import render_help_page, render_help_text


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_upload_size)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def root(request: Request) -> Response:
        """Usage guide: plain text for curl, HTML otherwise."""
        current = get_settings()
        user_agent = request.headers.get("user-agent", "")
        if user_agent.startswith("curl/"):
            return PlainTextResponse(
                render_help_text(current.base_url, current.expiration_secs)
            )
        return HTMLResponse(
            content=render_help_page(
                current.app_name, current.base_url, current.expiration_secs
            )
        )

    app.include_router(api_router)

    return app


app = create_app()

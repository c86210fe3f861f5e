from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.templating import Jinja2Templates
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from app.api.bookmarks import router as bookmarks_router
from app.api.health import VERSION
from app.api.health import router as health_router
from app.api.metrics import router as metrics_router
from app.config import settings
from app.dashboard.routes import router as pages_router
from app.dependencies import limiter
from app.middleware.request_id import RequestIdMiddleware
from app.services.bookmark_cookie import no_store_headers
from app.utils.logging import setup_logging


_SENSITIVE_HEADERS = ("cookie", "set-cookie", "authorization")


def _filter_sensitive_data(event, hint):
    """Strip cookie values (signed bookmark tokens) from Sentry events."""
    if "request" in event:
        headers = event["request"].get("headers", {})
        for key in list(headers.keys()):
            if key.lower() in _SENSITIVE_HEADERS:
                headers[key] = "[FILTERED]"
        event["request"].pop("cookies", None)
    return event


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.sentry_dsn:
        import sentry_sdk
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.2,
            send_default_pii=False,
            before_send=_filter_sensitive_data,
        )

    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.info("Starting edge-saved...")
    if not settings.secret_configured:
        # Requests that touch the cookie will be refused with 500
        logger.error("APP_SECRET is not set; bookmark routes will refuse requests")

    yield

    logger.info("edge-saved stopped")


app = FastAPI(
    title="Edge Saved",
    description="Cookie-only article bookmarks (HMAC-signed, no database)",
    version=VERSION,
    lifespan=lifespan,
)

app.state.settings = settings

# Rate limiting (slowapi)
app.state.limiter = limiter


def _rate_limit_handler(request, exc: RateLimitExceeded):
    return JSONResponse(
        {"detail": f"Rate limit exceeded: {exc.detail}"},
        status_code=429,
        headers={"Retry-After": "60"},
    )


app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)

# Template directory
templates_dir = os.path.join(os.path.dirname(__file__), "dashboard", "templates")
app.state.templates = Jinja2Templates(directory=templates_dir)

_JSON_PREFIXES = ("/api/", "/health", "/metrics")


async def _page_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTML error page for SSR routes; API routes keep the JSON {"detail": ...} body."""
    if request.url.path.startswith(_JSON_PREFIXES):
        return await http_exception_handler(request, exc)
    response = app.state.templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
        headers=no_store_headers(),
    )
    return response


app.add_exception_handler(StarletteHTTPException, _page_http_exception_handler)

app.add_middleware(RequestIdMiddleware)

# Include API routers
app.include_router(health_router)
app.include_router(metrics_router)
app.include_router(bookmarks_router)

# Include SSR page routes (must be after API routers)
app.include_router(pages_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.app_host,
        port=settings.app_port,
        log_level="debug" if settings.debug else "info",
    )

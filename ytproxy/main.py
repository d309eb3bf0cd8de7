import uuid
from typing import Optional
import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ytproxy.api import download, health
from ytproxy.config.settings import Config, load_config
from ytproxy.core.errors import InputValidationError, ProxyError, UpstreamRateLimited
from ytproxy.core.logging import log_warning, setup_logging
from ytproxy.i18n import i18n
from ytproxy.models.response import ErrorResponse, FailureResponse, RateLimitedResponse
from ytproxy.services.conversion import ConversionService
from ytproxy.services.upstream import ConverterClient
from ytproxy.utils.locale import get_locale


async def proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    """Render ProxyError subclasses as the JSON error contract"""
    config = request.app.state.config
    locale = get_locale(request.headers.get("accept-language"), config.i18n)
    message = exc.message or i18n.get(exc.key, locale=locale, **exc.params)
    log_warning(request, f"{type(exc).__name__}: {message}")

    if isinstance(exc, UpstreamRateLimited):
        # fixed wire text, never localized
        message = i18n.get(exc.key, locale=config.i18n.default_locale)
        body = RateLimitedResponse(error=message, retryAfter=exc.retry_after)
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(by_alias=True),
            headers={"Retry-After": str(exc.retry_after)}
        )
    if isinstance(exc, InputValidationError):
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=message).model_dump())
    return JSONResponse(status_code=exc.status_code, content=FailureResponse(error=message).model_dump())


def create_app(config: Config, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """Build the application around an explicit configuration value"""
    setup_logging(config.logging)

    app = FastAPI(
        title=config.api.title,
        description=config.api.description,
        version=config.api.version,
        docs_url="/docs" if config.api.debug else None,
        redoc_url=None
    )
    app.state.config = config
    app.state.conversion_service = ConversionService(
        ConverterClient.build(config.upstream, transport=transport),
        config.upstream
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def assign_request_id(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(ProxyError, proxy_error_handler)

    # Routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(download.router, tags=["Download"])

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.conversion_service.aclose()

    return app


def build_app() -> FastAPI:
    """Application factory for `uvicorn --factory ytproxy.main:build_app`"""
    return create_app(load_config())

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.logging import get_module_logger
from infrastructure.persistence import StoreError
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware

logger = get_module_logger()


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Database failures surface as 503; the resolver never masks them."""
    logger.error(
        "store_unavailable",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=503,
        content={"detail": "Content store unavailable"},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers."""
    settings = get_settings()

    app = FastAPI(title=settings.server.API_TITLE, lifespan=lifespan)
    setup_rate_limiter(app)
    app.add_exception_handler(StoreError, store_error_handler)

    allow_origins = settings.server.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router)
    return app


handler = create_app()

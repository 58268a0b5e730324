from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

# Content endpoints sit behind the CDN, which absorbs most repeat traffic
CONTENT_RATE_LIMIT = "120/minute"
SYSTEM_RATE_LIMIT = "50/minute"


def client_key_func(request: Request) -> str:
    """Rate limit per client, using the first X-Forwarded-For hop when present."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client = forwarded_for.split(",")[0].strip()
        if client:
            return client
    return get_remote_address(request)


limiter = Limiter(
    key_func=client_key_func,
)


async def rate_limit_handler(_request: Request, exc: Exception):
    """Return 429 with a short JSON body when a limit is exceeded."""
    if isinstance(exc, RateLimitExceeded):
        return JSONResponse(
            status_code=429,
            content={"detail": "Rate limit exceeded"},
        )


def setup_rate_limiter(app: FastAPI):
    """Attach the shared limiter and its 429 handler to an application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter():
    return limiter

from typing import Optional

import httpx
from fastapi import APIRouter, FastAPI

from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.persistence import StoreError
from infrastructure.services import ContentServices
from server.server import store_error_handler


def create_test_app(
    routers: APIRouter | list[APIRouter],
    services: Optional[ContentServices] = None,
) -> FastAPI:
    """
    Create a bare FastAPI application around the given routers.

    Unlike server.create_app() there is no lifespan, CORS or request context
    middleware; only rate limiting and the StoreError handler are installed.

    Args:
        routers: Router or list of routers to include.
        services: Optional content services placed on ``app.state``.

    Returns:
        FastAPI: A configured FastAPI application.

    Example:
        app = create_test_app(cities.router, services=services)
    """
    app = FastAPI()
    setup_rate_limiter(app)
    app.add_exception_handler(StoreError, store_error_handler)

    if services is not None:
        app.state.services = services

    if not isinstance(routers, list):
        routers = [routers]
    for router in routers:
        app.include_router(router)

    return app


async def rate_limiting_helper(
    app: FastAPI,
    endpoint: str,
    request_limit: int,
    expected_status: int = 200,
    headers: Optional[dict] = None,
):
    """
    Issue ``request_limit`` GET requests, then check the next one gets a 429.

    Args:
        app: The FastAPI app instance.
        endpoint: The endpoint to test.
        request_limit: Number of requests allowed before rate limiting.
        expected_status: Expected status code for requests within the limit.
        headers: Optional headers, e.g. X-Forwarded-For to pick the client key.
    """
    transport = httpx.ASGITransport(app=app)
    headers = headers or {}

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        for i in range(request_limit):
            response = await client.get(endpoint, headers=headers)
            assert (
                response.status_code == expected_status
            ), f"Request {i+1} failed with status {response.status_code}"

        response = await client.get(endpoint, headers=headers)
        assert response.status_code == 429, "Expected rate limiting to trigger"
        assert response.json() == {"detail": "Rate limit exceeded"}

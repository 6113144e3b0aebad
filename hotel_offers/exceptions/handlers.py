import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import AuthError, InvalidQueryError, RateLimitError, UnsupportedCityError

logger = logging.getLogger(__name__)


async def auth_error_handler(_request: Request, exc: AuthError) -> JSONResponse:
    logger.error("Amadeus auth error: %s (status=%s)", exc.message, exc.status_code)
    details = exc.message
    if exc.body:
        details = f"{exc.message}: {exc.body}"
    return JSONResponse(
        status_code=500,
        content={"error": "Amadeus authentication failed", "details": details},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.client_id)
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests, please try again later."},
    )


async def unsupported_city_error_handler(
    _request: Request, exc: UnsupportedCityError
) -> JSONResponse:
    logger.warning("Unsupported city requested: %s", exc.city_code)
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def invalid_query_error_handler(_request: Request, exc: InvalidQueryError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


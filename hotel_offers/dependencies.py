from typing import Annotated

from fastapi import Depends, Request

from hotel_offers.exceptions.custom import RateLimitError
from hotel_offers.rate_limit import RateLimiter
from hotel_offers.services.resolver import OfferResolutionService


def get_resolution_service(request: Request) -> OfferResolutionService:
    return request.app.state.resolution_service


def get_rate_limiter(request: Request) -> RateLimiter | None:
    return getattr(request.app.state, "rate_limiter", None)


ResolutionDep = Annotated[OfferResolutionService, Depends(get_resolution_service)]
RateLimiterDep = Annotated[RateLimiter | None, Depends(get_rate_limiter)]


async def enforce_rate_limit(request: Request, limiter: RateLimiterDep) -> None:
    if limiter is None:
        return
    client_id = request.client.host if request.client else "unknown"
    if not limiter.admit(client_id):
        raise RateLimitError(client_id)

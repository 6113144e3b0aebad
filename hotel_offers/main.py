import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from hotel_offers.cache import OfferCache
from hotel_offers.config import Settings
from hotel_offers.exceptions.custom import (
    AuthError,
    InvalidQueryError,
    RateLimitError,
    UnsupportedCityError,
)
from hotel_offers.exceptions.handlers import (
    auth_error_handler,
    invalid_query_error_handler,
    rate_limit_error_handler,
    unsupported_city_error_handler,
)
from hotel_offers.rate_limit import RateLimiter
from hotel_offers.routers.offers import router as offers_router
from hotel_offers.services.amadeus import AmadeusService
from hotel_offers.services.auth import AccessTokenProvider
from hotel_offers.services.cascade import ProviderQueryCascade
from hotel_offers.services.geocoding import CityCoordinateResolver
from hotel_offers.services.resolver import OfferResolutionService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        token_provider = AccessTokenProvider(
            client,
            settings.amadeus_client_id,
            settings.amadeus_client_secret,
            base_url=settings.amadeus_base_url,
        )
        geocoder = CityCoordinateResolver(
            client,
            search_url=settings.geocode_url,
            user_agent=settings.geocode_user_agent,
            verbose=settings.is_development,
        )
        cascade = ProviderQueryCascade(
            AmadeusService(client, base_url=settings.amadeus_base_url),
            geocoder,
            token_provider=token_provider,
            hotel_id_limit=settings.hotel_id_limit,
            geocode_radius=settings.geocode_radius,
            verbose=settings.is_development,
        )
        app.state.resolution_service = OfferResolutionService(
            token_provider,
            cascade,
            OfferCache(ttl_seconds=settings.offer_cache_ttl_seconds),
            use_mock=settings.use_mock_hotels,
        )

        if settings.rate_limiting == "enabled":
            app.state.rate_limiter = RateLimiter(
                max_requests=settings.rate_limit_max_requests,
                window_seconds=settings.rate_limit_window_seconds,
            )
        else:
            logger.info("Rate limiting disabled")
            app.state.rate_limiter = None

        yield


app = FastAPI(title="Hotel Offers", lifespan=lifespan)

app.add_exception_handler(AuthError, auth_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(UnsupportedCityError, unsupported_city_error_handler)
app.add_exception_handler(InvalidQueryError, invalid_query_error_handler)

app.include_router(offers_router)

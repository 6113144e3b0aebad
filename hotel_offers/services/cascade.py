"""Ordered provider tiers: by-city, by-geocode, then the static catalog.

Each live tier runs the same two calls (hotel ids, then offers for up to
``hotel_id_limit`` of them) and only differs in how the hotel ids are
looked up. A tier that errors or yields nothing hands over to the next
one; the catalog tier cannot fail.
"""

import logging

import httpx

from hotel_offers.data.fallback_catalog import get_fallback_offers
from hotel_offers.exceptions.custom import AmadeusError
from hotel_offers.schemas.offers import HotelOffer, OfferSource, OffersResponse, ResolutionQuery
from hotel_offers.services.amadeus import AmadeusService, ByCity, ByGeocode, HotelLookup
from hotel_offers.services.auth import AccessTokenProvider
from hotel_offers.services.geocoding import CityCoordinateResolver

logger = logging.getLogger(__name__)


def _describe(lookup: HotelLookup) -> str:
    if isinstance(lookup, ByCity):
        return f"by-city {lookup.city_code}"
    coord = lookup.coordinate
    return f"by-geocode {coord.city_code} ({coord.latitude}, {coord.longitude})"


class ProviderQueryCascade:
    def __init__(
        self,
        amadeus: AmadeusService,
        geocoder: CityCoordinateResolver,
        token_provider: AccessTokenProvider | None = None,
        hotel_id_limit: int = 20,
        geocode_radius: int = 10,
        verbose: bool = True,
    ):
        self._amadeus = amadeus
        self._geocoder = geocoder
        self._token_provider = token_provider
        self._hotel_id_limit = hotel_id_limit
        self._geocode_radius = geocode_radius
        self._verbose = verbose

    def _log_miss(self, message: str, *args, exc: Exception | None = None) -> None:
        # Development gets the upstream detail; production only a debug line
        if not self._verbose:
            logger.debug(message, *args)
            return
        if isinstance(exc, AmadeusError):
            logger.warning(message + " (status=%s): %s", *args, exc.status_code, exc.message)
        elif exc is not None:
            logger.warning(message + ": %s", *args, exc)
        else:
            logger.warning(message, *args)

    async def fetch_tier(
        self, lookup: HotelLookup, query: ResolutionQuery, token: str
    ) -> list[HotelOffer]:
        """Run one live tier. Returns [] on any upstream failure.

        A 401 drops the cached token and retries the tier once with a fresh
        one; AuthError from that re-acquisition propagates.
        """
        label = _describe(lookup)
        try:
            return await self._fetch(lookup, query, token, label)
        except AmadeusError as exc:
            if exc.status_code != 401 or self._token_provider is None:
                self._log_miss("Tier %s failed", label, exc=exc)
                return []
            self._token_provider.invalidate(token)
        except httpx.HTTPError as exc:
            self._log_miss("Tier %s failed", label, exc=exc)
            return []

        fresh = await self._token_provider.acquire_token()
        try:
            return await self._fetch(lookup, query, fresh, label)
        except (AmadeusError, httpx.HTTPError) as exc:
            self._log_miss("Tier %s failed after token refresh", label, exc=exc)
            return []

    async def _fetch(
        self, lookup: HotelLookup, query: ResolutionQuery, token: str, label: str
    ) -> list[HotelOffer]:
        hotel_ids = await self._amadeus.list_hotel_ids(lookup, token)
        if not hotel_ids:
            self._log_miss("No hotel ids from %s", label)
            return []
        offers = await self._amadeus.get_offers(hotel_ids[: self._hotel_id_limit], query, token)
        if not offers:
            self._log_miss("No offers from %s", label)
        return offers

    def fallback(self, city_code: str) -> OffersResponse:
        return OffersResponse(offers=get_fallback_offers(city_code), source=OfferSource.mock)

    async def run(self, query: ResolutionQuery, token: str) -> OffersResponse:
        offers = await self.fetch_tier(ByCity(city_code=query.city_code), query, token)
        if offers:
            return OffersResponse(offers=offers, source=OfferSource.amadeus)

        coordinate = await self._geocoder.resolve(query.city_code)
        if coordinate is None:
            self._log_miss("No coordinates for %s, skipping geocode tier", query.city_code)
        else:
            source = OfferSource.geocode_dynamic if coordinate.dynamic else OfferSource.geocode
            if self._verbose:
                logger.warning("Falling back to %s for %s", source, query.city_code)
            lookup = ByGeocode(coordinate=coordinate, radius=self._geocode_radius)
            offers = await self.fetch_tier(lookup, query, token)
            if offers:
                return OffersResponse(offers=offers, source=source)

        if self._verbose:
            logger.warning("Falling back to mock hotel offers for %s", query.city_code)
        return self.fallback(query.city_code)

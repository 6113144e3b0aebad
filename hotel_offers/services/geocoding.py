import logging

import httpx
from pydantic import ValidationError

from hotel_offers.data.cities import CITY_COORDS
from hotel_offers.schemas.geocode import PlaceSearchResult
from hotel_offers.schemas.offers import CityCoordinate

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class CityCoordinateResolver:
    def __init__(
        self,
        client: httpx.AsyncClient,
        search_url: str = DEFAULT_SEARCH_URL,
        user_agent: str = "SmartVoyage/1.0",
        verbose: bool = True,
    ):
        self._client = client
        self._search_url = search_url
        self._headers = {"User-Agent": user_agent}
        self._verbose = verbose

    def _log_failure(self, message: str, *args) -> None:
        # Tracebacks only in development
        if self._verbose:
            logger.warning(message, *args, exc_info=True)
        else:
            logger.debug(message, *args)

    async def resolve(self, city_code: str) -> CityCoordinate | None:
        """Static table first, then a place search. Never raises."""
        known = CITY_COORDS.get(city_code)
        if known is not None:
            return known
        return await self._search(city_code)

    async def _search(self, city_code: str) -> CityCoordinate | None:
        params = {"format": "json", "q": city_code}
        try:
            resp = await self._client.get(self._search_url, params=params, headers=self._headers)
        except httpx.HTTPError:
            self._log_failure("Place search request failed for %s", city_code)
            return None

        if resp.status_code >= 400:
            logger.debug("Place search returned %s for %s", resp.status_code, city_code)
            return None

        try:
            data = resp.json()
            if not isinstance(data, list) or not data:
                logger.debug("No place search results for: %s", city_code)
                return None
            place = PlaceSearchResult(**data[0])
        except (ValueError, TypeError, ValidationError):
            self._log_failure("Unparseable place search result for %s", city_code)
            return None

        return CityCoordinate(
            city_code=city_code,
            latitude=place.lat,
            longitude=place.lon,
            dynamic=True,
        )

import logging

import httpx
from pydantic import BaseModel, ValidationError

from hotel_offers.exceptions.custom import AmadeusError
from hotel_offers.mappers.offer_mapper import map_hotel_offer
from hotel_offers.schemas.amadeus import HotelListResponse, HotelOffersResponse
from hotel_offers.schemas.offers import CityCoordinate, HotelOffer, ResolutionQuery

logger = logging.getLogger(__name__)

BY_CITY_PATH = "/v1/reference-data/locations/hotels/by-city"
BY_GEOCODE_PATH = "/v1/reference-data/locations/hotels/by-geocode"
OFFERS_PATH = "/v3/shopping/hotel-offers"


class ByCity(BaseModel):
    model_config = {"frozen": True}

    city_code: str


class ByGeocode(BaseModel):
    model_config = {"frozen": True}

    coordinate: CityCoordinate
    radius: int = 10


HotelLookup = ByCity | ByGeocode


class AmadeusService:
    def __init__(self, client: httpx.AsyncClient, base_url: str = "https://test.api.amadeus.com"):
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def _get(self, path: str, params: dict, token: str) -> dict:
        resp = await self._client.get(
            f"{self._base_url}{path}",
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )
        if resp.status_code >= 400:
            raise AmadeusError(resp.text, status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise AmadeusError(f"Invalid JSON from {path}", status_code=resp.status_code) from exc

    async def list_hotel_ids(self, lookup: HotelLookup, token: str) -> list[str]:
        if isinstance(lookup, ByCity):
            path, params = BY_CITY_PATH, {"cityCode": lookup.city_code}
        else:
            path = BY_GEOCODE_PATH
            params = {
                "latitude": lookup.coordinate.latitude,
                "longitude": lookup.coordinate.longitude,
                "radius": lookup.radius,
            }

        payload = await self._get(path, params, token)
        try:
            data = HotelListResponse(**payload)
        except (TypeError, ValidationError) as exc:
            raise AmadeusError(f"Unexpected hotel list payload: {exc}") from exc
        return [hotel.hotelId for hotel in data.data]

    async def get_offers(
        self, hotel_ids: list[str], query: ResolutionQuery, token: str
    ) -> list[HotelOffer]:
        params = {
            "hotelIds": ",".join(hotel_ids),
            "checkInDate": query.check_in.isoformat(),
            "checkOutDate": query.check_out.isoformat(),
            "adults": query.adults,
        }
        payload = await self._get(OFFERS_PATH, params, token)
        try:
            data = HotelOffersResponse(**payload)
            return [map_hotel_offer(record) for record in data.data]
        except (TypeError, ValidationError) as exc:
            raise AmadeusError(f"Unexpected hotel offers payload: {exc}") from exc

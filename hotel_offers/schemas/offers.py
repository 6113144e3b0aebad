from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field


class OfferSource(StrEnum):
    amadeus = "amadeus"
    geocode = "geocode"
    geocode_dynamic = "geocode-dynamic"
    mock = "mock"


class Review(BaseModel):
    model_config = {"frozen": True}

    username: str
    rating: float
    comment: str


class GeoPoint(BaseModel):
    model_config = {"frozen": True}

    lat: float
    lng: float


class Room(BaseModel):
    model_config = {"frozen": True}

    type: str
    price: str
    images: list[str] = []
    availability: bool


class Policies(BaseModel):
    model_config = {"frozen": True}

    checkIn: str
    checkOut: str
    cancellation: str
    payment: str


class NearbyPlace(BaseModel):
    model_config = {"frozen": True}

    name: str
    type: str
    distance: str


class HotelOffer(BaseModel):
    model_config = {"frozen": True}

    name: str
    address: str
    price: str | None  # decimal string as returned upstream, e.g. "120.00"
    bookingLink: str | None
    imageUrl: str
    description: str
    rating: float = Field(ge=0, le=5)
    images: list[str] = []
    # Detail fields; only the hand-authored catalog fills these in
    amenities: list[str] | None = None
    reviews: list[Review] | None = None
    location: GeoPoint | None = None
    rooms: list[Room] | None = None
    specialOffers: list[str] | None = None
    policies: Policies | None = None
    accessibility: list[str] | None = None
    nearby: list[NearbyPlace] | None = None


class OffersResponse(BaseModel):
    offers: list[HotelOffer]
    source: OfferSource


class ResolutionQuery(BaseModel):
    model_config = {"frozen": True}

    city_code: str
    check_in: date
    check_out: date
    adults: int = Field(ge=1)

    @property
    def cache_key(self) -> str:
        return f"{self.city_code}_{self.check_in.isoformat()}_{self.check_out.isoformat()}_{self.adults}"


class CityCoordinate(BaseModel):
    model_config = {"frozen": True}

    city_code: str
    latitude: float
    longitude: float
    dynamic: bool = False  # True when resolved via place search, not the static table


class City(BaseModel):
    code: str
    name: str


class CitiesResponse(BaseModel):
    cities: list[City]

from pydantic import BaseModel


class TokenResponse(BaseModel):
    access_token: str
    expires_in: int = 1799


class HotelReference(BaseModel):
    hotelId: str
    name: str | None = None


class HotelListResponse(BaseModel):
    data: list[HotelReference] = []


class HotelAddress(BaseModel):
    lines: list[str] = []
    cityName: str | None = None
    countryCode: str | None = None


class HotelImage(BaseModel):
    url: str


class HotelDescription(BaseModel):
    text: str | None = None


class HotelRating(BaseModel):
    rating: float | None = None


class HotelInfo(BaseModel):
    hotelId: str | None = None
    name: str = ""
    address: HotelAddress | None = None
    images: list[HotelImage] = []
    description: HotelDescription | None = None
    # Test environment sends either {"rating": n} or a bare star count
    rating: HotelRating | float | None = None


class OfferPrice(BaseModel):
    total: str | None = None
    currency: str | None = None


class OfferUrls(BaseModel):
    booking: str | None = None


class Offer(BaseModel):
    id: str | None = None
    price: OfferPrice | None = None
    urls: OfferUrls | None = None


class HotelOfferRecord(BaseModel):
    hotel: HotelInfo
    offers: list[Offer] = []


class HotelOffersResponse(BaseModel):
    data: list[HotelOfferRecord] = []

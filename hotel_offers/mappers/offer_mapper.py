from hotel_offers.schemas.amadeus import HotelInfo, HotelOfferRecord
from hotel_offers.schemas.offers import HotelOffer


def _rating(hotel: HotelInfo) -> float:
    raw = hotel.rating
    if raw is None:
        return 0.0
    value = raw if isinstance(raw, (int, float)) else raw.rating
    if value is None:
        return 0.0
    return min(max(float(value), 0.0), 5.0)


def map_hotel_offer(record: HotelOfferRecord) -> HotelOffer:
    """Flatten an upstream hotel-offer record into a HotelOffer.

    Only the first room offer is considered for price and booking link.
    """
    hotel = record.hotel
    offer = record.offers[0] if record.offers else None
    images = [image.url for image in hotel.images]

    return HotelOffer(
        name=hotel.name,
        address=", ".join(hotel.address.lines) if hotel.address else "",
        price=offer.price.total if offer and offer.price else None,
        bookingLink=offer.urls.booking if offer and offer.urls else None,
        imageUrl=images[0] if images else "",
        description=(hotel.description.text or "") if hotel.description else "",
        rating=_rating(hotel),
        images=images,
    )

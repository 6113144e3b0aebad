"""Hand-authored offers served when no live provider tier has data."""

from hotel_offers.schemas.offers import (
    GeoPoint,
    HotelOffer,
    NearbyPlace,
    Policies,
    Review,
    Room,
)

_BING = "https://tse{n}.mm.bing.net/th?id={id}&pid=Api&P=0&h=180"
_BSTATIC = "https://cf.bstatic.com/xdata/images/hotel/max1024x768/{id}.jpg"
_MARRIOTT = "https://cache.marriott.com/content/dam/marriott-renditions/NYCXR/{id}.jpg"
_GETAROOM = "https://images.getaroom-cdn.com/image/upload/{id}"


def _bing(n: int, image_id: str) -> str:
    return _BING.format(n=n, id=image_id)


_PARIS = [
    HotelOffer(
        name="Hotel Le Meurice",
        address="228 Rue de Rivoli, 75001 Paris",
        price="120.00",
        bookingLink=None,
        imageUrl=_bing(3, "OIP.O8kHPLiE5MBevpbtn-ACEQHaDU"),
        description="A luxury hotel in the heart of Paris, near the Louvre.",
        rating=4.8,
        images=[
            _bing(4, "OIP.hco9UELK3PiAQxnYTTljGAHaE8"),
            _bing(2, "OIP.Yaf4ZJI18BG5d42745OnbgHaFj"),
            _bing(1, "OIP.nzjVI6Fk3KGUPmxaqpdY-QHaE8"),
        ],
        amenities=["Free WiFi", "Spa", "Fitness Center", "Pet-friendly", "Restaurant", "Bar", "Airport Shuttle"],
        reviews=[
            Review(username="Alice", rating=5, comment="Absolutely stunning hotel with top-notch service."),
            Review(username="Bob", rating=4, comment="Great location and beautiful rooms, but pricey."),
            Review(username="Claire", rating=5, comment="Loved the spa and the breakfast buffet!"),
        ],
        location=GeoPoint(lat=48.8656, lng=2.3285),
        rooms=[
            Room(type="Deluxe Room", price="120.00", images=[_bing(4, "OIP.hco9UELK3PiAQxnYTTljGAHaE8")], availability=True),
            Room(type="Executive Suite", price="220.00", images=[_bing(2, "OIP.Yaf4ZJI18BG5d42745OnbgHaFj")], availability=False),
            Room(type="Presidential Suite", price="500.00", images=[_bing(1, "OIP.nzjVI6Fk3KGUPmxaqpdY-QHaE8")], availability=True),
        ],
        specialOffers=["Stay 3 nights, get 1 free breakfast", "10% off spa treatments"],
        policies=Policies(
            checkIn="15:00",
            checkOut="12:00",
            cancellation="Free cancellation up to 24h before check-in",
            payment="Credit Card, Cash",
        ),
        accessibility=["Wheelchair accessible", "Elevator", "Accessible bathroom"],
        nearby=[
            NearbyPlace(name="Louvre Museum", type="Museum", distance="0.5 km"),
            NearbyPlace(name="Tuileries Garden", type="Park", distance="0.3 km"),
            NearbyPlace(name="Eiffel Tower", type="Landmark", distance="2.5 km"),
        ],
    ),
    HotelOffer(
        name="Hôtel Plaza Athénée",
        address="25 Avenue Montaigne, 75008 Paris",
        price="150.00",
        bookingLink=None,
        imageUrl=_bing(1, "OIP.aMmLiYwGVH6suc-0gMQaBQHaFc"),
        description="Elegant hotel with Eiffel Tower views and fine dining.",
        rating=4.7,
        images=[
            _bing(1, "OIP.zTvftTJlwM1F1c4QDEr8TAHaE8"),
            _bing(1, "OIP.kOJqfIAA7vYPZdF9AQYoHwHaEr"),
            _bing(4, "OIP.I_fgcoJKIlckSnUP3fpZWwHaEK"),
        ],
        amenities=["Free WiFi", "Spa", "Fitness Center", "Restaurant", "Bar", "Airport Shuttle"],
        reviews=[
            Review(username="Marie", rating=5, comment="Spectacular views of the Eiffel Tower and amazing service."),
            Review(username="Jean", rating=4, comment="Loved the fine dining and the location."),
            Review(username="Sophie", rating=5, comment="The rooms are beautiful and the staff is very attentive."),
        ],
        location=GeoPoint(lat=48.8665, lng=2.3042),
        rooms=[
            Room(type="Superior Room", price="150.00", images=[_bing(1, "OIP.zTvftTJlwM1F1c4QDEr8TAHaE8")], availability=True),
            Room(type="Junior Suite", price="250.00", images=[_bing(1, "OIP.kOJqfIAA7vYPZdF9AQYoHwHaEr")], availability=True),
            Room(type="Prestige Suite", price="400.00", images=[_bing(4, "OIP.I_fgcoJKIlckSnUP3fpZWwHaEK")], availability=False),
        ],
        specialOffers=["Free dinner with 2-night stay", "Complimentary airport transfer"],
        policies=Policies(
            checkIn="14:00",
            checkOut="12:00",
            cancellation="Free cancellation up to 48h before check-in",
            payment="Credit Card",
        ),
        accessibility=["Wheelchair accessible", "Elevator"],
        nearby=[
            NearbyPlace(name="Eiffel Tower", type="Landmark", distance="1.2 km"),
            NearbyPlace(name="Champs-Élysées", type="Shopping", distance="0.5 km"),
            NearbyPlace(name="Seine River", type="River", distance="0.3 km"),
        ],
    ),
    HotelOffer(
        name="Le Bristol Paris",
        address="112 Rue du Faubourg Saint-Honoré, 75008 Paris",
        price="100.00",
        bookingLink=None,
        imageUrl=_bing(1, "OIP.JpKM2EjCXpCPSnQ2-K-n2QHaFj"),
        description="Classic Parisian luxury with a beautiful garden.",
        rating=4.9,
        images=[
            _bing(3, "OIP.s-ZJJRuCdaj6vKf-QhfVCgHaEJ"),
            _bing(4, "OIP.L0lw4AkRczXTHiR9CDxWMQHaEK"),
            _bing(4, "OIP.-5x7dYjSGVDELq7QAO366AHaEK"),
        ],
        amenities=["Free WiFi", "Garden", "Spa", "Pet-friendly", "Restaurant", "Bar"],
        reviews=[
            Review(username="Luc", rating=5, comment="The garden is a peaceful oasis in the city."),
            Review(username="Emma", rating=5, comment="Exceptional service and beautiful rooms."),
            Review(username="Paul", rating=4, comment="Great for families and pet owners."),
        ],
        location=GeoPoint(lat=48.8721, lng=2.3145),
        rooms=[
            Room(type="Classic Room", price="100.00", images=[_bing(3, "OIP.s-ZJJRuCdaj6vKf-QhfVCgHaEJ")], availability=True),
            Room(type="Deluxe Suite", price="200.00", images=[_bing(4, "OIP.L0lw4AkRczXTHiR9CDxWMQHaEK")], availability=True),
            Room(type="Garden Suite", price="350.00", images=[_bing(4, "OIP.-5x7dYjSGVDELq7QAO366AHaEK")], availability=False),
        ],
        specialOffers=["Free spa access with every booking", "Kids stay free"],
        policies=Policies(
            checkIn="15:00",
            checkOut="11:00",
            cancellation="Free cancellation up to 72h before check-in",
            payment="Credit Card, Cash",
        ),
        accessibility=["Wheelchair accessible", "Accessible bathroom"],
        nearby=[
            NearbyPlace(name="Parc Monceau", type="Park", distance="0.7 km"),
            NearbyPlace(name="Palais de l'Élysée", type="Government", distance="0.4 km"),
            NearbyPlace(name="Galeries Lafayette", type="Shopping", distance="1.5 km"),
        ],
    ),
]

_NEW_YORK = [
    HotelOffer(
        name="The Plaza Hotel",
        address="768 5th Ave, New York, NY 10019",
        price="200.00",
        bookingLink=None,
        imageUrl=_bing(3, "OIP.fA-FnGGhoT3GOW__2_fvjgHaJD"),
        description="Iconic luxury hotel at Central Park South.",
        rating=4.7,
        images=[
            _bing(4, "OIP.cYIK7SqnHkWKdDi5KjqTJwHaE8"),
            _bing(4, "OIP.k37s0sge2VFU9h_LHMdMxgAAAA"),
            _bing(3, "OIP.7vkWJiZsCL-0EVQ8aKW_HQHaE8"),
        ],
    ),
    HotelOffer(
        name="The St. Regis New York",
        address="Two E 55th St, New York, NY 10022",
        price="180.00",
        bookingLink=None,
        imageUrl="https://cache.marriott.com/is/image/marriotts7prod/nycxr-exterior-1674:Pano-Hor?wid=1600&fit=constrain",
        description="Timeless elegance in Midtown Manhattan.",
        rating=4.8,
        images=[
            _MARRIOTT.format(id="nycxr-dior-suite-9951-hor-clsc"),
            _MARRIOTT.format(id="nycxr-imperial-1528-hor-clsc"),
            _MARRIOTT.format(id="nycxr-presidential-9066-hor-clsc"),
        ],
    ),
    HotelOffer(
        name="The Peninsula New York",
        address="700 5th Ave, New York, NY 10019",
        price="220.00",
        bookingLink=None,
        imageUrl=_GETAROOM.format(id="v1665959631/0916e4f44c2de494ad34bbe0c0bebfa050730ab5"),
        description="Upscale hotel with a rooftop bar and spa.",
        rating=4.6,
        images=[
            _GETAROOM.format(id="v1736369301/c45844d716e17133660cbe3c378b82c61e1eea03"),
            _GETAROOM.format(id="v1736369301/f9846b549b72235fd0a31857b8512d462943a832"),
            _GETAROOM.format(id="v1665959631/7c8b712dd0e1aa8c3d82de880bbfd8c96cdabcc7"),
        ],
    ),
]

_LONDON = [
    HotelOffer(
        name="The Savoy",
        address="Strand, London WC2R 0EZ",
        price="170.00",
        bookingLink=None,
        imageUrl=_BSTATIC.format(id="40536774"),
        description="Historic luxury hotel on the River Thames.",
        rating=4.8,
        images=[_BSTATIC.format(id=i) for i in ("198540612", "522580314", "198541348")],
    ),
    HotelOffer(
        name="The Ritz London",
        address="150 Piccadilly, St. James's, London W1J 9BR",
        price="190.00",
        bookingLink=None,
        imageUrl=_BSTATIC.format(id="24721217"),
        description="World-renowned for its afternoon tea and service.",
        rating=4.9,
        images=[_BSTATIC.format(id=i) for i in ("106779100", "412230343", "449664553")],
    ),
    HotelOffer(
        name="Claridge's",
        address="Brook St, Mayfair, London W1K 4HR",
        price="160.00",
        bookingLink=None,
        imageUrl=_BSTATIC.format(id="474967777"),
        description="Art Deco luxury in the heart of Mayfair.",
        rating=4.7,
        images=[_BSTATIC.format(id=i) for i in ("207161677", "274229757", "274228985")],
    ),
]

FALLBACK_HOTELS: dict[str, list[HotelOffer]] = {
    "PAR": _PARIS,
    "NYC": _NEW_YORK,
    "LON": _LONDON,
}


def get_fallback_offers(city_code: str) -> list[HotelOffer]:
    """Return the catalog entry for a city; unknown codes give an empty list."""
    return list(FALLBACK_HOTELS.get(city_code, []))


def has_fallback(city_code: str) -> bool:
    return city_code in FALLBACK_HOTELS

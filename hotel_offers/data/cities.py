from hotel_offers.schemas.offers import City, CityCoordinate

CITY_COORDS: dict[str, CityCoordinate] = {
    "PAR": CityCoordinate(city_code="PAR", latitude=48.8566, longitude=2.3522),
    "NYC": CityCoordinate(city_code="NYC", latitude=40.7128, longitude=-74.0060),
    "LON": CityCoordinate(city_code="LON", latitude=51.5074, longitude=-0.1278),
}

CITY_NAMES: dict[str, str] = {
    "PAR": "Paris",
    "NYC": "New York",
    "LON": "London",
}


def supported_cities() -> list[City]:
    return [City(code=code, name=CITY_NAMES.get(code, code)) for code in CITY_COORDS]

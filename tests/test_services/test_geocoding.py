import httpx
import pytest
import respx
from httpx import AsyncClient, Response

from hotel_offers.services.geocoding import DEFAULT_SEARCH_URL, CityCoordinateResolver


@pytest.fixture
def resolver():
    return CityCoordinateResolver(AsyncClient())


async def test_static_table_needs_no_network(resolver):
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(DEFAULT_SEARCH_URL)
        coord = await resolver.resolve("PAR")

    assert route.call_count == 0
    assert coord.latitude == 48.8566
    assert coord.longitude == 2.3522
    assert coord.dynamic is False


@respx.mock
async def test_dynamic_resolution(resolver):
    route = respx.get(DEFAULT_SEARCH_URL).mock(
        return_value=Response(
            200,
            json=[
                {"lat": "41.3828939", "lon": "2.1774322", "display_name": "Barcelona"},
                {"lat": "0", "lon": "0"},
            ],
        )
    )

    coord = await resolver.resolve("BCN")

    assert coord.city_code == "BCN"
    assert coord.latitude == pytest.approx(41.3828939)
    assert coord.longitude == pytest.approx(2.1774322)
    assert coord.dynamic is True

    request = route.calls.last.request
    assert request.url.params["q"] == "BCN"
    assert request.url.params["format"] == "json"
    assert request.headers["User-Agent"] == "SmartVoyage/1.0"


@respx.mock
async def test_empty_results(resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(return_value=Response(200, json=[]))
    assert await resolver.resolve("ZZZ") is None


@respx.mock
async def test_error_status(resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(return_value=Response(503, text="busy"))
    assert await resolver.resolve("ZZZ") is None


@respx.mock
async def test_network_failure(resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(side_effect=httpx.ConnectTimeout("slow"))
    assert await resolver.resolve("ZZZ") is None


@respx.mock
async def test_unparseable_coordinates(resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(
        return_value=Response(200, json=[{"lat": "north", "lon": "east"}])
    )
    assert await resolver.resolve("ZZZ") is None


@respx.mock
async def test_non_json_body(resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(return_value=Response(200, text="<html>"))
    assert await resolver.resolve("ZZZ") is None


@respx.mock
async def test_production_failures_log_quietly(caplog):
    respx.get(DEFAULT_SEARCH_URL).mock(side_effect=httpx.ConnectError("down"))
    resolver = CityCoordinateResolver(AsyncClient(), verbose=False)

    with caplog.at_level("DEBUG", logger="hotel_offers.services.geocoding"):
        assert await resolver.resolve("ZZZ") is None

    records = [r for r in caplog.records if r.name == "hotel_offers.services.geocoding"]
    assert records
    assert all(r.levelname == "DEBUG" and r.exc_info is None for r in records)


@respx.mock
async def test_development_failures_log_traceback(caplog, resolver):
    respx.get(DEFAULT_SEARCH_URL).mock(side_effect=httpx.ConnectError("down"))

    with caplog.at_level("DEBUG", logger="hotel_offers.services.geocoding"):
        await resolver.resolve("ZZZ")

    warnings = [r for r in caplog.records if r.levelname == "WARNING"]
    assert warnings and warnings[0].exc_info is not None

"""Tests for OfferCache expiry and overwrite behaviour."""

from hotel_offers.cache import OfferCache
from hotel_offers.data.fallback_catalog import get_fallback_offers
from hotel_offers.schemas.offers import OfferSource, OffersResponse


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _result(source=OfferSource.amadeus, city="PAR"):
    return OffersResponse(offers=get_fallback_offers(city), source=source)


def test_get_missing_key():
    cache = OfferCache()
    assert cache.get("PAR_2025-06-01_2025-06-03_2") is None


def test_put_then_get_within_ttl():
    clock = FakeClock()
    cache = OfferCache(ttl_seconds=600, clock=clock)
    result = _result()
    cache.put("k", result)

    clock.now += 599
    assert cache.get("k") is result


def test_entry_expires_at_ttl():
    clock = FakeClock()
    cache = OfferCache(ttl_seconds=600, clock=clock)
    cache.put("k", _result())

    clock.now += 600
    assert cache.get("k") is None


def test_expired_entry_is_evicted_on_read():
    clock = FakeClock()
    cache = OfferCache(ttl_seconds=10, clock=clock)
    cache.put("k", _result())
    assert "k" in cache._entries

    clock.now += 11
    cache.get("k")
    assert "k" not in cache._entries


def test_put_overwrites_and_refreshes_expiry():
    clock = FakeClock()
    cache = OfferCache(ttl_seconds=600, clock=clock)
    cache.put("k", _result(source=OfferSource.amadeus))

    clock.now += 500
    second = _result(source=OfferSource.geocode, city="LON")
    cache.put("k", second)

    clock.now += 500
    assert cache.get("k") is second


def test_per_entry_ttl_override():
    clock = FakeClock()
    cache = OfferCache(ttl_seconds=600, clock=clock)
    cache.put("k", _result(), ttl_seconds=5)

    clock.now += 6
    assert cache.get("k") is None


def test_default_ttl_is_ten_minutes():
    clock = FakeClock()
    cache = OfferCache(clock=clock)
    cache.put("k", _result())

    clock.now += 10 * 60 - 1
    assert cache.get("k") is not None
    clock.now += 1
    assert cache.get("k") is None

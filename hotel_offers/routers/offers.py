import logging
from datetime import date

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from hotel_offers.data.cities import CITY_COORDS, supported_cities
from hotel_offers.data.fallback_catalog import has_fallback
from hotel_offers.dependencies import ResolutionDep, enforce_rate_limit
from hotel_offers.exceptions.custom import (
    AuthError,
    InvalidQueryError,
    UnsupportedCityError,
)
from hotel_offers.schemas.offers import CitiesResponse, OffersResponse, ResolutionQuery

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(enforce_rate_limit)])


def parse_query(
    city_code: str | None,
    check_in: str | None,
    check_out: str | None,
    adults: str | None,
) -> ResolutionQuery:
    if not all(v and v.strip() for v in (city_code, check_in, check_out, adults)):
        raise InvalidQueryError("Missing required query parameters")

    try:
        parsed_in = date.fromisoformat(check_in.strip())
        parsed_out = date.fromisoformat(check_out.strip())
    except ValueError:
        raise InvalidQueryError("checkIn and checkOut must be ISO dates (YYYY-MM-DD)")

    try:
        parsed_adults = int(adults.strip())
    except ValueError:
        raise InvalidQueryError("adults must be an integer")
    if parsed_adults < 1:
        raise InvalidQueryError("adults must be at least 1")

    return ResolutionQuery(
        city_code=city_code.strip().upper(),
        check_in=parsed_in,
        check_out=parsed_out,
        adults=parsed_adults,
    )


@router.get("/offers", response_model=OffersResponse, response_model_exclude_unset=True)
async def get_offers(
    service: ResolutionDep,
    cityCode: str | None = None,
    checkIn: str | None = None,
    checkOut: str | None = None,
    adults: str | None = None,
) -> OffersResponse:
    query = parse_query(cityCode, checkIn, checkOut, adults)

    try:
        result = await service.resolve(query)
    except AuthError:
        raise
    except Exception as exc:
        logger.exception("Failed to fetch hotel offers for %s", query.cache_key)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch hotel offers", "details": str(exc)},
        )

    if not result.offers and query.city_code not in CITY_COORDS and not has_fallback(query.city_code):
        raise UnsupportedCityError(query.city_code)
    return result


@router.get("/cities", response_model=CitiesResponse)
async def list_cities() -> CitiesResponse:
    return CitiesResponse(cities=supported_cities())

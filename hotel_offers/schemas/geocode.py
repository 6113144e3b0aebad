from pydantic import BaseModel


class PlaceSearchResult(BaseModel):
    lat: float
    lon: float
    display_name: str | None = None

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_base_url: str = "https://test.api.amadeus.com"
    geocode_url: str = "https://nominatim.openstreetmap.org/search"
    geocode_user_agent: str = "SmartVoyage/1.0"
    use_mock_hotels: bool = False
    environment: Literal["development", "production"] = "development"
    rate_limiting: Literal["enabled", "disabled"] = "enabled"
    rate_limit_max_requests: int = 30
    rate_limit_window_seconds: float = 60.0
    offer_cache_ttl_seconds: float = 600.0
    hotel_id_limit: int = 20
    geocode_radius: int = 10
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment != "production"

class AmadeusError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AuthError(Exception):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ConfigError(AuthError):
    """Credentials are missing; retrying cannot help."""


class RateLimitError(Exception):
    def __init__(self, client_id: str):
        self.client_id = client_id
        super().__init__(f"Rate limit exceeded for {client_id}")


class UnsupportedCityError(Exception):
    def __init__(self, city_code: str):
        self.city_code = city_code
        super().__init__(f"No hotel data available for city code: {city_code}")


class InvalidQueryError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

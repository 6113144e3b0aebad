import logging

from hotel_offers.cache import OfferCache
from hotel_offers.schemas.offers import OfferSource, OffersResponse, ResolutionQuery
from hotel_offers.services.auth import AccessTokenProvider
from hotel_offers.services.cascade import ProviderQueryCascade

logger = logging.getLogger(__name__)


class OfferResolutionService:
    def __init__(
        self,
        token_provider: AccessTokenProvider,
        cascade: ProviderQueryCascade,
        cache: OfferCache,
        use_mock: bool = False,
    ):
        self._token_provider = token_provider
        self._cascade = cascade
        self._cache = cache
        self._use_mock = use_mock

    async def resolve(self, query: ResolutionQuery) -> OffersResponse:
        """Cache, then token, then the provider cascade.

        Only live-tier results are cached. Raises AuthError (or ConfigError)
        when a token cannot be obtained.
        """
        if self._use_mock:
            logger.info("Mock hotels enabled, serving catalog for %s", query.city_code)
            return self._cascade.fallback(query.city_code)

        key = query.cache_key
        cached = self._cache.get(key)
        if cached is not None:
            logger.info("Serving hotel offers from cache for %s", key)
            return cached

        token = await self._token_provider.acquire_token()
        result = await self._cascade.run(query, token)

        if result.source != OfferSource.mock and result.offers:
            self._cache.put(key, result)
        return result

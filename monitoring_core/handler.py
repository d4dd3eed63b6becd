"""
Monitoring Execution Handler

Single entry point for running providers, transparently applying the
result cache to cacheable providers.
"""
import logging
from typing import Optional

from .cache import MonitoringCacheManager
from .providers.base import CacheableMonitoringProvider, MonitoringProvider
from .result import MonitoringResult
from .utils import slugify_cache_key

logger = logging.getLogger(__name__)


class MonitoringExecutionHandler:
    """Executes monitoring providers with caching support."""

    def __init__(self, cache_manager: Optional[MonitoringCacheManager] = None):
        self.cache_manager = cache_manager or MonitoringCacheManager()

    def execute_provider(self, provider: MonitoringProvider) -> MonitoringResult:
        if isinstance(provider, CacheableMonitoringProvider):
            return self._execute_with_caching(provider)

        return provider.execute()

    def execute_provider_safely(
        self,
        provider: MonitoringProvider,
        use_cache: bool = True,
    ) -> MonitoringResult:
        """
        Like ``execute_provider`` but a crashing provider yields an unhealthy
        result instead of an exception.

        Args:
            provider: Provider to run
            use_cache: Set to False to bypass the result cache
        """
        try:
            if not use_cache:
                return provider.execute()
            return self.execute_provider(provider)
        except Exception as e:
            logger.exception(f"Monitoring provider {provider.identity} failed")
            return MonitoringResult(
                name=provider.get_name(),
                healthy=False,
                reason=f"Unexpected error: {e}",
            )

    def _execute_with_caching(self, provider: CacheableMonitoringProvider) -> MonitoringResult:
        cache_key = slugify_cache_key(provider.get_cache_key())

        cached_result = self.cache_manager.get_cached_result(cache_key)
        if cached_result is not None:
            return cached_result

        result = provider.execute()

        self.cache_manager.set_cached_result(
            cache_key,
            result,
            [slugify_cache_key(provider.identity)],
            provider.get_cache_lifetime(),
        )

        return result

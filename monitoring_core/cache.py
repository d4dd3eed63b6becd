"""
Monitoring Cache

Stores monitoring results with expiration tracking and tag based
invalidation on top of a Django cache alias.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Generic, Iterable, Optional, TypeVar

from django.core.cache import InvalidCacheBackendError, caches
from django.utils import timezone

from .conf import DEFAULT_CACHE_LIFETIME, MonitoringConfiguration
from .result import MonitoringResult
from .utils import slugify_cache_key

logger = logging.getLogger(__name__)

T = TypeVar('T')

TAG_INDEX_PREFIX = '_tag_keys:'


@dataclass(frozen=True)
class CachedResult(Generic[T]):
    """Cache envelope holding a payload and its caching metadata."""
    result: T
    cached_at: datetime
    lifetime: int

    @property
    def expires_at(self) -> datetime:
        """Expiry in the current time zone (naive when USE_TZ is off)."""
        expires_at = self.cached_at + timedelta(seconds=self.lifetime)
        if timezone.is_aware(expires_at):
            return timezone.localtime(expires_at)
        return expires_at

    def is_expired(self) -> bool:
        return timezone.now() > self.expires_at


class MonitoringCacheManager:
    """
    Wrapper around a Django cache for monitoring results.

    Every operation degrades gracefully: when the configured cache alias is
    missing or the backend fails, lookups report a miss and writes report
    ``False``. Nothing is raised to the caller.
    """

    def __init__(self, configuration: Optional[MonitoringConfiguration] = None):
        self.configuration = configuration or MonitoringConfiguration.from_settings()
        self.cache_alias = self.configuration.cache_alias

    def get_cache(self):
        """
        Return the backing cache.

        Raises:
            InvalidCacheBackendError: If the cache alias is not configured
        """
        return caches[self.cache_alias]

    def get_cached_result(self, cache_key: str) -> Optional[MonitoringResult]:
        """
        Get a cached result.

        Returns:
            The cached result, or None if missing or expired
        """
        try:
            cache = self.get_cache()
            cached = cache.get(cache_key)

            if isinstance(cached, CachedResult):
                if not cached.is_expired():
                    return cached.result

                cache.delete(cache_key)
                logger.debug(f"Removed expired monitoring cache entry: {cache_key}")

        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache get error for {cache_key}: {e}")

        return None

    def get_cache_expiration_time(self, cache_key: str) -> Optional[datetime]:
        try:
            cached = self.get_cache().get(cache_key)

            if isinstance(cached, CachedResult):
                return cached.expires_at

        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache get error for {cache_key}: {e}")

        return None

    def set_cached_result(
        self,
        cache_key: str,
        result: MonitoringResult,
        tags: Iterable[str] = (),
        lifetime: int = 0,
    ) -> bool:
        """
        Store a result with optional tags and lifetime.

        Args:
            cache_key: Cache key to store the result under
            result: Result to cache
            tags: Tags used for bulk invalidation
            lifetime: Lifetime in seconds, 0 for the default lifetime
        """
        lifetime = lifetime or self.get_cache_lifetime()

        try:
            cache = self.get_cache()

            cached = CachedResult(
                result=result,
                cached_at=timezone.now(),
                lifetime=lifetime,
            )
            cache.set(cache_key, cached, lifetime)

            for tag in tags:
                self._register_tag(cache, tag, cache_key)

            return True

        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache set error for {cache_key}: {e}")

        return False

    def get_cache_lifetime(self) -> int:
        """Default lifetime in seconds (15 minutes unless configured)."""
        return self.configuration.cache_lifetime or DEFAULT_CACHE_LIFETIME

    def flush_by_tags(self, tags: Iterable[str]) -> bool:
        tags = list(tags)

        try:
            cache = self.get_cache()
            invalidated = 0

            for tag in tags:
                tag_key = f"{TAG_INDEX_PREFIX}{tag}"
                keys = cache.get(tag_key) or set()

                for key in keys:
                    if cache.delete(key):
                        invalidated += 1

                cache.delete(tag_key)

            logger.info(f"Invalidated {invalidated} monitoring cache entries for tags: {tags}")
            return True

        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache flush error: {e}")

        return False

    def flush_provider_cache(self, provider_identity: str) -> bool:
        """Flush all entries tagged with the provider's identity."""
        return self.flush_by_tags([slugify_cache_key(provider_identity)])

    def flush_by_cache_key(self, cache_key: str) -> bool:
        try:
            self.get_cache().delete(cache_key)
            return True
        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache delete error for {cache_key}: {e}")

        return False

    def flush_all(self) -> bool:
        try:
            self.get_cache().clear()
            return True
        except InvalidCacheBackendError as e:
            logger.warning(f"Monitoring cache unavailable: {e}")
        except Exception as e:
            logger.warning(f"Monitoring cache clear error: {e}")

        return False

    def _register_tag(self, cache, tag: str, cache_key: str) -> None:
        """Add the key to the tag index; the index itself never expires."""
        tag_key = f"{TAG_INDEX_PREFIX}{tag}"
        keys = cache.get(tag_key) or set()
        keys.add(cache_key)
        cache.set(tag_key, keys, None)


"""
Monitoring Provider Contract
"""
from abc import ABC, abstractmethod
from typing import Optional

from django.http import HttpRequest

from ..conf import MonitoringConfiguration, ProviderConfiguration
from ..result import MonitoringResult


class MonitoringProvider(ABC):
    """
    Base class for health checks.

    Subclasses declare a stable ``identity`` (used for configuration lookup
    and cache tags) and a ``name`` (used as key in the health endpoint's
    JSON output). Providers are built once and ``execute()`` may be called
    any number of times, in any order relative to other providers.
    """

    identity: str = ''
    name: str = ''
    description: str = ''

    # Meta providers check the monitoring endpoint itself and are left out
    # of the aggregate the endpoint reports.
    is_meta: bool = False

    def __init__(self, configuration: Optional[MonitoringConfiguration] = None):
        self.configuration = configuration or MonitoringConfiguration.from_settings()

    @property
    def provider_configuration(self) -> ProviderConfiguration:
        return self.configuration.get_provider_configuration(self.identity)

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    def is_active(self, request: Optional[HttpRequest] = None) -> bool:
        """Whether this check runs at all; ``request`` is the inbound request, if any."""
        return self.provider_configuration.is_enabled()

    @abstractmethod
    def execute(self) -> MonitoringResult:
        """Run the check."""


class CacheableMonitoringProvider(MonitoringProvider):
    """Provider whose results may be memoized between runs."""

    cache_lifetime: int = 0

    def get_cache_key(self) -> str:
        """
        Key distinguishing this provider's results. It is slugified before
        use, so it may contain any characters.
        """
        return self.identity

    def get_cache_lifetime(self) -> int:
        """Lifetime in seconds; 0 falls back to the cache's default."""
        return self.cache_lifetime

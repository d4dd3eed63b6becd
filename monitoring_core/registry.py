"""
Monitoring Registry

Composition root assembling providers, authorizers and the shared
execution handler from the ``MONITORING`` setting.
"""
import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .authorization.base import Authorizer, sort_authorizers
from .cache import MonitoringCacheManager
from .conf import MonitoringConfiguration
from .handler import MonitoringExecutionHandler
from .providers.base import MonitoringProvider

logger = logging.getLogger(__name__)


def _build(dotted_path: str, base_class: type, configuration: MonitoringConfiguration):
    try:
        component_class = import_string(dotted_path)
    except ImportError as e:
        raise ImproperlyConfigured(f"Cannot import monitoring component {dotted_path}: {e}") from e

    if not issubclass(component_class, base_class):
        raise ImproperlyConfigured(
            f"{dotted_path} must be a subclass of {base_class.__name__}"
        )

    return component_class(configuration=configuration)


class MonitoringRegistry:
    """Registry for monitoring providers and authorizers"""

    def __init__(
        self,
        configuration: MonitoringConfiguration,
        providers: Iterable[MonitoringProvider] = (),
        authorizers: Iterable[Authorizer] = (),
        execution_handler: Optional[MonitoringExecutionHandler] = None,
    ):
        self.configuration = configuration
        self._providers: Dict[str, MonitoringProvider] = {}
        self._authorizers: List[Authorizer] = sort_authorizers(
            authorizers, configuration.authorizer_order
        )
        self.cache_manager = (
            execution_handler.cache_manager if execution_handler
            else MonitoringCacheManager(configuration)
        )
        self.execution_handler = execution_handler or MonitoringExecutionHandler(self.cache_manager)

        for provider in providers:
            self.register(provider)

    @classmethod
    def from_configuration(cls, configuration: MonitoringConfiguration) -> 'MonitoringRegistry':
        providers = [
            _build(path, MonitoringProvider, configuration)
            for path in configuration.providers
        ]
        authorizers = [
            _build(path, Authorizer, configuration)
            for path in configuration.authorizers
        ]

        logger.info(
            f"Monitoring registry initialized with {len(providers)} providers "
            f"and {len(authorizers)} authorizers"
        )
        return cls(configuration, providers, authorizers)

    def register(self, provider: MonitoringProvider) -> None:
        """Register a provider; registration order is execution order."""
        if not provider.identity:
            raise ImproperlyConfigured(
                f"{provider.__class__.__name__} does not declare an identity"
            )
        self._providers[provider.identity] = provider

    def unregister(self, identity: str) -> None:
        self._providers.pop(identity, None)

    @property
    def providers(self) -> List[MonitoringProvider]:
        return list(self._providers.values())

    @property
    def authorizers(self) -> List[Authorizer]:
        return list(self._authorizers)

    def get_provider(self, identity: str) -> Optional[MonitoringProvider]:
        return self._providers.get(identity)


@lru_cache(maxsize=None)
def get_registry() -> MonitoringRegistry:
    """Process wide registry built from the current settings."""
    return MonitoringRegistry.from_configuration(MonitoringConfiguration.from_settings())

"""
Providers and authorizers used by the monitoring tests
"""
from monitoring_core.authorization.base import Authorizer
from monitoring_core.providers.base import CacheableMonitoringProvider, MonitoringProvider
from monitoring_core.result import MonitoringResult


class NonCacheableProvider(MonitoringProvider):
    identity = 'tests.non_cacheable'
    name = 'NonCacheable'
    description = 'Counts its executions'

    def __init__(self, configuration=None, healthy=True, active=True):
        super().__init__(configuration)
        self.healthy = healthy
        self.active = active
        self.execution_count = 0

    def is_active(self, request=None):
        return self.active

    def execute(self):
        self.execution_count += 1
        return MonitoringResult(
            name=self.name,
            healthy=self.healthy,
            reason=None if self.healthy else 'Provider reported failure',
        )


class CacheableProvider(NonCacheableProvider, CacheableMonitoringProvider):
    identity = 'tests.Cacheable Provider'
    name = 'Cacheable'
    cache_lifetime = 3600

    def get_cache_key(self):
        return 'Tests Cacheable Key'


class ShortCacheProvider(CacheableProvider):
    identity = 'tests.short_cache'
    name = 'ShortCache'
    cache_lifetime = 1

    def get_cache_key(self):
        return 'tests.short_cache'


class FailingProvider(MonitoringProvider):
    identity = 'tests.failing'
    name = 'Failing'

    def is_active(self, request=None):
        return True

    def execute(self):
        raise RuntimeError('provider exploded')


class StaticAuthorizer(Authorizer):
    """Authorizer with a fixed answer, recording calls into ``call_log``."""

    def __init__(self, identity, authorized, call_log=None, active=True, priority=0):
        self.identity = identity
        self.authorized = authorized
        self.call_log = call_log if call_log is not None else []
        self.active = active
        self._priority = priority

    def is_active(self):
        return self.active

    def is_authorized(self, request):
        self.call_log.append(self.identity)
        return self.authorized

    @property
    def priority(self):
        return self._priority

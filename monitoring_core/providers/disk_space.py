"""
Disk Space Provider
"""
import shutil

from ..result import MonitoringResult
from .base import CacheableMonitoringProvider


class DiskSpaceProvider(CacheableMonitoringProvider):
    """Flags a volume as unhealthy once its usage crosses a threshold."""

    identity = 'monitoring.disk_space'
    name = 'DiskSpace'
    description = 'Checks the used disk space of a volume against a maximum percentage.'

    default_path = '/'
    default_max_percent_used = 90
    default_cache_lifetime = 300

    @property
    def path(self) -> str:
        return self.provider_configuration.get('PATH', self.default_path)

    @property
    def max_percent_used(self) -> float:
        return float(self.provider_configuration.get('MAX_PERCENT_USED', self.default_max_percent_used))

    def get_cache_key(self) -> str:
        return f"{self.identity} {self.path}"

    def get_cache_lifetime(self) -> int:
        return int(self.provider_configuration.get('CACHE_LIFETIME', self.default_cache_lifetime))

    def execute(self) -> MonitoringResult:
        try:
            usage = shutil.disk_usage(self.path)
        except OSError as e:
            return MonitoringResult(
                name=self.get_name(),
                healthy=False,
                reason=f"Disk check failed: {e}",
            )

        percent_used = (usage.used / usage.total) * 100

        if percent_used > self.max_percent_used:
            return MonitoringResult(
                name=self.get_name(),
                healthy=False,
                reason=f"Low disk space on {self.path} ({percent_used:.1f}% used)",
            )

        return MonitoringResult(name=self.get_name(), healthy=True)

"""
Monitoring Providers

Health checks plugged into the monitoring registry.
"""

from .base import CacheableMonitoringProvider, MonitoringProvider

__all__ = [
    'MonitoringProvider',
    'CacheableMonitoringProvider',
]

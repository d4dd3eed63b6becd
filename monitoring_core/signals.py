"""
Monitoring Signal Handlers

Drops the memoized registry whenever the MONITORING setting changes, so
``override_settings`` in tests and settings reloads see fresh providers.
"""

import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from .registry import get_registry

logger = logging.getLogger(__name__)


@receiver(setting_changed)
def reset_monitoring_registry(sender, setting, **kwargs):
    """Clear the cached registry when monitoring related settings change."""
    if setting in ('MONITORING', 'CACHES', 'SECRET_KEY', 'ALLOWED_HOSTS'):
        get_registry.cache_clear()
        logger.debug(f"Monitoring registry reset after {setting} changed")

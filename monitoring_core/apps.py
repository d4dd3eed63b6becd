"""
Monitoring App Configuration
"""

from django.apps import AppConfig


class MonitoringConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'monitoring_core'
    verbose_name = 'Monitoring'

    def ready(self):
        """Connect signal handlers when app is ready"""
        from . import signals  # noqa

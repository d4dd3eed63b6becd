"""
Database Provider

Checks connectivity of every configured Django database connection.
"""
import logging

from django.db import connections

from ..result import MonitoringResult
from .base import MonitoringProvider

logger = logging.getLogger(__name__)


class DatabaseProvider(MonitoringProvider):
    identity = 'monitoring.database'
    name = 'Database'
    description = 'Runs a trivial query against every configured database connection.'

    def execute(self) -> MonitoringResult:
        result = MonitoringResult(name=self.get_name(), healthy=True)

        for alias in connections:
            result.add_sub_result(self._check_connection(alias))

        if not result.is_healthy():
            result.set_reason('At least one database connection failed')

        return result

    def _check_connection(self, alias: str) -> MonitoringResult:
        try:
            with connections[alias].cursor() as cursor:
                cursor.execute("SELECT 1")
                row = cursor.fetchone()

            if row is None or row[0] != 1:
                return MonitoringResult(
                    name=alias,
                    healthy=False,
                    reason='Database query returned an unexpected value',
                )

            return MonitoringResult(name=alias, healthy=True)

        except Exception as e:
            logger.warning(f"Database connection {alias} failed: {e}")
            return MonitoringResult(
                name=alias,
                healthy=False,
                reason=f"Database connection failed: {e}",
            )

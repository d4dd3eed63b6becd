"""
Middleware Status Provider

Meta provider checking the monitoring endpoint itself over HTTP. Its
outbound call carries a guard header so that the endpoint, while serving
that call, never triggers the provider again.
"""
import json
import logging
import traceback
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

import requests
from django.conf import settings
from django.http import HttpRequest

from ..conf import MonitoringConfiguration
from ..crypto import HashService
from ..result import MonitoringResult
from .base import MonitoringProvider

logger = logging.getLogger(__name__)

SELF_CHECK_HEADER = 'X-SELFCARE-REQUEST'


class MiddlewareStatusProvider(MonitoringProvider):
    identity = 'monitoring.middleware_status'
    name = 'MiddlewareStatus'
    description = (
        'Monitors the monitoring middleware itself by requesting its own health '
        'endpoint, making sure the endpoint is reachable and responds correctly.'
    )
    is_meta = True

    def __init__(
        self,
        configuration: Optional[MonitoringConfiguration] = None,
        session: Optional[requests.Session] = None,
        hash_service: Optional[HashService] = None,
    ):
        super().__init__(configuration)
        self.session = session or requests.Session()
        self.hash_service = hash_service or HashService()

    def is_active(self, request: Optional[HttpRequest] = None) -> bool:
        if self.configuration.endpoint == '':
            return False

        if request is not None and SELF_CHECK_HEADER in request.headers:
            return False

        return self.provider_configuration.is_enabled()

    def execute(self) -> MonitoringResult:
        endpoint = self.configuration.endpoint

        try:
            monitoring_url = self.get_base_url().rstrip('/') + endpoint

            response = self.session.get(
                monitoring_url,
                headers=self._build_headers(),
                timeout=self.configuration.request_timeout,
            )

            if response.status_code != 200:
                return self._unhealthy(f"Monitoring endpoint returned HTTP {response.status_code}")

            data = json.loads(response.text)

            if isinstance(data, dict) and 'isHealthy' in data:
                is_healthy = bool(data['isHealthy'])
                return MonitoringResult(
                    name=self.get_name(),
                    healthy=is_healthy,
                    reason=None if is_healthy else 'Monitoring endpoint reported unhealthy state',
                )

            return self._unhealthy('Invalid response format from monitoring endpoint')

        except requests.RequestException as e:
            logger.warning(f"Self check of monitoring endpoint {endpoint} failed with HTTP client exception: {e}")
            return self._unhealthy(f"HTTP request failed: {e}")

        except ValueError:
            return self._unhealthy('Invalid JSON response from monitoring endpoint')

        except Exception as e:
            frame = traceback.extract_tb(e.__traceback__)[-1]
            logger.error(
                f"Self check of monitoring endpoint failed with unexpected exception: {e} "
                f"({frame.filename}:{frame.lineno})"
            )
            return self._unhealthy(f"Unexpected error: {e}")

    def get_base_url(self) -> str:
        """
        Base URL of this site, always using https.

        Taken from the ``BASE_URL`` setting, else the first concrete entry of
        ``ALLOWED_HOSTS``, else ``localhost``.
        """
        base_url = self.configuration.base_url

        if not base_url:
            host = next(
                (
                    host for host in getattr(settings, 'ALLOWED_HOSTS', [])
                    if host and host != '*' and not host.startswith('.')
                ),
                'localhost',
            )
            base_url = f"https://{host}"

        parts = urlsplit(base_url if '://' in base_url else f"https://{base_url}")
        return urlunsplit(('https', parts.netloc, parts.path, '', ''))

    def _build_headers(self) -> dict:
        headers = {SELF_CHECK_HEADER: '1'}

        token_configuration = self.configuration.token_authorizer
        if token_configuration.is_enabled() and token_configuration.secret != '':
            headers[token_configuration.auth_header_name] = self.hash_service.hmac(
                self.configuration.endpoint,
                token_configuration.secret,
            )

        return headers

    def _unhealthy(self, reason: str) -> MonitoringResult:
        return MonitoringResult(name=self.get_name(), healthy=False, reason=reason)

"""
Monitoring Middleware

Serves the aggregated health of all active providers on the configured
endpoint. Requests for any other path pass through untouched.
"""

import logging
from typing import Dict, Iterable, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.cache import add_never_cache_headers

from .authorization.base import Authorizer, is_request_authorized
from .conf import MonitoringConfiguration
from .handler import MonitoringExecutionHandler
from .providers.base import MonitoringProvider
from .registry import get_registry

logger = logging.getLogger(__name__)

CONTENT_TYPE = 'application/json; charset=utf-8'
ALLOWED_METHODS = ('GET', 'HEAD')


class MonitoringMiddleware:
    """
    Health endpoint middleware.

    Gates, in order: endpoint configured, path matches (trailing slash
    ignored), method allowed, https scheme, authorized by any active
    authorizer. Only then are providers executed.
    """

    def __init__(
        self,
        get_response,
        providers: Optional[Iterable[MonitoringProvider]] = None,
        authorizers: Optional[Iterable[Authorizer]] = None,
        configuration: Optional[MonitoringConfiguration] = None,
        execution_handler: Optional[MonitoringExecutionHandler] = None,
    ):
        self.get_response = get_response
        self._providers = list(providers) if providers is not None else None
        self._authorizers = list(authorizers) if authorizers is not None else None
        self._configuration = configuration
        self._execution_handler = execution_handler

    @property
    def configuration(self) -> MonitoringConfiguration:
        return self._configuration or get_registry().configuration

    @property
    def providers(self) -> Iterable[MonitoringProvider]:
        if self._providers is not None:
            return self._providers
        return get_registry().providers

    @property
    def authorizers(self) -> Iterable[Authorizer]:
        # Injected authorizers are taken in the order given
        if self._authorizers is not None:
            return self._authorizers
        return get_registry().authorizers

    @property
    def execution_handler(self) -> MonitoringExecutionHandler:
        return self._execution_handler or get_registry().execution_handler

    def __call__(self, request: HttpRequest) -> HttpResponse:
        endpoint = self.configuration.endpoint

        if endpoint == '':
            return self.get_response(request)

        if not self._is_endpoint_request(request, endpoint):
            return self.get_response(request)

        if request.method not in ALLOWED_METHODS:
            response = self._json_response(request, {'code': 405, 'error': 'method-not-allowed'}, 405)
            response['Allow'] = ', '.join(ALLOWED_METHODS)
            return response

        if not self._is_https(request):
            return self._json_response(request, {'code': 403, 'error': 'unsupported-protocol'}, 403)

        if not is_request_authorized(self.authorizers, request):
            return self._json_response(request, {'code': 401, 'error': 'unauthorized'}, 401)

        health_status = self.get_health_status(request)
        is_healthy = all(health_status.values())

        return self._json_response(
            request,
            {
                'isHealthy': is_healthy,
                'services': {
                    name: 'healthy' if status else 'unhealthy'
                    for name, status in health_status.items()
                },
            },
            200 if is_healthy else 503,
        )

    def get_health_status(self, request: HttpRequest) -> Dict[str, bool]:
        """Health of every active, non-meta provider keyed by provider name."""
        status = {}

        for provider in self.providers:
            if provider.is_meta or not provider.is_active(request):
                continue

            result = self.execution_handler.execute_provider_safely(provider)
            status[provider.get_name()] = result.is_healthy()

        return status

    def _is_endpoint_request(self, request: HttpRequest, endpoint: str) -> bool:
        return request.path.rstrip('/') == endpoint.rstrip('/')

    def _is_https(self, request: HttpRequest) -> bool:
        return request.scheme == 'https'

    def _json_response(self, request: HttpRequest, data: dict, status: int) -> HttpResponse:
        """JSON response, or pass-through when the payload cannot be encoded."""
        try:
            response = JsonResponse(data, status=status, content_type=CONTENT_TYPE)
        except (TypeError, ValueError) as e:
            logger.error(f"Could not encode monitoring response: {e}")
            return self.get_response(request)

        add_never_cache_headers(response)
        return response

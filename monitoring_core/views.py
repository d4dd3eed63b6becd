"""
Monitoring Overview Views

Staff facing JSON describing providers and authorizers, plus a per
provider cache flush action.
"""
import logging

from django.contrib.auth.decorators import user_passes_test
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.cache import never_cache

from .authorization.token import TokenAuthorizer
from .providers.base import CacheableMonitoringProvider
from .registry import get_registry
from .result import ResultJSONEncoder
from .utils import slugify_cache_key

logger = logging.getLogger(__name__)


def is_superuser(user):
    return user.is_authenticated and user.is_superuser


superuser_required = user_passes_test(is_superuser)


def build_authorizer_overview(registry):
    """Activity and priority of each authorizer, keyed by identity."""
    overview = {}

    for authorizer in registry.authorizers:
        overview[authorizer.identity] = {
            'isActive': authorizer.is_active(),
            'priority': authorizer.priority,
        }

        if not isinstance(authorizer, TokenAuthorizer):
            continue

        token_configuration = authorizer.token_configuration
        if not token_configuration.is_enabled():
            continue

        overview[authorizer.identity]['authHeaderName'] = token_configuration.auth_header_name

        if token_configuration.secret != '':
            overview[authorizer.identity]['authToken'] = authorizer.hash_service.hmac(
                registry.configuration.endpoint,
                token_configuration.secret,
            )

    return overview


def build_provider_overview(registry, request=None):
    """Display data of each provider, keyed by identity."""
    overview = {}
    handler = registry.execution_handler

    for provider in registry.providers:
        result = handler.execute_provider_safely(provider)
        is_cached = isinstance(provider, CacheableMonitoringProvider)

        data = {
            'name': provider.get_name(),
            'description': provider.get_description(),
            'isActive': provider.is_active(request),
            'isCached': is_cached,
            'isHealthy': result.is_healthy(),
        }

        if is_cached:
            data['cacheLifetime'] = provider.get_cache_lifetime()

            expires_at = registry.cache_manager.get_cache_expiration_time(
                slugify_cache_key(provider.get_cache_key())
            )
            if expires_at is not None:
                data['cacheExpiresAt'] = expires_at

        if result.has_sub_results():
            data['subResults'] = result.sub_results

        overview[provider.identity] = data

    return overview


@method_decorator([never_cache, superuser_required], name='dispatch')
class MonitoringOverviewView(View):
    """Overview of providers and authorizers"""

    def get(self, request):
        registry = get_registry()

        return JsonResponse(
            {
                'endpoint': request.get_host() + registry.configuration.endpoint,
                'authorizers': build_authorizer_overview(registry),
                'providers': build_provider_overview(registry, request),
            },
            encoder=ResultJSONEncoder,
        )


@method_decorator([never_cache, superuser_required], name='dispatch')
class FlushProviderCacheView(View):
    """Flush cached results of a single provider"""

    def post(self, request, identity):
        registry = get_registry()

        if registry.get_provider(identity) is None:
            return JsonResponse(
                {'error': f'Monitoring provider {identity} not found'},
                status=404
            )

        flushed = registry.cache_manager.flush_provider_cache(identity)
        logger.info(f"Flushed monitoring cache of {identity}: {flushed}")

        return JsonResponse({'identity': identity, 'flushed': flushed})

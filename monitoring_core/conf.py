"""
Monitoring Configuration

Typed, immutable snapshot of the ``MONITORING`` Django setting.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from django.conf import settings

DEFAULT_CACHE_ALIAS = 'monitoring'
DEFAULT_CACHE_LIFETIME = 60 * 15
DEFAULT_AUTH_HEADER_NAME = 'X-MONITORING-AUTH'
DEFAULT_REQUEST_TIMEOUT = 5

DEFAULT_PROVIDERS = (
    'monitoring_core.providers.database.DatabaseProvider',
    'monitoring_core.providers.disk_space.DiskSpaceProvider',
    'monitoring_core.providers.middleware_status.MiddlewareStatusProvider',
)

DEFAULT_AUTHORIZERS = (
    'monitoring_core.authorization.token.TokenAuthorizer',
    'monitoring_core.authorization.admin_user.AdminUserAuthorizer',
)

ORDER_ASCENDING = 'ascending'
ORDER_DESCENDING = 'descending'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def to_boolean(value: Any, default: bool = False) -> bool:
    """Coerce loosely typed setting values (``"1"``, ``"on"``, ...) to bool."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return default


def to_integer(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, str):
            return int(float(value.strip()))
    except (ValueError, OverflowError):
        return default
    return default


def to_string(value: Any, default: str = '') -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return default


@dataclass(frozen=True)
class TokenAuthorizerConfiguration:
    enabled: bool = False
    priority: int = 10
    secret: str = ''
    auth_header_name: str = DEFAULT_AUTH_HEADER_NAME

    def is_enabled(self) -> bool:
        return self.enabled


@dataclass(frozen=True)
class AdminUserAuthorizerConfiguration:
    enabled: bool = False
    priority: int = -10

    def is_enabled(self) -> bool:
        return self.enabled


@dataclass(frozen=True)
class ProviderConfiguration:
    """Per provider switch plus free-form provider options."""
    enabled: bool = True
    options: Mapping[str, Any] = field(default_factory=dict)

    def is_enabled(self) -> bool:
        return self.enabled

    def get(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)


@dataclass(frozen=True)
class MonitoringConfiguration:
    """Configuration snapshot handed to every monitoring component."""
    endpoint: str = ''
    cache_alias: str = DEFAULT_CACHE_ALIAS
    cache_lifetime: int = DEFAULT_CACHE_LIFETIME
    authorizer_order: str = ORDER_DESCENDING
    base_url: str = ''
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    providers: Tuple[str, ...] = DEFAULT_PROVIDERS
    authorizers: Tuple[str, ...] = DEFAULT_AUTHORIZERS
    token_authorizer: TokenAuthorizerConfiguration = field(
        default_factory=TokenAuthorizerConfiguration
    )
    admin_user_authorizer: AdminUserAuthorizerConfiguration = field(
        default_factory=AdminUserAuthorizerConfiguration
    )
    provider_configurations: Mapping[str, ProviderConfiguration] = field(
        default_factory=dict
    )

    def get_provider_configuration(self, identity: str) -> ProviderConfiguration:
        """Providers without an explicit entry are enabled with no options."""
        return self.provider_configurations.get(identity, ProviderConfiguration())

    @classmethod
    def from_settings(cls, config: Optional[Dict[str, Any]] = None) -> 'MonitoringConfiguration':
        """
        Build the configuration from ``settings.MONITORING``.

        Args:
            config: Raw mapping to use instead of the Django setting
        """
        if config is None:
            config = getattr(settings, 'MONITORING', None) or {}

        authorizer_config = config.get('AUTHORIZER') or {}
        token_config = authorizer_config.get('token') or {}
        admin_user_config = authorizer_config.get('admin_user') or {}

        token_authorizer = TokenAuthorizerConfiguration(
            enabled=to_boolean(token_config.get('ENABLED'), False),
            priority=to_integer(token_config.get('PRIORITY'), 10),
            secret=to_string(token_config.get('SECRET')),
            auth_header_name=to_string(
                token_config.get('AUTH_HEADER_NAME'), DEFAULT_AUTH_HEADER_NAME
            ) or DEFAULT_AUTH_HEADER_NAME,
        )

        admin_user_authorizer = AdminUserAuthorizerConfiguration(
            enabled=to_boolean(admin_user_config.get('ENABLED'), False),
            priority=to_integer(admin_user_config.get('PRIORITY'), -10),
        )

        provider_configurations = {}
        for identity, options in (config.get('PROVIDER') or {}).items():
            options = dict(options or {})
            enabled = to_boolean(options.pop('ENABLED', True), True)
            provider_configurations[identity] = ProviderConfiguration(
                enabled=enabled,
                options=options,
            )

        order = to_string(config.get('AUTHORIZER_ORDER'), ORDER_DESCENDING).lower()
        if order not in (ORDER_ASCENDING, ORDER_DESCENDING):
            order = ORDER_DESCENDING

        return cls(
            endpoint=to_string(config.get('ENDPOINT')),
            cache_alias=to_string(config.get('CACHE_ALIAS'), DEFAULT_CACHE_ALIAS) or DEFAULT_CACHE_ALIAS,
            cache_lifetime=to_integer(config.get('CACHE_LIFETIME'), DEFAULT_CACHE_LIFETIME) or DEFAULT_CACHE_LIFETIME,
            authorizer_order=order,
            base_url=to_string(config.get('BASE_URL')),
            request_timeout=to_integer(config.get('REQUEST_TIMEOUT'), DEFAULT_REQUEST_TIMEOUT),
            providers=tuple(config.get('PROVIDERS', DEFAULT_PROVIDERS)),
            authorizers=tuple(config.get('AUTHORIZERS', DEFAULT_AUTHORIZERS)),
            token_authorizer=token_authorizer,
            admin_user_authorizer=admin_user_authorizer,
            provider_configurations=provider_configurations,
        )

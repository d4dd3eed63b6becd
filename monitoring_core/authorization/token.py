"""
Token Authorizer

Grants access to requests presenting an HMAC of the endpoint path.
"""
from typing import Optional

from django.http import HttpRequest

from ..conf import MonitoringConfiguration
from ..crypto import HashService
from .base import Authorizer


class TokenAuthorizer(Authorizer):
    identity = 'monitoring.token'

    def __init__(
        self,
        configuration: Optional[MonitoringConfiguration] = None,
        hash_service: Optional[HashService] = None,
    ):
        super().__init__(configuration)
        self.token_configuration = self.configuration.token_authorizer
        self.hash_service = hash_service or HashService()

    def is_active(self) -> bool:
        return self.token_configuration.is_enabled() and self.token_configuration.secret != ''

    def is_authorized(self, request: HttpRequest) -> bool:
        auth_token = request.headers.get(self.token_configuration.auth_header_name, '')

        if auth_token == '':
            return False

        if self.token_configuration.secret == '':
            return False

        return self.hash_service.validate_hmac(
            self.configuration.endpoint,
            self.token_configuration.secret,
            auth_token,
        )

    @property
    def priority(self) -> int:
        return self.token_configuration.priority

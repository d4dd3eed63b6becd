"""
Admin User Authorizer

Grants access to requests from a logged in superuser session.
"""
from django.http import HttpRequest

from .base import Authorizer


class AdminUserAuthorizer(Authorizer):
    identity = 'monitoring.admin_user'

    def is_active(self) -> bool:
        return self.configuration.admin_user_authorizer.is_enabled()

    def is_authorized(self, request: HttpRequest) -> bool:
        user = getattr(request, 'user', None)
        if user is None:
            return False

        return bool(user.is_authenticated and user.is_superuser)

    @property
    def priority(self) -> int:
        return self.configuration.admin_user_authorizer.priority

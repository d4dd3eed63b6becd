"""
Monitoring Authorization

Pluggable strategies deciding who may read the health endpoint.
"""

from .base import Authorizer, is_request_authorized, sort_authorizers

__all__ = [
    'Authorizer',
    'is_request_authorized',
    'sort_authorizers',
]

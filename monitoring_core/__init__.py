"""
Monitoring Core Package

Pluggable health monitoring for Django projects:
- Health check providers with nested results
- Result caching with expiration and tag based invalidation
- Authorizer chain guarding the health endpoint
- Middleware exposing aggregated health as JSON
- ``monitoring_run`` management command
"""

__version__ = '1.0.0'

# Don't import anything at module level that requires Django apps to be ready
__all__ = [
    '__version__',
]

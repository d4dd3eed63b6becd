"""
Authorizer Contract and Chain
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from django.http import HttpRequest

from ..conf import ORDER_ASCENDING, MonitoringConfiguration

logger = logging.getLogger(__name__)


class Authorizer(ABC):
    """
    Base authorizer.

    Every active authorizer must be sufficient on its own; ``priority`` only
    decides the order in which the chain asks them.
    """

    identity: str = ''

    def __init__(self, configuration: Optional[MonitoringConfiguration] = None):
        self.configuration = configuration or MonitoringConfiguration.from_settings()

    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def is_authorized(self, request: HttpRequest) -> bool:
        pass

    @property
    def priority(self) -> int:
        return 0


def sort_authorizers(
    authorizers: Iterable[Authorizer],
    order: str,
) -> List[Authorizer]:
    """Order authorizers by priority; ties keep their registration order."""
    return sorted(
        authorizers,
        key=lambda authorizer: authorizer.priority,
        reverse=order != ORDER_ASCENDING,
    )


def is_request_authorized(authorizers: Iterable[Authorizer], request: HttpRequest) -> bool:
    """Ask active authorizers in order; the first one granting access wins."""
    for authorizer in authorizers:
        if not authorizer.is_active():
            continue

        if authorizer.is_authorized(request):
            logger.debug(f"Monitoring request authorized by {authorizer.identity}")
            return True

    return False

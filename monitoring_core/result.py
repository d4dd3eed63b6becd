"""
Monitoring Result

Outcome of a single provider run, optionally composed of nested sub-results.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.core.serializers.json import DjangoJSONEncoder


@dataclass
class MonitoringResult:
    """
    Result of a monitoring provider.

    Providers may assemble a composite result incrementally through the
    fluent setters; once returned from ``execute()`` it is treated as
    read-only.
    """
    name: str
    healthy: bool
    reason: Optional[str] = None
    sub_results: List['MonitoringResult'] = field(default_factory=list)

    def is_healthy(self) -> bool:
        """Own flag rolled up with the immediate sub-results."""
        if not self.healthy or not self.has_sub_results():
            return self.healthy

        for sub_result in self.sub_results:
            if not sub_result.is_healthy():
                return False

        return True

    def has_sub_results(self) -> bool:
        return len(self.sub_results) > 0

    def set_healthy(self, healthy: bool) -> 'MonitoringResult':
        self.healthy = healthy
        return self

    def set_reason(self, reason: str) -> 'MonitoringResult':
        self.reason = reason
        return self

    def add_sub_result(self, result: 'MonitoringResult') -> 'MonitoringResult':
        self.sub_results.append(result)
        return self

    def get_property(self, name: str) -> Any:
        """Display accessor used when rendering results."""
        if name == 'name':
            return self.name
        if name == 'isHealthy':
            return self.healthy
        if name == 'description':
            return self.reason

        raise ValueError(
            f'Property "{name}" does not exist on {self.__class__.__name__}'
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'name': self.name,
            'isHealthy': self.healthy,
            'description': self.reason,
        }

        if self.sub_results:
            data['subResults'] = [
                sub_result.to_dict() for sub_result in self.sub_results
            ]

        return data

    def json_serialize(self) -> Dict[str, Any]:
        """Value handed to ``ResultJSONEncoder``."""
        return self.to_dict()


class ResultJSONEncoder(DjangoJSONEncoder):
    """JSON encoder aware of monitoring results."""

    def default(self, o):
        if isinstance(o, MonitoringResult):
            return o.json_serialize()
        return super().default(o)

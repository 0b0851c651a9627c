"""Domain layer: response value, option resolution, event types."""

from pagerduty_notify.domain.event_type import EventType
from pagerduty_notify.domain.options import NotifyOptions, resolve
from pagerduty_notify.domain.response import Response, map_response

__all__ = [
    "EventType",
    "NotifyOptions",
    "Response",
    "map_response",
    "resolve",
]

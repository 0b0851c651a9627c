"""PagerDuty notification gateway behind a provider-neutral notify() contract."""

from pagerduty_notify.adapters.log_gateway import LogGateway
from pagerduty_notify.adapters.pagerduty_gateway import PagerdutyGateway
from pagerduty_notify.adapters.requests_client import RequestsHttpClient
from pagerduty_notify.config.settings import GatewayConfig
from pagerduty_notify.domain.event_type import EventType
from pagerduty_notify.domain.options import NotifyOptions
from pagerduty_notify.domain.response import Response
from pagerduty_notify.errors import NotifyError, TransportError
from pagerduty_notify.ports.gateway import IGateway

__all__ = [
    "EventType",
    "GatewayConfig",
    "IGateway",
    "LogGateway",
    "NotifyError",
    "NotifyOptions",
    "PagerdutyGateway",
    "RequestsHttpClient",
    "Response",
    "TransportError",
]

"""Port interfaces (ABCs) for the hexagonal architecture."""

from pagerduty_notify.ports.gateway import IGateway
from pagerduty_notify.ports.http_client import HttpResponse, IHttpClient

__all__ = [
    "HttpResponse",
    "IGateway",
    "IHttpClient",
]

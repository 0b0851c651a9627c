"""Shared URL building and request issuing for HTTP-backed gateways."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pagerduty_notify.config.settings import GatewayConfig
from pagerduty_notify.ports.http_client import HttpResponse, IHttpClient

log = logging.getLogger(__name__)


class HttpGatewayHelper:
    """Held by each HTTP gateway; knows the endpoint, the timeouts and the client."""

    def __init__(self, client: IHttpClient, config: GatewayConfig) -> None:
        self._client = client
        self._config = config

    def request_url(self) -> str:
        return self._config.endpoint.replace("{version}", self._config.version)

    def build_url_from_string(self, path: str) -> str:
        return f"{self.request_url().rstrip('/')}/{path.lstrip('/')}"

    def commit(self, method: str, url: str, params: Mapping[str, Any]) -> HttpResponse:
        # null-valued fields are left out of the body rather than sent as JSON null
        body = {k: v for k, v in params.items() if v is not None}
        log.debug("HTTP %s %s fields=%s", method.upper(), url, sorted(body))
        return self._client.send(
            method,
            url,
            headers={"Content-Type": "application/json"},
            json_body=body,
            timeout=self._config.timeout,
            connect_timeout=self._config.connect_timeout,
        )

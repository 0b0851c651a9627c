"""IHttpClient adapter backed by a requests Session."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests

from pagerduty_notify.errors import TransportError
from pagerduty_notify.ports.http_client import HttpResponse, IHttpClient

log = logging.getLogger(__name__)


class RequestsHttpClient(IHttpClient):
    def __init__(self, session: requests.Session | None = None) -> None:
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        json_body: Any,
        timeout: float,
        connect_timeout: float,
    ) -> HttpResponse:
        try:
            resp = self._session.request(
                method.upper(),
                url,
                headers=dict(headers),
                json=json_body,
                timeout=(connect_timeout, timeout),
            )
        except requests.RequestException as e:
            log.error("HTTP %s %s failed: %s", method.upper(), url, e)
            raise TransportError(str(e)) from e
        return HttpResponse(status_code=resp.status_code, body=resp.content or b"")

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

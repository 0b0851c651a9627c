"""PagerDuty gateway using the generic Events API (create_event.json)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pagerduty_notify.adapters.http_gateway import HttpGatewayHelper
from pagerduty_notify.config.logging_config import mask_secret
from pagerduty_notify.config.settings import GatewayConfig
from pagerduty_notify.domain.event_type import EventType
from pagerduty_notify.domain.options import OptionsLike, resolve, to_mapping
from pagerduty_notify.domain.response import Response, map_response
from pagerduty_notify.errors import TransportError
from pagerduty_notify.ports.gateway import IGateway
from pagerduty_notify.ports.http_client import HttpResponse, IHttpClient

log = logging.getLogger(__name__)

STATUS_ERRORS = {
    404: "Invalid service.",
    400: "Incorrect request values.",
}


class PagerdutyGateway(IGateway):
    def __init__(self, client: IHttpClient, config: GatewayConfig) -> None:
        self._config = config
        self._http = HttpGatewayHelper(client, config)

    def notify(self, to: str, message: str, options: OptionsLike = None) -> Response:
        opts = to_mapping(options)
        opts["to"] = to
        params = self._add_message(message, opts)

        if params["service_key"] is None:
            log.warning("No PagerDuty service key configured; sending without one")

        url = self._http.build_url_from_string("create_event.json")
        log.info(
            "Sending %s event for incident %s (key %s)",
            params["event_type"],
            params["incident_key"],
            mask_secret(params["service_key"]),
        )
        try:
            raw_response = self._http.commit("post", url, params)
        except TransportError as e:
            log.error("PagerDuty request failed: %s", e)
            return map_response(False, f"Transport error: {e}")
        return self._interpret(raw_response)

    def _add_message(self, message: str, options: Mapping[str, Any]) -> dict[str, Any]:
        event_type = resolve(options, "event_type", EventType.TRIGGER)
        if isinstance(event_type, EventType):
            event_type = event_type.value
        return {
            "service_key": resolve(options, "token", self._config.token),
            "incident_key": resolve(options, "to", self._config.default_incident_key),
            "event_type": event_type,
            "client": resolve(options, "client", None),
            "client_url": resolve(options, "client_url", None),
            "details": resolve(options, "details", None),
            "description": message,
        }

    def _interpret(self, raw_response: HttpResponse) -> Response:
        status = raw_response.status_code
        payload = _decode(raw_response)

        if status == 200:
            return map_response(True, raw=payload)
        if status in STATUS_ERRORS:
            log.warning("PagerDuty rejected event (%d): %s", status, STATUS_ERRORS[status])
            return map_response(False, STATUS_ERRORS[status], raw=payload)

        error = _provider_error(payload) or _json_error(raw_response)
        log.warning("PagerDuty returned %d: %s", status, error)
        return map_response(False, error, raw=payload)


def _decode(raw_response: HttpResponse) -> Any:
    if not raw_response.body:
        return None
    try:
        return raw_response.json()
    except (ValueError, RecursionError):
        return raw_response.body


def _provider_error(payload: Any) -> str | None:
    """Pull a failure reason out of a PagerDuty error body, if it has one."""
    if not isinstance(payload, dict):
        return None

    message = payload.get("message")
    if isinstance(message, str) and message:
        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            return f"{message}: {'; '.join(str(e) for e in errors)}"
        return message

    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
        return error["message"]
    return None


def _json_error(raw_response: HttpResponse) -> str:
    return f"API response not valid. (Raw response API {raw_response.text})"

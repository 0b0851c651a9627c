"""Gateway that writes notifications to the log instead of calling a provider."""

from __future__ import annotations

import logging

from pagerduty_notify.domain.options import OptionsLike, to_mapping
from pagerduty_notify.domain.response import Response, map_response
from pagerduty_notify.ports.gateway import IGateway

log = logging.getLogger(__name__)


class LogGateway(IGateway):
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._log = logger or log
        self._level = level

    def notify(self, to: str, message: str, options: OptionsLike = None) -> Response:
        opts = to_mapping(options)
        opts.pop("token", None)
        opts["to"] = to
        self._log.log(self._level, "Notification to %s: %s", to, message)
        return map_response(True, raw={**opts, "message": message})

"""Gateway configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ENDPOINT = "https://events.pagerduty.com/generic/{version}"
DEFAULT_VERSION = "2010-04-15"


@dataclass(frozen=True)
class GatewayConfig:
    token: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    version: str = DEFAULT_VERSION
    timeout: float = 80.0
    connect_timeout: float = 30.0
    default_incident_key: str = "NotifyMe"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GatewayConfig:
        env = os.environ if environ is None else environ
        return cls(
            token=env.get("PAGERDUTY_TOKEN") or cls.token,
            endpoint=env.get("PAGERDUTY_ENDPOINT", cls.endpoint),
            timeout=float(env.get("PAGERDUTY_TIMEOUT", cls.timeout)),
            connect_timeout=float(env.get("PAGERDUTY_CONNECT_TIMEOUT", cls.connect_timeout)),
        )

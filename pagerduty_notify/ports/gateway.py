from __future__ import annotations

from abc import ABC, abstractmethod

from pagerduty_notify.domain.options import OptionsLike
from pagerduty_notify.domain.response import Response


class IGateway(ABC):
    @abstractmethod
    def notify(self, to: str, message: str, options: OptionsLike = None) -> Response:
        """Send one notification and report the outcome, never raising on provider errors."""

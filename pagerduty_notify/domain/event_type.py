"""PagerDuty incident lifecycle actions."""

from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    TRIGGER = "trigger"
    ACKNOWLEDGE = "acknowledge"
    RESOLVE = "resolve"

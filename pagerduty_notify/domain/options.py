"""Caller-supplied notification options and default resolution."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeVar, Union

from pagerduty_notify.domain.event_type import EventType

T = TypeVar("T")


def resolve(options: Mapping[str, Any] | None, key: str, default: T) -> Any | T:
    """Return ``options[key]`` when the key is present, else ``default``.

    A present key wins even when its value is falsy (``""``, ``0``, ``None``).
    """
    if options is not None and key in options:
        return options[key]
    return default


@dataclass(frozen=True)
class NotifyOptions:
    """Typed per-call overrides for a gateway.

    ``None`` means "not set": the field is left out of ``as_mapping()`` so the
    gateway default applies.
    """

    token: str | None = None
    to: str | None = None
    event_type: EventType | str | None = None
    client: str | None = None
    client_url: str | None = None
    details: Any = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> NotifyOptions:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown notification options: {', '.join(unknown)}")
        return cls(**dict(mapping))

    def as_mapping(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


OptionsLike = Union[Mapping[str, Any], NotifyOptions, None]


def to_mapping(options: OptionsLike) -> dict[str, Any]:
    """Normalise any accepted options form into a fresh, mutable dict."""
    if options is None:
        return {}
    if isinstance(options, NotifyOptions):
        return options.as_mapping()
    return dict(options)

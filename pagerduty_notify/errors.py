"""Exceptions raised by the notification layer."""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for notification errors."""


class TransportError(NotifyError):
    """The HTTP request never produced a response (DNS, refused, timeout)."""

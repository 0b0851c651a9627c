"""Tests for option resolution and typed notification options."""

import pytest

from pagerduty_notify.domain.event_type import EventType
from pagerduty_notify.domain.options import NotifyOptions, resolve, to_mapping


class TestResolve:
    def test_present_key(self):
        assert resolve({"token": "abc"}, "token", "default") == "abc"

    def test_missing_key_uses_default(self):
        assert resolve({}, "token", "default") == "default"

    def test_none_options(self):
        assert resolve(None, "token", "default") == "default"

    @pytest.mark.parametrize("value", ["", 0, None, {}, False])
    def test_falsy_value_still_wins(self, value):
        assert resolve({"client": value}, "client", "default") == value

    def test_does_not_mutate(self):
        opts = {"a": 1}
        resolve(opts, "b", 2)
        assert opts == {"a": 1}


class TestNotifyOptions:
    def test_unset_fields_are_absent(self):
        assert NotifyOptions().as_mapping() == {}

    def test_as_mapping(self):
        opts = NotifyOptions(token="T2", event_type=EventType.RESOLVE, details={"cpu": 99})
        assert opts.as_mapping() == {
            "token": "T2",
            "event_type": EventType.RESOLVE,
            "details": {"cpu": 99},
        }

    def test_empty_string_is_kept(self):
        assert NotifyOptions(client="").as_mapping() == {"client": ""}

    def test_from_mapping(self):
        opts = NotifyOptions.from_mapping({"client": "nagios", "client_url": "http://n"})
        assert opts.client == "nagios"
        assert opts.client_url == "http://n"
        assert opts.token is None

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ValueError, match="severity"):
            NotifyOptions.from_mapping({"severity": "high"})

    def test_frozen(self):
        opts = NotifyOptions()
        with pytest.raises(AttributeError):
            opts.token = "x"  # type: ignore[misc]


class TestToMapping:
    def test_none(self):
        assert to_mapping(None) == {}

    def test_copies_plain_mapping(self):
        src = {"token": "a"}
        result = to_mapping(src)
        result["to"] = "b"
        assert src == {"token": "a"}

    def test_notify_options(self):
        assert to_mapping(NotifyOptions(token="a")) == {"token": "a"}

"""Tests for the logging gateway."""

import logging

from pagerduty_notify.adapters.log_gateway import LogGateway
from pagerduty_notify.domain.options import NotifyOptions
from pagerduty_notify.ports.gateway import IGateway


class TestLogGateway:
    def test_is_gateway(self):
        assert isinstance(LogGateway(), IGateway)

    def test_notify_logs_and_succeeds(self, caplog):
        with caplog.at_level(logging.INFO):
            resp = LogGateway().notify("abc", "Disk is full")
        assert resp.success is True
        assert resp.message == "Message sent"
        assert "Notification to abc: Disk is full" in caplog.text

    def test_raw_excludes_token(self):
        resp = LogGateway().notify("abc", "hi", NotifyOptions(token="secret", client="cron"))
        assert resp.raw == {"message": "hi", "to": "abc", "client": "cron"}

    def test_message_option_cannot_replace_message(self):
        resp = LogGateway().notify("abc", "real", {"message": "spoofed"})
        assert resp.raw["message"] == "real"

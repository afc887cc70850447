"""Tests for logging setup."""

import logging

from mail_compositor.logging_setup import setup_logging


def test_verbose_sets_debug(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging(verbose=True)
    setup_logging()

    assert [c["level"] for c in calls] == [logging.DEBUG, logging.INFO]
    assert calls[0]["format"] == "%(levelname)s: %(name)s: %(message)s"

"""Tests for Sentry initialization."""

from unittest.mock import patch

from src.core import sentry
from src.core.config import settings


def test_init_sentry_skips_without_dsn() -> None:
    """No DSN means Sentry stays disabled."""
    original_dsn = settings.sentry_dsn
    try:
        settings.sentry_dsn = None
        with patch("src.core.sentry.sentry_sdk.init") as init:
            assert sentry.init_sentry() is False
        init.assert_not_called()
    finally:
        settings.sentry_dsn = original_dsn


def test_init_sentry_never_sends_request_bodies() -> None:
    """Income figures in request bodies are not attached to events."""
    original_dsn = settings.sentry_dsn
    try:
        settings.sentry_dsn = "https://public@sentry.example.com/1"
        with patch("src.core.sentry.sentry_sdk.init") as init:
            assert sentry.init_sentry() is True
        kwargs = init.call_args.kwargs
        assert kwargs["send_default_pii"] is False
        assert kwargs["max_request_body_size"] == "never"
        assert kwargs["environment"] == settings.environment
    finally:
        settings.sentry_dsn = original_dsn

"""Tests for the exception hierarchy."""

from litellm_config.core.config.exceptions import ConfigError
from litellm_config.core.exceptions import (
    ConfigBuilderError,
    ConfigurationError,
    IntentCommittedError,
    InvalidStrategyError,
    PendingIntentError,
    UnsupportedAxisError,
)


def test_hierarchy():
    for error_cls in (
        UnsupportedAxisError,
        InvalidStrategyError,
        IntentCommittedError,
        PendingIntentError,
    ):
        assert issubclass(error_cls, ConfigurationError)
    assert issubclass(ConfigurationError, ConfigBuilderError)
    assert issubclass(ConfigError, ConfigBuilderError)


def test_context_is_collected():
    error = ConfigurationError("bad intent", provider="bedrock")
    error.add_context(region="ap")

    assert str(error) == "bad intent"
    assert error.context == {"provider": "bedrock", "region": "ap"}


def test_default_message():
    assert ConfigBuilderError().message == "An error occurred while building the config"


def test_unsupported_axis_message():
    error = UnsupportedAxisError(provider="gemini", axis="region")
    assert "gemini" in str(error)
    assert error.context == {"provider": "gemini", "axis": "region"}


def test_pending_intent_lists_names():
    error = PendingIntentError(["nova", "claude"])
    assert error.display_names == ["nova", "claude"]
    assert "nova, claude" in str(error)

"""Tests for API-key authenticated providers."""

import pytest

from litellm_config import env
from litellm_config.core.exceptions import ConfigurationError
from litellm_config.models.providers import (
    PROVIDERS,
    AnthropicProvider,
    BedrockProvider,
    GeminiProvider,
    OpenRouterProvider,
    get_provider_class,
)
from litellm_config.models.schemas import ApiKeyCredential


@pytest.mark.parametrize(
    "provider_cls, model_id, expected",
    [
        (AnthropicProvider, "claude-3-7-sonnet-latest", "anthropic/claude-3-7-sonnet-latest"),
        (GeminiProvider, "gemini-2.5-pro", "gemini/gemini-2.5-pro"),
        (OpenRouterProvider, "openai/gpt-4o", "openrouter/openai/gpt-4o"),
    ],
)
def test_model_paths(provider_cls, model_id, expected):
    provider = provider_cls()
    provider.add_model("m", model_id, api_key=env("KEY")).build()

    entry = provider.registry.all_entries()[0]
    assert entry.model_path == expected
    assert entry.params == {"api_key": env("KEY")}


def test_api_key_providers_have_no_regions():
    for provider_cls in (AnthropicProvider, GeminiProvider, OpenRouterProvider):
        provider = provider_cls()
        assert provider.regions == ()
        assert provider.default_region is None
        assert not provider.supports_fallback
        assert provider.accepts_api_keys


@pytest.mark.parametrize(
    "credential",
    [
        ApiKeyCredential(env("KEY")),
        env("KEY"),
        "env:KEY",
        {"api_key": "env:KEY"},
    ],
)
def test_credential_forms(credential):
    assert GeminiProvider().credential_params(credential) == {"api_key": env("KEY")}


def test_unsupported_credential():
    with pytest.raises(ConfigurationError):
        GeminiProvider().credential_params(42)


def test_intent_key_is_overridden_by_key_axis():
    provider = GeminiProvider()
    provider.add_model("flash", "gemini-2.0-flash", api_key="default").with_api_keys(["a", "b"]).build()
    assert [entry.params["api_key"] for entry in provider.registry] == ["a", "b"]


def test_openrouter_warns_on_unknown_slug(caplog):
    provider = OpenRouterProvider()
    provider.add_model("gpt", "openai/gpt-4o", api_key="k").build()
    assert "catalog" not in caplog.text

    provider.add_model("x", "acme/unknown", api_key="k").build()
    assert "not in the openrouter catalog" in caplog.text


def test_provider_lookup():
    assert get_provider_class("Bedrock") is BedrockProvider
    assert set(PROVIDERS) == {"anthropic", "bedrock", "gemini", "openrouter"}
    with pytest.raises(ValueError):
        get_provider_class("vertex")

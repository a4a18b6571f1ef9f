"""Tests for the fluent model intent builder."""

import pytest

from litellm_config import env
from litellm_config.core.exceptions import (
    ConfigurationError,
    IntentCommittedError,
    InvalidStrategyError,
    UnsupportedAxisError,
)
from litellm_config.models.schemas import (
    AwsCredential,
    FallbackConfig,
    LoadBalanceStrategy,
    Variation,
)

NOVA_PRO = "amazon.nova-pro-v1:0"
TITAN = "amazon.titan-tg1-large"


def _names(provider):
    return [entry.display_name for entry in provider.registry]


def test_build_returns_provider_and_commits(bedrock):
    builder = bedrock.add_model("nova-pro", NOVA_PRO)
    assert bedrock.pending_intents() == ("nova-pro",)
    assert len(bedrock.registry) == 0

    assert builder.build() is bedrock
    assert builder.committed
    assert bedrock.pending_intents() == ()
    assert len(bedrock.registry) == 2
    assert len(builder.result) == 2


def test_execute_is_an_alias(bedrock):
    bedrock.add_model("titan", TITAN).execute()
    assert _names(bedrock) == ["titan"]


def test_builder_cannot_be_reused(bedrock):
    builder = bedrock.add_model("titan", TITAN)
    builder.build()

    with pytest.raises(IntentCommittedError):
        builder.build()
    with pytest.raises(IntentCommittedError):
        builder.with_regions(["eu"])
    assert len(bedrock.registry) == 1


def test_with_strategy_requires_load_balancing(bedrock):
    builder = bedrock.add_model("nova", NOVA_PRO)
    with pytest.raises(ConfigurationError):
        builder.with_strategy("fallback")
    with pytest.raises(ConfigurationError):
        builder.with_fallback_config("eu")


def test_invalid_strategy(bedrock):
    builder = bedrock.add_model("nova", NOVA_PRO).with_load_balancing(regions=["eu", "us"])
    with pytest.raises(InvalidStrategyError):
        builder.with_strategy("random")


def test_load_balance_config_snapshot(bedrock):
    builder = (
        bedrock.add_model("nova", NOVA_PRO)
        .with_load_balancing(regions=["eu", "us"])
        .with_strategy("fallback")
        .with_fallback_config("eu", suffix="-backup")
    )
    config = builder.load_balance_config()

    assert config.regions == ("eu", "us")
    assert config.strategy is LoadBalanceStrategy.FALLBACK
    assert config.fallback == FallbackConfig("eu", "-backup")
    assert bedrock.add_model("plain", TITAN).load_balance_config() is None


def test_fallback_through_load_balancing(bedrock):
    (
        bedrock.add_model("nova", NOVA_PRO)
        .with_load_balancing(regions=["eu", "us"])
        .with_strategy("fallback")
        .with_fallback_config("us")
        .build()
    )
    assert _names(bedrock) == ["nova", "nova-fallback"]
    assert bedrock.registry.all_entries()[0].model_path == "bedrock/us.amazon.nova-pro-v1:0"


def test_with_region_fallback(bedrock):
    bedrock.add_model("claude-3-7", "anthropic.claude-3-7-sonnet-20250219-v1:0").with_region_fallback(
        "eu", "us"
    ).build()

    assert _names(bedrock) == ["claude-3-7", "claude-3-7-fallback"]
    assert [relation.to_dict() for relation in bedrock.fallbacks()] == [
        {"claude-3-7": ["claude-3-7-fallback"]}
    ]


def test_fallback_config_missing_at_commit(bedrock):
    builder = bedrock.add_model("nova", NOVA_PRO).with_load_balancing(regions=["eu", "us"])
    builder.with_strategy("fallback")
    with pytest.raises(ConfigurationError):
        builder.build()


def test_with_regions_and_credentials(bedrock):
    credentials = [
        AwsCredential(env("AWS_KEY_A"), env("AWS_SECRET_A")),
        AwsCredential(env("AWS_KEY_B"), env("AWS_SECRET_B")),
    ]
    bedrock.add_model("nova", NOVA_PRO).with_regions(["eu", "us"]).with_credentials(credentials).build()
    assert len(bedrock.registry) == 4


def test_with_multi_axis(bedrock):
    credentials = [AwsCredential("a", "b")]
    bedrock.add_model("nova", NOVA_PRO).with_multi_axis(["us"], credentials).build()
    entry = bedrock.registry.all_entries()[0]
    assert entry.model_path == "bedrock/us.amazon.nova-pro-v1:0"
    assert entry.params["aws_access_key_id"] == "a"


def test_empty_axes_are_rejected(bedrock):
    builder = bedrock.add_model("nova", NOVA_PRO)
    with pytest.raises(ConfigurationError):
        builder.with_credentials([])
    with pytest.raises(ConfigurationError):
        builder.with_regions([])


def test_api_keys_on_bedrock_are_unsupported(bedrock):
    with pytest.raises(UnsupportedAxisError) as exc_info:
        bedrock.add_model("nova", NOVA_PRO).with_api_keys(["k"])
    assert exc_info.value.axis == "api key"


def test_api_keys_in_order(anthropic):
    keys = [env("ANTHROPIC_KEY_1"), env("ANTHROPIC_KEY_2"), env("ANTHROPIC_KEY_3")]
    anthropic.add_model("claude", "claude-3-7-sonnet-latest").with_api_keys(keys).build()

    entries = anthropic.registry.all_entries()
    assert [entry.display_name for entry in entries] == ["claude"] * 3
    assert [entry.params["api_key"] for entry in entries] == keys
    assert all(entry.model_path == "anthropic/claude-3-7-sonnet-latest" for entry in entries)


def test_region_axes_on_regionless_provider(anthropic):
    builder = anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="k")
    with pytest.raises(UnsupportedAxisError):
        builder.with_regions(["eu"])
    with pytest.raises(UnsupportedAxisError):
        builder.with_region_fallback("eu", "us")
    with pytest.raises(UnsupportedAxisError):
        builder.with_cross_region()


def test_declared_region_on_regionless_provider(anthropic):
    with pytest.raises(UnsupportedAxisError):
        anthropic.add_model("claude", "claude-3-7-sonnet-latest", region="eu")


def test_with_cross_region(bedrock):
    bedrock.add_model("titan", TITAN).with_cross_region().build()
    assert _names(bedrock) == ["titan", "titan"]


def test_cross_region_cannot_combine_with_axes(bedrock):
    builder = bedrock.add_model("titan", TITAN).with_cross_region().with_regions(["eu"])
    with pytest.raises(ConfigurationError):
        builder.build()


def test_with_rate_limit(anthropic):
    anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="k").with_rate_limit(30).build()
    assert anthropic.registry.all_entries()[0].to_dict()["rpm"] == 30


def test_rate_limit_must_be_positive(anthropic):
    builder = anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="k")
    with pytest.raises(ConfigurationError):
        builder.with_rate_limit(0)


def test_thinking_variations(bedrock):
    bedrock.add_model("claude", "anthropic.claude-3-7-sonnet-20250219-v1:0").with_thinking_variations()

    entries = bedrock.registry.all_entries()
    assert [entry.display_name for entry in entries] == [
        "claude-think-1024",
        "claude-think-16384",
        "claude-think-1024",
        "claude-think-16384",
    ]
    assert entries[0].params["thinking"] == {"type": "enabled", "budget_tokens": 1024}


def test_temperature_variations(anthropic):
    builder = anthropic.add_model(
        "claude", "claude-3-7-sonnet-latest", api_key="k", params={"temperature": 0.5}
    )
    assert builder.with_temperature_variations([0.1, 1.0]) is anthropic

    entries = anthropic.registry.all_entries()
    assert [entry.display_name for entry in entries] == ["claude-temp-0.1", "claude-temp-1"]
    assert [entry.params["temperature"] for entry in entries] == [0.1, 1.0]


def test_close_temperatures_get_distinct_names(anthropic):
    anthropic.add_model("c", "claude-3-7-sonnet-latest", api_key="k").with_temperature_variations(
        [0.1234561, 0.1234564, 2]
    )
    assert _names(anthropic) == ["c-temp-0.1234561", "c-temp-0.1234564", "c-temp-2"]


def test_custom_variations_accept_mappings(anthropic):
    anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="k").with_variations(
        [
            {"suffix": "short", "params": {"max_tokens": 256}},
            Variation("long", {"max_tokens": 8192}),
        ]
    )
    assert _names(anthropic) == ["claude-short", "claude-long"]


def test_variation_mapping_needs_suffix(anthropic):
    builder = anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="k")
    with pytest.raises(ConfigurationError):
        builder.with_variations([{"params": {"max_tokens": 1}}])


def test_failed_commit_closes_builder(bedrock):
    builder = bedrock.add_model("nova", NOVA_PRO).with_regions(["ap"])

    with pytest.raises(ConfigurationError):
        builder.build()

    assert builder.committed
    assert bedrock.pending_intents() == ()
    assert len(bedrock.registry) == 0
    with pytest.raises(IntentCommittedError):
        builder.build()


def test_failed_intent_does_not_affect_others(bedrock):
    bedrock.add_model("titan", TITAN).build()
    with pytest.raises(ConfigurationError):
        bedrock.add_model("nova", NOVA_PRO).with_credentials(["not-aws"]).build()
    bedrock.add_model("nova", NOVA_PRO).build()

    assert _names(bedrock) == ["titan", "nova", "nova"]


def test_unknown_model_id_logs_warning(bedrock, caplog):
    bedrock.add_model("mystery", "vendor.unknown-model").build()
    assert "not in the bedrock catalog" in caplog.text
    assert bedrock.registry.all_entries()[0].model_path == "bedrock/vendor.unknown-model"


def test_env_shorthand_for_api_key(anthropic):
    anthropic.add_model("claude", "claude-3-7-sonnet-latest", api_key="env:ANTHROPIC_API_KEY").build()
    assert anthropic.registry.all_entries()[0].params["api_key"] == env("ANTHROPIC_API_KEY")


def test_bedrock_rejects_api_key(bedrock):
    with pytest.raises(ConfigurationError):
        bedrock.add_model("nova", NOVA_PRO, api_key="k")

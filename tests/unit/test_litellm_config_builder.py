"""Tests for the configuration session."""

import pytest
import yaml

from litellm_config import LiteLLMConfigBuilder, env
from litellm_config.core.config import BuilderConfig
from litellm_config.core.config.schema import RouterSettings
from litellm_config.core.exceptions import PendingIntentError
from litellm_config.core.values import StringValue


def _bedrock(session, **options):
    return session.create_bedrock_provider(
        access_key_id=env("AWS_ACCESS_KEY_ID"),
        secret_access_key=env("AWS_SECRET_ACCESS_KEY"),
        default_region_map={"eu": env("AWS_REGION_EU"), "us": env("AWS_REGION_US")},
        **options,
    )


def test_providers_share_the_session_registry(session):
    aws = _bedrock(session)
    gemini = session.create_gemini_provider()

    aws.add_model("nova-pro", "amazon.nova-pro-v1:0").build()
    gemini.add_model("flash", "gemini-2.0-flash").with_api_keys([env("G1"), env("G2")]).build()

    config = session.build()
    assert [model["model_name"] for model in config["model_list"]] == [
        "nova-pro",
        "nova-pro",
        "flash",
        "flash",
    ]
    assert len(session.registry) == 4


def test_config_values_are_rendered(session):
    aws = _bedrock(session)
    aws.add_model("titan", "amazon.titan-tg1-large").build()

    model = session.build()["model_list"][0]
    assert model == {
        "model_name": "titan",
        "litellm_params": {
            "model": "bedrock/amazon.titan-tg1-large",
            "aws_access_key_id": "os.environ/AWS_ACCESS_KEY_ID",
            "aws_secret_access_key": "os.environ/AWS_SECRET_ACCESS_KEY",
            "aws_region_name": "os.environ/AWS_REGION_EU",
        },
    }


def test_settings_sections(session):
    session.with_litellm_settings({"drop_params": True})
    session.with_general_settings({"master_key": env("LITELLM_MASTER_KEY")})
    session.with_router_settings(RouterSettings(num_retries=3))
    session.with_environment_variables({"A": "1"}).with_environment_variables({"B": "2"})
    session.with_include_files(["extra.yaml"])
    session.create_anthropic_provider().add_model(
        "claude", "claude-3-7-sonnet-latest", api_key=StringValue("sk-test")
    ).build()

    config = session.build()
    assert list(config) == [
        "include",
        "litellm_settings",
        "general_settings",
        "router_settings",
        "environment_variables",
        "model_list",
    ]
    assert config["litellm_settings"] == {"drop_params": True}
    assert config["general_settings"] == {"master_key": "os.environ/LITELLM_MASTER_KEY"}
    assert config["router_settings"] == {"num_retries": 3}
    assert config["environment_variables"] == {"A": "1", "B": "2"}
    assert config["model_list"][0]["litellm_params"]["api_key"] == "sk-test"


def test_empty_session_builds_empty_config(session):
    assert session.build() == {}


def test_build_refuses_pending_intents(session):
    aws = _bedrock(session)
    builder = aws.add_model("nova-pro", "amazon.nova-pro-v1:0").with_regions(["eu", "us"])

    assert session.pending_intents() == ["nova-pro"]
    with pytest.raises(PendingIntentError) as exc_info:
        session.build()
    assert exc_info.value.display_names == ["nova-pro"]

    builder.build()
    assert len(session.build()["model_list"]) == 2


def test_region_fallbacks_in_router_settings(session):
    aws = _bedrock(session)
    aws.add_model("claude-3-7", "anthropic.claude-3-7-sonnet-20250219-v1:0").with_region_fallback(
        "eu", "us"
    ).build()
    aws.add_model("nova", "amazon.nova-pro-v1:0").with_region_fallback("us", "eu").build()

    session.with_router_settings({"num_retries": 2}).with_region_fallbacks(aws)

    router = session.build()["router_settings"]
    assert router == {
        "num_retries": 2,
        "fallbacks": [
            {"claude-3-7": ["claude-3-7-fallback"]},
            {"nova": ["nova-fallback"]},
        ],
    }
    assert session.validate().valid


def test_validate_reports_problems(session):
    result = session.validate()
    assert not result.valid
    assert "Config must have at least one model defined" in result.errors

    session.with_router_settings({"fallbacks": [{"ghost": ["ghost-fallback"]}]})
    _bedrock(session).add_model("titan", "amazon.titan-tg1-large")
    errors = session.validate().errors
    assert "Uncommitted model intents: titan" in errors
    assert "Fallback references unknown model 'ghost'" in errors


def test_from_config():
    config = BuilderConfig.model_validate(
        {
            "litellm_settings": {"drop_params": True},
            "router_settings": {"routing_strategy": "simple-shuffle"},
            "environment_variables": {"LITELLM_LOG": "INFO"},
            "include": ["extra.yaml"],
            "logging": {"level": "WARNING"},
            "catalog": {"bedrock_model_ids": ["eu.acme.model", "us.acme.model"]},
        }
    )
    session = LiteLLMConfigBuilder.from_config(config)

    assert session.catalog.is_cross_region_eligible("acme.model")
    _bedrock(session).add_model("acme", "acme.model").build()

    built = session.build()
    assert [m["litellm_params"]["model"] for m in built["model_list"]] == [
        "bedrock/eu.acme.model",
        "bedrock/us.acme.model",
    ]
    assert built["include"] == ["extra.yaml"]
    assert built["router_settings"] == {"routing_strategy": "simple-shuffle"}


def test_generate_and_write(session, tmp_path):
    _bedrock(session).add_model("nova-pro", "amazon.nova-pro-v1:0").build()

    text = session.generate_yaml()
    assert "# ========== AWS MODELS ==========" in text
    assert yaml.safe_load(text) == session.build()

    plain = session.write_to_file(tmp_path / "plain.yaml", enhanced=False)
    enhanced = session.write_to_file(tmp_path / "enhanced.yaml")
    assert "#" not in plain.read_text(encoding="utf-8")
    assert yaml.safe_load(plain.read_text(encoding="utf-8")) == yaml.safe_load(
        enhanced.read_text(encoding="utf-8")
    )


def test_generated_yaml_groups_custom_catalog_regions(session):
    from litellm_config.models.catalog import ModelIdentityCatalog

    catalog = ModelIdentityCatalog(
        ["eu.vendor.model-v1", "us.vendor.model-v1", "ap.vendor.model-v1"],
        regions=("eu", "us", "ap"),
    )
    aws = session.create_bedrock_provider(
        access_key_id="AKIA",
        secret_access_key="SECRET",
        default_region_map={"eu": "eu-central-1", "us": "us-east-1", "ap": "ap-south-1"},
        catalog=catalog,
    )
    aws.add_model("m", "vendor.model-v1").build()

    assert session.regions() == ("eu", "us", "ap")
    text = session.generate_yaml()
    for region in ("EU", "US", "AP"):
        assert f"# ----- Region: {region} -----" in text

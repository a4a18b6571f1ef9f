"""Shared fixtures for the test suite."""

import pytest

from litellm_config import LiteLLMConfigBuilder, env
from litellm_config.models.catalog import ModelIdentityCatalog
from litellm_config.models.providers import AnthropicProvider, BedrockProvider


@pytest.fixture
def region_map():
    return {"eu": env("AWS_REGION_EU"), "us": env("AWS_REGION_US")}


@pytest.fixture
def bedrock(region_map) -> BedrockProvider:
    """Bedrock provider with CRIS detection on and a private registry."""
    return BedrockProvider(
        access_key_id=env("AWS_ACCESS_KEY_ID"),
        secret_access_key=env("AWS_SECRET_ACCESS_KEY"),
        default_region_map=region_map,
    )


@pytest.fixture
def three_region_bedrock() -> BedrockProvider:
    """Bedrock provider over a catalog with an extra ``ap`` region."""
    catalog = ModelIdentityCatalog(
        ["eu.vendor.model-v1", "us.vendor.model-v1", "ap.vendor.model-v1", "vendor.model-v1"],
        regions=("eu", "us", "ap"),
    )
    return BedrockProvider(
        access_key_id="AKIA",
        secret_access_key="SECRET",
        default_region_map={"eu": "eu-central-1", "us": "us-east-1", "ap": "ap-south-1"},
        catalog=catalog,
    )


@pytest.fixture
def anthropic() -> AnthropicProvider:
    return AnthropicProvider()


@pytest.fixture
def session() -> LiteLLMConfigBuilder:
    return LiteLLMConfigBuilder()

"""Configuration schema module.

Settings sections are passthrough data for the gateway: the builder never
interprets them beyond attaching them to the output document. The schemas list
the well-known keys for validation and IDE completion while allowing arbitrary
extension through Pydantic's extra="allow".
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

# ConfigValue fields (EnvironmentRef, StringValue or str) are typed as Any.
_SETTINGS_CONFIG = {"extra": "allow", "arbitrary_types_allowed": True}


class CacheParams(BaseModel):
    """Response cache configuration.

    Attributes:
        type: Cache backend ("local", "redis", "redis-semantic", "qdrant-semantic", "s3").
        ttl: Time-to-live for cache entries, in seconds.
        supported_call_types: Gateway call types to cache for.
    """

    type: Literal["local", "redis", "redis-semantic", "qdrant-semantic", "s3"]
    ttl: Optional[float] = None
    default_in_memory_ttl: Optional[float] = None
    default_in_redis_ttl: Optional[float] = None
    similarity_threshold: Optional[float] = None
    redis_semantic_cache_embedding_model: Optional[str] = None
    supported_call_types: Optional[List[str]] = None

    # Redis
    host: Optional[str] = None
    port: Optional[str] = None
    password: Optional[str] = None
    namespace: Optional[str] = None

    # S3
    s3_bucket_name: Optional[str] = None
    s3_region_name: Optional[str] = None
    s3_api_version: Optional[str] = None
    s3_use_ssl: Optional[bool] = None
    s3_verify: Optional[bool] = None
    s3_endpoint_url: Optional[str] = None
    s3_aws_access_key_id: Optional[str] = None
    s3_aws_secret_access_key: Optional[str] = None
    s3_aws_session_token: Optional[str] = None

    model_config = _SETTINGS_CONFIG


class LiteLLMSettings(BaseModel):
    """Gateway-wide behavior flags (``litellm_settings``)."""

    drop_params: Optional[bool] = None
    modify_params: Optional[bool] = None
    set_verbose: Optional[bool] = None
    callbacks: Optional[List[str]] = None
    success_callback: Optional[List[str]] = None
    failure_callback: Optional[List[str]] = None
    cache: Optional[bool] = None
    cache_params: Optional[CacheParams] = None
    service_callbacks: Optional[List[str]] = None
    redact_user_api_key_info: Optional[bool] = None
    langfuse_default_tags: Optional[List[str]] = None
    turn_off_message_logging: Optional[bool] = None
    json_logs: Optional[bool] = None
    default_fallbacks: Optional[List[str]] = None
    content_policy_fallbacks: Optional[List[Dict[str, List[str]]]] = None
    context_window_fallbacks: Optional[List[Dict[str, List[str]]]] = None
    request_timeout: Optional[float] = None
    force_ipv4: Optional[bool] = None
    enable_preview_features: Optional[bool] = None

    model_config = _SETTINGS_CONFIG


class GeneralSettings(BaseModel):
    """Proxy server settings (``general_settings``)."""

    master_key: Any = None
    database_url: Any = None
    store_model_in_db: Optional[bool] = None
    store_prompts_in_spend_logs: Optional[bool] = None
    completion_model: Optional[str] = None
    disable_spend_logs: Optional[bool] = None
    disable_master_key_return: Optional[bool] = None
    disable_reset_budget: Optional[bool] = None
    enable_jwt_auth: Optional[bool] = None
    enforce_user_param: Optional[bool] = None
    allowed_routes: Optional[List[str]] = None
    key_management_system: Optional[str] = None
    database_connection_pool_limit: Optional[int] = None
    database_connection_timeout: Optional[int] = None
    allow_requests_on_db_unavailable: Optional[bool] = None
    custom_auth: Optional[str] = None
    max_parallel_requests: Optional[int] = None
    global_max_parallel_requests: Optional[int] = None
    infer_model_from_keys: Optional[bool] = None
    background_health_checks: Optional[bool] = None
    health_check_interval: Optional[int] = None
    alerting: Optional[List[str]] = None
    alerting_threshold: Optional[int] = None

    model_config = _SETTINGS_CONFIG


RoutingStrategy = Literal[
    "simple-shuffle",
    "least-busy",
    "usage-based-routing",
    "latency-based-routing",
    "usage-based-routing-v2",
]


class RouterSettings(BaseModel):
    """Routing behavior (``router_settings``), including fallback chains."""

    routing_strategy: Optional[RoutingStrategy] = None
    redis_host: Any = None
    redis_password: Any = None
    redis_port: Any = None
    enable_pre_call_checks: Optional[bool] = None
    allowed_fails: Optional[int] = None
    cooldown_time: Optional[float] = None
    disable_cooldowns: Optional[bool] = None
    enable_tag_filtering: Optional[bool] = None
    retry_policy: Optional[Dict[str, int]] = None
    allowed_fails_policy: Optional[Dict[str, int]] = None
    content_policy_fallbacks: Optional[List[Dict[str, List[str]]]] = None
    fallbacks: Optional[List[Dict[str, List[str]]]] = None
    timeout: Optional[float] = None
    num_retries: Optional[int] = None
    request_timeout: Optional[float] = None
    debug_level: Optional[Literal["DEBUG", "INFO"]] = None

    model_config = _SETTINGS_CONFIG


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: str = "INFO"

    model_config = {"extra": "allow"}

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown logging level: {value}")
        return upper


class CatalogConfig(BaseModel):
    """Extra identifiers layered onto the static model catalogs.

    Attributes:
        bedrock_model_ids: Bedrock identifiers (bare or region-tagged) known to
            the deployment but missing from the bundled table.
    """

    bedrock_model_ids: List[str] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class BuilderConfig(BaseModel):
    """Root configuration for a config-building session.

    Attributes:
        litellm_settings: Gateway-wide behavior flags.
        general_settings: Proxy server settings.
        router_settings: Routing behavior.
        environment_variables: Variables written into the document.
        include: External config files referenced by the document.
        logging: Logging configuration for the builder itself.
        catalog: Catalog extensions.
    """

    litellm_settings: Optional[LiteLLMSettings] = None
    general_settings: Optional[GeneralSettings] = None
    router_settings: Optional[RouterSettings] = None
    environment_variables: Dict[str, str] = Field(default_factory=dict)
    include: List[str] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)

    model_config = {"extra": "allow"}


__all__ = [
    "BuilderConfig",
    "CacheParams",
    "CatalogConfig",
    "GeneralSettings",
    "LiteLLMSettings",
    "LoggingConfig",
    "RouterSettings",
    "RoutingStrategy",
]

"""Bundled OpenRouter model identifiers (``vendor/model`` slugs)."""

OPENROUTER_MODEL_IDS: tuple[str, ...] = (
    "anthropic/claude-3.5-haiku",
    "anthropic/claude-3.5-sonnet",
    "anthropic/claude-3.7-sonnet",
    "anthropic/claude-3.7-sonnet:thinking",
    "anthropic/claude-sonnet-4",
    "anthropic/claude-opus-4",
    "deepseek/deepseek-chat",
    "deepseek/deepseek-r1",
    "google/gemini-2.0-flash-001",
    "google/gemini-2.5-flash",
    "google/gemini-2.5-pro",
    "meta-llama/llama-3.3-70b-instruct",
    "mistralai/mistral-large",
    "mistralai/mistral-small-3.1-24b-instruct",
    "openai/gpt-4.1",
    "openai/gpt-4.1-mini",
    "openai/gpt-4o",
    "openai/gpt-4o-mini",
    "openai/o3-mini",
    "qwen/qwen-2.5-72b-instruct",
)

"""Exception hierarchy for the config builder.

Configuration errors are raised synchronously at the point of misuse and carry
a small diagnostic context so callers can see which precondition failed.
Identity resolution misses are not errors and never surface here.
"""

from typing import Any, Dict


class ConfigBuilderError(Exception):
    """Base class for all custom exceptions in the config builder."""

    def __init__(self, message: str = "An error occurred while building the config", **context: Any):
        self.message = message
        self.context: Dict[str, Any] = dict(context)
        super().__init__(message)

    def add_context(self, **kwargs: Any) -> None:
        """Attach diagnostic key/value pairs to the exception."""
        self.context.update(kwargs)


class ConfigurationError(ConfigBuilderError):
    """Raised when the caller supplies an invalid or incomplete model intent."""

    pass


class UnsupportedAxisError(ConfigurationError):
    """Raised when an expansion axis is requested on a provider that lacks it."""

    def __init__(self, *, provider: str, axis: str):
        super().__init__(
            f"Provider '{provider}' does not support the {axis} axis",
            provider=provider,
            axis=axis,
        )
        self.provider = provider
        self.axis = axis


class InvalidStrategyError(ConfigurationError):
    """Raised for an unknown load-balancing strategy name."""

    def __init__(self, strategy: Any):
        super().__init__(
            f"Unsupported load balancing strategy: {strategy!r}",
            strategy=strategy,
        )
        self.strategy = strategy


class IntentCommittedError(ConfigurationError):
    """Raised when a model intent builder is used after it was committed."""

    def __init__(self, display_name: str):
        super().__init__(
            f"Model intent '{display_name}' was already committed",
            display_name=display_name,
        )
        self.display_name = display_name


class PendingIntentError(ConfigurationError):
    """Raised when a config is built while intent builders are still open."""

    def __init__(self, display_names: "list[str]"):
        names = ", ".join(display_names)
        super().__init__(
            f"Model intents were never committed (call build() or a variation method): {names}",
            display_names=list(display_names),
        )
        self.display_names = list(display_names)


__all__ = [
    "ConfigBuilderError",
    "ConfigurationError",
    "UnsupportedAxisError",
    "InvalidStrategyError",
    "IntentCommittedError",
    "PendingIntentError",
]

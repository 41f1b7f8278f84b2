"""Foundation - error handling and configuration shared by every layer."""

from __future__ import annotations

__all__ = [
    # Errors
    "ErrorCode", "Violation", "PreconditionError", "NullArgumentError", "EmptySequenceError",
    "UnwrapError", "PredicateError", "require", "require_all", "empty_sequence",
    # Config
    "FallibleSettings", "LoggingSettings", "CollectionSettings", "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ErrorCode", "Violation", "PreconditionError", "NullArgumentError", "EmptySequenceError",
                "UnwrapError", "PredicateError", "require", "require_all", "empty_sequence"):
        from . import errors
        return getattr(errors, name)

    if name in ("FallibleSettings", "LoggingSettings", "CollectionSettings", "get_settings",
                "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

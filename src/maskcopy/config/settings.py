"""Configuration settings using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from maskcopy.config import MaskSettings

    # Load from environment variables (MASKCOPY_*)
    settings = MaskSettings()

    # Or override with explicit values
    settings = MaskSettings(private_prefix="_", trace_hooks=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class MaskSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the masking engine.

    Attributes:
        private_prefix: Field names starting with this prefix are not public;
            they are not copied and hold their default value in the copy.
        validate_hook_signatures: Inspect ``__masked__`` declarations before
            calling them.
        warn_ignored_hooks: Warn when a type declares a hook that does not
            apply to the shape it is copied as.
        trace_hooks: Log every hook invocation at DEBUG level.

    Environment Variables:
        MASKCOPY_PRIVATE_PREFIX
        MASKCOPY_VALIDATE_HOOK_SIGNATURES
        MASKCOPY_WARN_IGNORED_HOOKS
        MASKCOPY_TRACE_HOOKS
    """

    model_config = SettingsConfigDict(
        env_prefix="MASKCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    private_prefix: str = "_"
    validate_hook_signatures: bool = True
    warn_ignored_hooks: bool = True
    trace_hooks: bool = False

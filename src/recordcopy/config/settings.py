"""Configuration settings using Pydantic Settings.

Provides typed engine defaults with environment variable support.

Usage:
    from recordcopy.config import CopierSettings

    # Load from environment variables (RECORDCOPY_*)
    settings = CopierSettings()

    # Or override with explicit values
    settings = CopierSettings(default_policy="OVERRIDE_ALL_TARGET_VALUES")

    copier = PropertyCopier(Source, Target, settings=settings)
"""

from __future__ import annotations

try:
    from pydantic import field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install recordcopy[config]"
    ) from e

from recordcopy.core.policy import OverrideStatus


class CopierSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for PropertyCopier instances.

    Attributes:
        default_policy: Policy used when copy_into is called without one.
            Accepts an OverrideStatus member or its name.
        cache_shapes: Cache discovered record shapes in the global registry.

    Environment Variables:
        RECORDCOPY_DEFAULT_POLICY
        RECORDCOPY_CACHE_SHAPES
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_policy: OverrideStatus = OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW
    cache_shapes: bool = True

    @field_validator("default_policy", mode="before")
    @classmethod
    def _policy_from_name(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return OverrideStatus[value.strip().upper()]
            except KeyError:
                names = ", ".join(status.name for status in OverrideStatus)
                raise ValueError(f"Unknown override policy {value!r}; expected one of {names}") from None
        return value

"""Configuration module using Pydantic Settings.

Provides typed engine defaults with environment variable support.

Usage:
    from recordcopy.config import CopierSettings

    settings = CopierSettings(cache_shapes=False)
"""

from recordcopy.config.settings import CopierSettings

__all__ = [
    "CopierSettings",
]

"""Configuration module using Pydantic Settings.

Usage:
    from maskcopy.config import MaskSettings

    settings = MaskSettings(private_prefix="_")
"""

from maskcopy.config.settings import MaskSettings

__all__ = [
    "MaskSettings",
]

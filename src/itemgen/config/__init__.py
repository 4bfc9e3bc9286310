"""Configuration module using Pydantic Settings.

Usage:
    from itemgen.config import GeneratorSettings

    settings = GeneratorSettings(anchor_offset=99)
"""

from itemgen.config.settings import GeneratorSettings

__all__ = [
    "GeneratorSettings",
]

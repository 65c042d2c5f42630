"""
Shared utilities for HirePath.

Common functionality used across contexts:
- Text normalization
- Configuration management
- Logger setup
- PDF reading and verification
"""

from hirepath.utils.config import Settings, load_settings
from hirepath.utils.text_normalization import normalize_text

__all__ = ["Settings", "load_settings", "normalize_text"]

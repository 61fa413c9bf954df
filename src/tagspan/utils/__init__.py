"""Utility modules for tagspan.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from tagspan.utils.hashing import hash_str
from tagspan.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]

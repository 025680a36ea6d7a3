"""
Utilities
"""

from .logging_utils import get_logger, setup_logging
from .validation import require, require_choice

__all__ = [
    "get_logger",
    "setup_logging",
    "require",
    "require_choice",
]

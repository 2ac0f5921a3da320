"""Utility modules for Charla.

Provides:
- logger: get_logger for logging
- text: truncate, abbreviate for display text
- urls: split_url for URL normalization
"""

from charla.utils.logger import get_logger
from charla.utils.text import abbreviate, truncate
from charla.utils.urls import SplitUrl, split_url

__all__ = [
    "SplitUrl",
    "abbreviate",
    "get_logger",
    "split_url",
    "truncate",
]

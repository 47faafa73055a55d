"""
Data models for EDD Utils.

This module contains the configuration, option and search term structures
used throughout the package.
"""

from .options import OptionPair, OptionGroup
from .terms import ParsedTerm, TermKind
from .search_query import (
    SortOrder,
    SearchConfig,
    CustomerSearchConfig,
    DiscountSearchConfig,
    DownloadSearchConfig
)
from .config import CacheConfig, SearchDefaults, EddUtilsConfig

__all__ = [
    'OptionPair',
    'OptionGroup',
    'ParsedTerm',
    'TermKind',
    'SortOrder',
    'SearchConfig',
    'CustomerSearchConfig',
    'DiscountSearchConfig',
    'DownloadSearchConfig',
    'CacheConfig',
    'SearchDefaults',
    'EddUtilsConfig'
]

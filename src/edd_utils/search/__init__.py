"""
Entity search helpers for EDD Utils.

This package turns search-box input into host queries and formats the
results as dropdown option pairs.
"""

from .terms import TermParser, is_email, parse_search_terms
from .formatter import ResultFormatter, format_results
from .base import SearchQuery
from .customers import CustomerSearch
from .discounts import DiscountSearch
from .downloads import DownloadSearch
from .functions import search_customers, search_discounts, search_downloads

__all__ = [
    'TermParser',
    'is_email',
    'parse_search_terms',
    'ResultFormatter',
    'format_results',
    'SearchQuery',
    'CustomerSearch',
    'DiscountSearch',
    'DownloadSearch',
    'search_customers',
    'search_discounts',
    'search_downloads'
]

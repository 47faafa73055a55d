"""
Discount search for EDD Utils.

Discount codes are short and often all-caps or numeric, so the search term
is not classified: it goes straight to the host as a free-text filter.
"""

from typing import Any, Dict, List

from ..models.search_query import DiscountSearchConfig
from .base import SearchQuery
from .formatter import ResultFormatter


class DiscountSearch(SearchQuery):
    """Search discounts by name or code, labelled ``"Name (CODE)"``."""

    entity = 'discount'
    config_class = DiscountSearchConfig

    formatter = ResultFormatter(label_field='name', detail_field='code')

    def build_args(self, search: str, args: Dict[str, Any]) -> Dict[str, Any]:
        return self.merge_args(args, {
            'status__in': self.config.status,
            'number': self.config.number,
            'search': search,
            'orderby': self.config.orderby,
            'order': self.config.order,
        })

    def format_results(self, records: List[Any]) -> List[Dict[str, str]]:
        return self.formatter.format(records)

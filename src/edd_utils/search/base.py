"""
Base class for entity searches.

A search holds default query configuration and runs one free-text lookup
against a single entity type through the host backend.
"""

import logging
from typing import Any, Dict, List, Optional

from ..host import HostBackend
from ..models.search_query import SearchConfig
from ..sanitize import sanitize_search


logger = logging.getLogger(__name__)


class SearchQuery:
    """
    Free-text search over one host entity type.

    Subclasses set ``entity`` and ``config_class`` and implement
    :meth:`build_args` and :meth:`format_results`; they may override
    :meth:`fetch` when the lookup needs more than one host call.

    Host failures are not caught here: whatever the host raises or returns
    is what the caller gets.
    """

    entity: str = ''
    config_class = SearchConfig

    def __init__(self, host: HostBackend, config: Optional[SearchConfig] = None, **overrides: Any):
        """
        Initialize the search.

        Args:
            host: Host backend used for the lookup
            config: Default query configuration (a fresh default when None)
            **overrides: Individual configuration values to override; these
                are passed to the host without validation
        """
        self.host = host
        base = config if config is not None else self.config_class()
        if overrides:
            base = self.config_class.with_overrides(base, overrides)
        else:
            base = base.model_copy(deep=True)
        self.config = base
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # -- Setters --

    def set_status(self, status: List[str]) -> None:
        """Set the list of statuses to include in the search."""
        self.config.status = list(status)

    def set_number(self, number: int) -> None:
        """Set the number of records to retrieve."""
        self.config.number = number

    def set_orderby(self, orderby: str) -> None:
        """Set the field to order the results by."""
        self.config.orderby = orderby

    def set_order(self, order: str) -> None:
        """Set the order direction of the results."""
        self.config.order = order

    # -- Query --

    def get_results(self, search: str, args: Optional[Dict[str, Any]] = None, return_raw: bool = False) -> List[Any]:
        """
        Retrieve search results for a search term.

        Args:
            search: The search term
            args: Extra query arguments; keys here override the defaults
            return_raw: Return host records instead of option pairs

        Returns:
            Option mappings (``{value, label}``) or raw host records
        """
        search = sanitize_search(search)
        query_args = self.build_args(search, dict(args or {}))

        self.logger.debug(f"Searching {self.entity} for '{search}' with {sorted(query_args)}")
        records = self.fetch(search, query_args)

        if return_raw:
            return records
        return self.format_results(records)

    def default_args(self) -> Dict[str, Any]:
        """Query arguments taken from the configuration."""
        return {
            'status': self.config.status,
            'number': self.config.number,
            'orderby': self.config.orderby,
            'order': self.config.order,
        }

    def build_args(self, search: str, args: Dict[str, Any]) -> Dict[str, Any]:
        """Merge caller arguments over the defaults and add the search filter."""
        raise NotImplementedError

    def fetch(self, search: str, args: Dict[str, Any]) -> List[Any]:
        """Run the host query."""
        return list(self.host.query(self.entity, args) or [])

    def format_results(self, records: List[Any]) -> List[Dict[str, str]]:
        """Format host records into option mappings."""
        raise NotImplementedError

    @staticmethod
    def merge_args(args: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``args`` over ``defaults`` (caller-supplied keys win)."""
        merged = dict(defaults)
        merged.update(args)
        return merged

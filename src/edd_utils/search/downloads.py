"""
Download (product) search for EDD Utils.

Downloads are searched by title only. Free text is split into tokens that
must all appear in the title; the query carries them as an
``edd_search_where`` SQL fragment. An all-digit term looks up the download ID.
Formatted results can expand variable-priced products into one option per
price, and can skip bundles.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..host import HostBackend
from ..models.search_query import DownloadSearchConfig
from ..models.terms import TermKind
from ..sanitize import esc_attr, esc_html, esc_like, record_value
from .base import SearchQuery
from .terms import TermParser


PUBLIC_STATUSES = ['publish']
EDITOR_STATUSES = ['publish', 'draft', 'private', 'future']

ALL_PRICE_OPTIONS = 'All Price Options'


class DownloadSearch(SearchQuery):
    """Search downloads by title."""

    entity = 'download'
    config_class = DownloadSearchConfig

    parser = TermParser(prefixes={}, detect_email=False)

    def __init__(self, host: HostBackend, config: Optional[DownloadSearchConfig] = None, **overrides: Any):
        super().__init__(host, config, **overrides)
        if not self.config.status:
            self.config.status = self.default_statuses()

    def default_statuses(self) -> List[str]:
        """Statuses visible to the current user, passed through the host filters."""
        if self.host.current_user_can('edit_products'):
            return list(self.host.apply_filters('edd_product_dropdown_status', list(EDITOR_STATUSES)))
        return list(self.host.apply_filters('edd_product_dropdown_status_nopriv', list(PUBLIC_STATUSES)))

    # -- Setters --

    def set_no_bundles(self, no_bundles: bool) -> None:
        """Set whether to exclude bundles from the search results."""
        self.config.no_bundles = no_bundles

    def set_variations(self, variations: bool) -> None:
        """Set whether to include variable price options in the search results."""
        self.config.variations = variations

    def set_variations_only(self, variations_only: bool) -> None:
        """Set whether to include only variable price options in the search results."""
        self.config.variations_only = variations_only

    def set_excludes(self, excludes: List[int]) -> None:
        """Set the list of download IDs to exclude from the search results."""
        self.config.excludes = list(excludes)

    # -- Query --

    def build_args(self, search: str, args: Dict[str, Any]) -> Dict[str, Any]:
        query_args = self.merge_args(args, {
            'orderby': self.config.orderby,
            'order': self.config.order,
            'post_type': 'download',
            'posts_per_page': self.config.number,
            'post_status': ','.join(self.config.status),
            'post__not_in': self.config.excludes,
            'edd_search': search,
            'suppress_filters': False,
        })

        if search:
            term = self.parser.parse(search)
            if term.kind == TermKind.EXACT:
                query_args['p'] = term.get_id()
            else:
                query_args['edd_search_terms'] = term.tokens
                if term.tokens:
                    query_args['edd_search_where'] = self.build_where_clause(
                        term.tokens, f"{self.host.table_prefix}posts.post_title"
                    )

        return query_args

    @staticmethod
    def build_where_clause(terms: List[str], column: str = 'post_title') -> Tuple[str, List[str]]:
        """
        Build the title-matching SQL fragment for parsed terms.

        Every term must match (``AND``); terms are LIKE-escaped and passed as
        parameters.

        Args:
            terms: Parsed free-text tokens
            column: Fully qualified title column

        Returns:
            Tuple of (sql fragment, parameters); an empty fragment when there
            are no terms
        """
        if not terms:
            return '', []

        clauses = [f"{column} LIKE %s" for _ in terms]
        params = [f"%{esc_like(term)}%" for term in terms]
        return f"({' AND '.join(clauses)})", params

    def format_results(self, records: List[Any]) -> List[Dict[str, str]]:
        """
        Format download records, expanding variable prices as configured.

        Records need ``ID`` and ``post_title`` fields.
        """
        if not records:
            return []

        config = self.config
        options = []

        for record in records:
            post_id = record_value(record, 'ID')
            if post_id is None:
                post_id = record_value(record, 'id')
            title = record_value(record, 'post_title', '') or ''

            if config.no_bundles and self.host.get_download_type(post_id) == 'bundle':
                continue

            product_title = title
            prices = self.host.get_variable_prices(post_id) or {}

            if prices and (not config.variations or not config.variations_only):
                title = f"{title} ({ALL_PRICE_OPTIONS})"

            if not prices or not config.variations_only:
                options.append({
                    'value': esc_attr(post_id),
                    'label': esc_html(title),
                })

            if config.variations and prices:
                for price_id, price in prices.items():
                    name = (price or {}).get('name') or ''
                    if name:
                        options.append({
                            'value': esc_attr(f"{post_id}_{price_id}"),
                            'label': esc_html(f"{product_title}: {name}"),
                        })

        return options

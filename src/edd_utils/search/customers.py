"""
Customer search for EDD Utils.

Customers can be found by email address (including secondary addresses),
customer ID, ``c:``/``id:`` prefixed customer ID, ``u:``/``user:`` prefixed
WordPress user ID, or free text across name and email.
"""

from typing import Any, Dict, List

from ..models.search_query import CustomerSearchConfig
from ..models.terms import TermKind
from .base import SearchQuery
from .formatter import ResultFormatter
from .terms import TermParser


# Host query argument used for each prefix kind.
PREFIX_FIELDS = {
    'c': 'id',
    'id': 'id',
    'u': 'user_id',
    'user': 'user_id',
}

# Carries a parsed email from build_args to fetch; never sent to the host.
EMAIL_LOOKUP_KEY = '_email_lookup'


class CustomerSearch(SearchQuery):
    """Search customers, labelled ``"Name (email)"``."""

    entity = 'customer'
    email_entity = 'customer_email_address'
    config_class = CustomerSearchConfig

    parser = TermParser()
    formatter = ResultFormatter(label_field='name', detail_field='email')

    def build_args(self, search: str, args: Dict[str, Any]) -> Dict[str, Any]:
        query_args = self.merge_args(args, self.default_args())
        term = self.parser.parse(search)

        if term.kind == TermKind.EMAIL:
            query_args[EMAIL_LOOKUP_KEY] = term.value
        elif term.kind == TermKind.EXACT:
            query_args['id'] = term.value
        elif term.kind == TermKind.PREFIX:
            query_args[PREFIX_FIELDS.get(term.prefix, 'id')] = term.value
        else:
            query_args['search'] = search
            query_args['search_columns'] = ['name', 'email']

        return query_args

    def fetch(self, search: str, args: Dict[str, Any]) -> List[Any]:
        email = args.pop(EMAIL_LOOKUP_KEY, None)
        if email is None:
            return super().fetch(search, args)

        # Secondary addresses live in their own table, so resolve IDs first.
        customer_ids = self.host.query(self.email_entity, {
            'fields': 'customer_id',
            'email': email,
        }) or []

        if not customer_ids:
            self.logger.debug(f"No customers registered with email '{email}'")
            return []

        args['id__in'] = list(customer_ids)
        return super().fetch(search, args)

    def format_results(self, records: List[Any]) -> List[Dict[str, str]]:
        return self.formatter.format(records)

"""
Field accessors for the primary EDD entities: customers, orders, discounts
and downloads.

Each adds the named field helpers the store uses most on top of the shared
attribute-then-metadata lookup.
"""

from typing import Any, Dict, List, Optional, Union

from ..search.terms import is_email
from .fields import FieldAccessor, get_attribute


class Customer(FieldAccessor):
    entity = 'customer'
    table = 'edd_customers'

    email_entity = 'customer_email_address'

    def get_user_id(self, customer_id: int) -> Optional[int]:
        user_id = self.get_field(customer_id, 'user_id')
        return int(user_id) if user_id is not None else None

    def get_email(self, customer_id: int) -> Optional[str]:
        return self.get_field(customer_id, 'email')

    def get_emails(self, customer_id: int) -> List[str]:
        """Every email address registered to the customer, primary included."""
        if self.get(customer_id) is None:
            return []
        return list(self.host.query(self.email_entity, {
            'customer_id': customer_id,
            'fields': 'email',
        }) or [])

    def get_name(self, customer_id: int, split: bool = False) -> Union[str, Dict[str, str], None]:
        """
        Customer name, or ``{first_name, last_name}`` when ``split`` is set.

        The first word is the first name; the rest is the last name.
        """
        name = self.get_field(customer_id, 'name')
        if split and name:
            first, _, last = str(name).strip().partition(' ')
            return {'first_name': first, 'last_name': last.strip()}
        return name

    def get_date_created(self, customer_id: int) -> Optional[str]:
        return self.get_field(customer_id, 'date_created')

    def get_by_email(self, email: str) -> Optional[Any]:
        """Customer whose primary email matches, or None."""
        email = (email or '').strip()
        if not email or not is_email(email):
            return None
        return self._first({'email': email})

    def get_by_user_id(self, user_id: int) -> Optional[Any]:
        """Customer linked to a site user, or None."""
        if not user_id or user_id < 0:
            return None
        return self._first({'user_id': user_id})

    def _first(self, args: Dict[str, Any]) -> Optional[Any]:
        records = self.host.query(self.entity, {**args, 'number': 1}) or []
        return records[0] if records else None


class Order(FieldAccessor):
    entity = 'order'
    table = 'edd_orders'

    def get_payment_key(self, order_id: int) -> Optional[str]:
        return self.get_field(order_id, 'payment_key') or None

    def get_email(self, order_id: int) -> Optional[str]:
        return self.get_field(order_id, 'email') or None

    def get_amount_field(self, order_id: int, field: str, formatted: bool = False) -> Union[float, str, None]:
        """
        Read an amount column (``total``, ``tax``, ``discount`` ...).

        Args:
            order_id: Order ID
            field: Amount attribute of the order
            formatted: Return the amount formatted in the order's currency

        Returns:
            The amount as a float or formatted string, None when the order or
            field is missing
        """
        order = self.get(order_id)
        if order is None:
            return None

        amount = get_attribute(order, field)
        if amount is None:
            return None

        if formatted:
            currency = get_attribute(order, 'currency') or ''
            return self.host.currency_filter(self.host.format_amount(amount), currency)

        try:
            return float(amount)
        except (TypeError, ValueError):
            return None


class Discount(FieldAccessor):
    entity = 'discount'
    table = 'edd_adjustments'

    def get_code(self, discount_id: int) -> Optional[str]:
        return self.get_field(discount_id, 'code')

    def get_status(self, discount_id: int) -> Optional[str]:
        return self.get_field(discount_id, 'status')

    def is_active(self, discount_id: int) -> bool:
        return self.get_status(discount_id) == 'active'


class Download(FieldAccessor):
    """Downloads are posts, so existence is checked against the posts table."""

    entity = 'download'
    table = 'posts'
    id_column = 'ID'

    def get_type(self, download_id: int) -> Optional[str]:
        """Product type (``default``, ``bundle`` ...), None for an empty ID."""
        if not download_id:
            return None
        return self.host.get_download_type(download_id) or None

    def is_bundle(self, download_id: int) -> bool:
        return self.get_type(download_id) == 'bundle'

    def get_variable_prices(self, download_id: int) -> Dict[Any, Dict[str, Any]]:
        if not download_id:
            return {}
        return dict(self.host.get_variable_prices(download_id) or {})

    def has_variable_prices(self, download_id: int) -> bool:
        return bool(self.get_variable_prices(download_id))

    def get_price_name(self, download_id: int, price_id: Any) -> Optional[str]:
        """Name of one price option; price IDs match as int or string."""
        prices = self.get_variable_prices(download_id)
        for key, price in prices.items():
            if str(key) == str(price_id):
                return (price or {}).get('name') or None
        return None

"""
Order-related entity accessors: items, addresses, adjustments, transactions.
"""

from typing import Any, Dict, Optional

from .fields import FieldAccessor, TypedFieldAccessor


class OrderItem(FieldAccessor):
    entity = 'order_item'
    table = 'edd_order_items'

    def get_by_cart_index(self, order_id: int, cart_index: int) -> Optional[Any]:
        """Get the order item at a cart position, or None."""
        items = self.host.query(self.entity, {
            'order_id': order_id,
            'cart_index': cart_index,
            'number': 1,
        })
        return items[0] if items else None

    def get_by_product(self, order_id: int, product_id: int, price_id: Optional[int] = None) -> Optional[Any]:
        """
        Get the first order item for a product (and price option) in an order.

        Args:
            order_id: Order to look in
            product_id: Download ID
            price_id: Variable price ID; any price when None

        Returns:
            The order item, or None
        """
        args = {
            'order_id': order_id,
            'product_id': product_id,
            'number': 1,
        }
        if price_id is not None:
            args['price_id'] = price_id

        items = self.host.query(self.entity, args)
        return items[0] if items else None


class OrderAddress(FieldAccessor):
    entity = 'order_address'
    table = 'edd_order_addresses'


class OrderTransaction(FieldAccessor):
    entity = 'order_transaction'
    table = 'edd_order_transactions'


class OrderAdjustment(TypedFieldAccessor):
    """Order adjustments: discounts, fees and credits applied to orders."""

    entity = 'order_adjustment'
    table = 'edd_order_adjustments'

    def get_by_type(self, type_id: int, type_name: str = 'discount') -> Optional[Any]:
        """Get the most recent order-level adjustment for a type ID (e.g. a discount)."""
        adjustments = self.host.query(self.entity, {
            'number': 1,
            'type_id': type_id,
            'type': type_name,
            'object_type': 'order',
            'order': 'DESC',
        })
        return adjustments[0] if adjustments else None

    def get_field_by_object(
        self,
        object_id: int,
        type_id: int,
        field: str = 'total',
        object_type: str = 'order',
        type_name: str = 'discount',
        args: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Get one field of the adjustment linking an object to a type ID.

        Args:
            object_id: Related object ID (e.g. order ID)
            type_id: Type ID (e.g. discount ID)
            field: Field to retrieve
            object_type: Related object type
            type_name: Adjustment type
            args: Extra query arguments; these override the defaults

        Returns:
            The field value, or None
        """
        query_args = {
            'number': 1,
            'object_id': object_id,
            'object_type': object_type,
            'type_id': type_id,
            'type': type_name,
            'fields': field,
            'order': 'DESC',
        }
        query_args.update(args or {})

        values = self.host.query(self.entity, query_args)
        return values[0] if values else None

"""
Unit tests for entity field accessors and order lookups.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

from edd_utils.entities import (
    Adjustment,
    CustomerEmailAddress,
    FieldAccessor,
    Log,
    OrderAdjustment,
    OrderItem
)


class TestFieldAccessor:
    """Test cases for the attribute-then-metadata lookup."""

    def setup_method(self):
        """Set up a log accessor over a mock host."""
        self.host = MagicMock()
        self.host.get.return_value = SimpleNamespace(id=1, title='Refund', count=0, content=None)
        self.host.get_meta.return_value = ''
        self.logs = Log(self.host)

    def test_attribute_wins(self):
        """Test that a set attribute is returned without a metadata lookup."""
        assert self.logs.get_field(1, 'title') == 'Refund'
        self.host.get.assert_called_once_with('log', 1)
        self.host.get_meta.assert_not_called()

    def test_falsy_attribute_returned(self):
        """Test that a zero attribute is authoritative."""
        assert self.logs.get_field(1, 'count') == 0
        self.host.get_meta.assert_not_called()

    def test_metadata_fallback(self):
        """Test metadata is read when the attribute is unset."""
        self.host.get_meta.return_value = 'gateway-note'
        assert self.logs.get_field(1, 'content') == 'gateway-note'
        self.host.get_meta.assert_called_once_with('log', 1, 'content', True)

    def test_empty_metadata_is_missing(self):
        """Test that empty metadata counts as not found."""
        assert self.logs.get_field(1, 'missing') is None

    def test_unknown_entity(self):
        """Test unknown IDs return None."""
        self.host.get.return_value = None
        assert self.logs.get_field(99, 'title') is None
        self.host.get_meta.assert_not_called()

    def test_empty_id(self):
        """Test empty IDs never reach the host."""
        assert self.logs.get(0) is None
        assert self.logs.exists(0) is False
        self.host.get.assert_not_called()
        self.host.row_exists.assert_not_called()

    def test_exists(self):
        """Test existence checks use the entity's table."""
        self.host.row_exists.return_value = 1
        assert self.logs.exists(5) is True
        self.host.row_exists.assert_called_once_with('edd_logs', 'id', 5)

    def test_mapping_records(self):
        """Test records returned as mappings."""
        self.host.get.return_value = {'id': 2, 'email': 'a@b.com'}
        emails = CustomerEmailAddress(self.host)
        assert emails.get_field(2, 'email') == 'a@b.com'

    def test_custom_entity(self):
        """Test an accessor built for an arbitrary entity."""
        accessor = FieldAccessor(self.host, entity='subscription', table='edd_subscriptions')
        self.host.row_exists.return_value = False
        assert accessor.exists(3) is False
        self.host.row_exists.assert_called_once_with('edd_subscriptions', 'id', 3)


class TestTypedFieldAccessor:
    """Test cases for type checks on adjustments."""

    def test_is_type_case_insensitive(self):
        """Test that type comparison ignores case."""
        host = MagicMock()
        host.get.return_value = {'id': 1, 'type': 'Discount'}
        adjustments = Adjustment(host)

        assert adjustments.is_type(1, 'discount')
        assert not adjustments.is_type(1, 'fee')

    def test_missing_type(self):
        """Test entities without a type never match."""
        host = MagicMock()
        host.get.return_value = {'id': 1}
        host.get_meta.return_value = ''
        assert not Adjustment(host).is_type(1, '')


class TestOrderLookups:
    """Test cases for order item and adjustment queries."""

    def setup_method(self):
        """Set up a mock host."""
        self.host = MagicMock()

    def test_get_by_cart_index(self):
        """Test finding an item by cart position."""
        item = {'id': 7}
        self.host.query.return_value = [item]

        assert OrderItem(self.host).get_by_cart_index(3, 0) == item
        self.host.query.assert_called_once_with('order_item', {'order_id': 3, 'cart_index': 0, 'number': 1})

    def test_get_by_product_without_price(self):
        """Test that no price ID leaves the price unfiltered."""
        self.host.query.return_value = []

        assert OrderItem(self.host).get_by_product(3, 10) is None
        self.host.query.assert_called_once_with('order_item', {'order_id': 3, 'product_id': 10, 'number': 1})

    def test_get_by_product_with_price(self):
        """Test that a price ID of zero is still a filter."""
        self.host.query.return_value = [{'id': 8}]
        OrderItem(self.host).get_by_product(3, 10, 0)
        assert self.host.query.call_args[0][1]['price_id'] == 0

    def test_adjustment_by_type(self):
        """Test the latest discount adjustment lookup."""
        self.host.query.return_value = [{'id': 4}]

        assert OrderAdjustment(self.host).get_by_type(12) == {'id': 4}
        self.host.query.assert_called_once_with('order_adjustment', {
            'number': 1,
            'type_id': 12,
            'type': 'discount',
            'object_type': 'order',
            'order': 'DESC',
        })

    def test_adjustment_field_by_object(self):
        """Test reading one field with caller overrides."""
        self.host.query.return_value = [9.5]

        value = OrderAdjustment(self.host).get_field_by_object(100, 12, args={'order': 'ASC'})

        assert value == 9.5
        args = self.host.query.call_args[0][1]
        assert args['fields'] == 'total'
        assert args['object_id'] == 100
        assert args['order'] == 'ASC'

    def test_adjustment_field_missing(self):
        """Test no adjustment gives None."""
        self.host.query.return_value = []
        assert OrderAdjustment(self.host).get_field_by_object(100, 12, 'subtotal') is None

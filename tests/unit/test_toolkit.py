"""
Unit tests for the Toolkit composition root.
"""

from unittest.mock import MagicMock

from edd_utils import Toolkit
from edd_utils.models.config import EddUtilsConfig
from edd_utils.search import CustomerSearch, DownloadSearch


def make_host(prefix='wp_'):
    host = MagicMock()
    host.table_prefix = prefix
    host.current_user_can.return_value = False
    host.apply_filters.side_effect = lambda hook, value: value
    return host


class TestToolkit:
    """Test cases for Toolkit."""

    def test_services_share_host(self):
        """Test every service is bound to the same host."""
        host = make_host()
        toolkit = Toolkit(host)

        assert toolkit.customers.host is host
        assert toolkit.orders.host is host
        assert toolkit.discounts.host is host
        assert toolkit.downloads.host is host
        assert toolkit.order_items.host is host
        assert toolkit.countries.host is host
        assert toolkit.stats.host is host
        assert toolkit.stats.orders_table == 'wp_edd_orders'

    def test_table_prefix_fallback(self):
        """Test the configured prefix is used when the host has none."""
        host = make_host(prefix='')
        toolkit = Toolkit(host, EddUtilsConfig(table_prefix='shop_'))

        assert host.table_prefix == 'shop_'
        assert toolkit.stats.orders_table == 'shop_edd_orders'

    def test_host_prefix_kept(self):
        """Test a host prefix wins over the configuration."""
        host = make_host(prefix='site2_')
        Toolkit(host, EddUtilsConfig(table_prefix='shop_'))
        assert host.table_prefix == 'site2_'

    def test_cache_config_passed_to_stats(self):
        """Test stats use the configured cache settings."""
        config = EddUtilsConfig.from_dict({'cache': {'ttl_seconds': 120}})
        assert Toolkit(make_host(), config).stats.cache.ttl_seconds == 120

    def test_searches_are_independent(self):
        """Test each search call gets its own configuration copy."""
        config = EddUtilsConfig.from_dict({'search': {'customers': {'number': 5}}})
        toolkit = Toolkit(make_host(), config)

        first = toolkit.customer_search()
        second = toolkit.customer_search()
        first.set_number(50)

        assert isinstance(first, CustomerSearch)
        assert second.config.number == 5
        assert config.search.customers.number == 5

    def test_download_search_statuses(self):
        """Test download searches resolve statuses for the current user."""
        search = Toolkit(make_host()).download_search()

        assert isinstance(search, DownloadSearch)
        assert search.config.status == ['publish']

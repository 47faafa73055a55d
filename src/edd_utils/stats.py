"""
Aggregate order statistics for EDD Utils.

Distinct-value lists and aggregates run one SQL read against the orders table
and cache the answer in the host's cache for a fixed time. Concurrent callers
may both recompute and overwrite the same key; the computation is idempotent.
Most-popular lists are read uncached.
"""

import hashlib
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from .host import HostBackend
from .models.config import CacheConfig
from .sanitize import absint, record_value


logger = logging.getLogger(__name__)

AGGREGATE_FUNCTIONS = {'AVG', 'SUM', 'MAX', 'MIN', 'COUNT'}

_COLUMN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


class OrderStats:
    """
    Distinct-value lists and raw aggregates over the orders table.

    Attributes:
        host: Host backend used for queries and caching
        cache: Cache settings
    """

    def __init__(self, host: HostBackend, cache: Optional[CacheConfig] = None):
        self.host = host
        self.cache = cache or CacheConfig()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def orders_table(self) -> str:
        return f"{self.host.table_prefix}edd_orders"

    @staticmethod
    def _digest(parts: List[Any]) -> str:
        """Short stable cache-key suffix for a list of query inputs."""
        return hashlib.md5('_'.join(str(part) for part in parts).encode('utf-8')).hexdigest()

    def _order_filter(self, args: Optional[Dict[str, Any]]) -> Tuple[str, List[str]]:
        """Resolve ``type`` (default ``sale``) and ``status`` (default: complete statuses)."""
        query_args = {'type': 'sale'}
        query_args.update(args or {})
        statuses = list(query_args.get('status') or self.host.get_complete_order_statuses() or [])
        return query_args['type'], statuses

    def _cached_col(self, transient_key: str, sql: str, params: List[Any], use_cache: bool) -> List[Any]:
        """Run a single-column query through the transient cache."""
        use_cache = use_cache and self.cache.enabled

        if use_cache:
            cached = self.host.get_transient(transient_key)
            if cached is not None:
                self.logger.debug(f"Transient hit for {transient_key}")
                return cached

        results = self.host.get_col(sql, params) or []

        if results and use_cache:
            self.host.set_transient(transient_key, results, self.cache.ttl_seconds)

        return list(results)

    # -- Distinct values --

    def get_distinct_currencies(self, use_cache: bool = True) -> List[str]:
        """All currencies used by orders, alphabetically."""
        sql = (f"SELECT DISTINCT currency FROM {self.orders_table} "
               f"WHERE currency != %s ORDER BY currency ASC")
        return self._cached_col('edd_distinct_currencies', sql, [''], use_cache)

    def get_distinct_gateways(self, use_cache: bool = True) -> List[str]:
        """All payment gateways used by orders, alphabetically."""
        sql = (f"SELECT DISTINCT gateway FROM {self.orders_table} "
               f"WHERE gateway != %s ORDER BY gateway ASC")
        return self._cached_col('edd_distinct_payment_gateways', sql, [''], use_cache)

    def get_distinct_email_domains(self, args: Optional[Dict[str, Any]] = None, use_cache: bool = True) -> List[str]:
        """
        All customer email domains on orders.

        Args:
            args: ``type`` (default ``sale``) and ``status`` (default: the
                store's complete order statuses)
            use_cache: Whether to use the transient cache
        """
        order_type, statuses = self._order_filter(args)
        if not statuses:
            return []

        placeholders = ', '.join(['%s'] * len(statuses))
        sql = (f"SELECT DISTINCT SUBSTRING_INDEX(email, '@', -1) AS domain "
               f"FROM {self.orders_table} "
               f"WHERE type = %s AND status IN ({placeholders}) "
               f"AND email != '' AND email LIKE %s ORDER BY domain ASC")
        params = [order_type, *statuses, '%@%']
        key = f"edd_distinct_email_domains_{self._digest([order_type, *statuses])}"
        return self._cached_col(key, sql, params, use_cache)

    # -- Most popular values --

    def _popular(self, sql: str, params: List[Any]) -> List[Any]:
        rows = self.host.get_results(sql, params) or []
        self.logger.debug(f"Popular-value query returned {len(rows)} rows")
        return list(rows)

    def get_most_popular_countries(self, args: Optional[Dict[str, Any]] = None, number: int = 10) -> List[Dict[str, Any]]:
        """
        Billing countries with the most orders.

        Args:
            args: ``type`` and ``status`` filters (see :meth:`get_distinct_email_domains`)
            number: Maximum number of countries

        Returns:
            Rows ``{country, country_name, count}``, most orders first
        """
        order_type, statuses = self._order_filter(args)
        if not statuses:
            return []

        placeholders = ', '.join(['%s'] * len(statuses))
        sql = (f"SELECT oa.country, COUNT(DISTINCT o.id) AS count "
               f"FROM {self.host.table_prefix}edd_order_addresses oa "
               f"INNER JOIN {self.orders_table} o ON o.id = oa.order_id "
               f"WHERE o.type = %s AND o.status IN ({placeholders}) AND oa.country != '' "
               f"GROUP BY oa.country ORDER BY count DESC LIMIT %s")
        rows = self._popular(sql, [order_type, *statuses, number])

        countries = self.host.get_country_list() or {}
        results = []
        for row in rows:
            code = record_value(row, 'country', '')
            results.append({
                'country': code,
                'country_name': countries.get(code, code),
                'count': absint(record_value(row, 'count', 0)),
            })
        return results

    def get_most_popular_gateways(self, args: Optional[Dict[str, Any]] = None, number: int = 10) -> List[Dict[str, Any]]:
        """Payment gateways with the most orders, as ``{gateway, gateway_label, count}``."""
        order_type, statuses = self._order_filter(args)
        if not statuses:
            return []

        placeholders = ', '.join(['%s'] * len(statuses))
        sql = (f"SELECT gateway, COUNT(id) AS count FROM {self.orders_table} "
               f"WHERE type = %s AND status IN ({placeholders}) AND gateway != '' "
               f"GROUP BY gateway ORDER BY count DESC LIMIT %s")
        rows = self._popular(sql, [order_type, *statuses, number])

        gateways = self.host.get_payment_gateways() or {}
        results = []
        for row in rows:
            gateway = record_value(row, 'gateway', '')
            results.append({
                'gateway': gateway,
                'gateway_label': (gateways.get(gateway) or {}).get('admin_label', gateway),
                'count': absint(record_value(row, 'count', 0)),
            })
        return results

    def get_most_popular_email_domains(self, args: Optional[Dict[str, Any]] = None, number: int = 10) -> List[Dict[str, Any]]:
        """Customer email domains with the most orders, as ``{domain, count}``."""
        order_type, statuses = self._order_filter(args)
        if not statuses:
            return []

        placeholders = ', '.join(['%s'] * len(statuses))
        sql = (f"SELECT SUBSTRING_INDEX(email, '@', -1) AS domain, COUNT(*) AS count "
               f"FROM {self.orders_table} "
               f"WHERE type = %s AND status IN ({placeholders}) AND email LIKE %s "
               f"GROUP BY domain ORDER BY count DESC LIMIT %s")
        rows = self._popular(sql, [order_type, *statuses, '%@%', number])

        return [
            {'domain': record_value(row, 'domain', ''), 'count': absint(record_value(row, 'count', 0))}
            for row in rows
        ]

    # -- Raw aggregates --

    def get_order_stat(self, function: str, column: str, statuses: Optional[List[str]] = None,
                       order_type: str = 'sale', cache_time: Optional[int] = None) -> float:
        """
        Run an aggregate over order amounts.

        Args:
            function: One of AVG, SUM, MAX, MIN, COUNT
            column: Orders table column to aggregate
            statuses: Order statuses (default: complete statuses)
            order_type: Order type
            cache_time: Object-cache expiry (default from configuration)

        Returns:
            The aggregate, or 0.0 for no rows or an invalid function/column
        """
        function = function.upper()
        if function not in AGGREGATE_FUNCTIONS or not _COLUMN.match(column):
            self.logger.warning(f"Rejected order stat {function}({column})")
            return 0.0

        statuses = list(statuses or self.host.get_complete_order_statuses() or [])
        if not statuses:
            return 0.0

        cache_key = f"edd_{function.lower()}_{column}_{order_type}_{self._digest(statuses)}"

        result = self.host.cache_get(cache_key, self.cache.stats_group) if self.cache.enabled else None

        if result is None:
            placeholders = ','.join(['%s'] * len(statuses))
            sql = (f"SELECT {function}({column}) AS result FROM {self.orders_table} "
                   f"WHERE type = %s AND status IN ({placeholders})")
            result = self.host.get_var(sql, [order_type, *statuses])
            if self.cache.enabled:
                self.host.cache_set(cache_key, result, self.cache.stats_group,
                                    cache_time or self.cache.ttl_seconds)

        try:
            return float(result or 0.0)
        except (TypeError, ValueError):
            return 0.0

    def get_average_order_earnings(self, statuses: Optional[List[str]] = None, column: str = 'total',
                                   order_type: str = 'sale') -> float:
        return self.get_order_stat('AVG', column, statuses, order_type)

    def get_total_order_earnings(self, statuses: Optional[List[str]] = None, column: str = 'total',
                                 order_type: str = 'sale') -> float:
        return self.get_order_stat('SUM', column, statuses, order_type)

    def get_highest_order_amount(self, statuses: Optional[List[str]] = None, column: str = 'total',
                                 order_type: str = 'sale') -> float:
        return self.get_order_stat('MAX', column, statuses, order_type)

    def get_lowest_order_amount(self, statuses: Optional[List[str]] = None, column: str = 'total',
                                order_type: str = 'sale') -> float:
        return self.get_order_stat('MIN', column, statuses, order_type)

    def get_order_count(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> int:
        return int(self.get_order_stat('COUNT', 'id', statuses, order_type))

    def get_total_tax(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> float:
        return self.get_order_stat('SUM', 'tax', statuses, order_type)

    def get_average_tax_amount(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> float:
        return self.get_order_stat('AVG', 'tax', statuses, order_type)

    def get_total_discount_amount(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> float:
        return self.get_order_stat('SUM', 'discount', statuses, order_type)

    def get_average_discount_amount(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> float:
        return self.get_order_stat('AVG', 'discount', statuses, order_type)

    def get_average_subtotal_amount(self, statuses: Optional[List[str]] = None, order_type: str = 'sale') -> float:
        return self.get_order_stat('AVG', 'subtotal', statuses, order_type)

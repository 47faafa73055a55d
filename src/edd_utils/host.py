"""
Host backend contract for EDD Utils.

Every helper in this package delegates storage, querying and caching to a
host backend: the Easy Digital Downloads plugin (or anything that speaks for
it). This module describes the calls the helpers make so the backend can be
passed explicitly into each component.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


HOUR_IN_SECONDS = 3600


@runtime_checkable
class HostBackend(Protocol):
    """
    Data-access interface provided by the e-commerce host.

    Records returned by the host are opaque: objects with attributes or plain
    mappings. Missing values are signalled with ``None`` (or an empty
    sequence), never with exceptions raised on purpose by the host.

    Attributes:
        table_prefix: Prefix prepended to database table names (e.g. ``wp_``)
    """

    table_prefix: str

    # -- Entity access --

    def query(self, entity: str, args: Dict[str, Any]) -> List[Any]:
        """
        Run the host "get many" function for ``entity`` with ``args``.

        Download queries may carry ``edd_search_where``: a ``(sql, params)``
        fragment the host ANDs into the posts WHERE clause.
        """
        ...

    def get(self, entity: str, entity_id: int) -> Optional[Any]:
        """Fetch a single entity by primary key."""
        ...

    def get_meta(self, entity: str, entity_id: int, key: str, single: bool = True) -> Any:
        """Fetch a metadata value for an entity."""
        ...

    def row_exists(self, table: str, column: str, value: Any) -> bool:
        """Check whether ``table`` has a row where ``column`` equals ``value``."""
        ...

    # -- Raw database access --

    def get_col(self, sql: str, params: List[Any]) -> List[Any]:
        """Run a prepared query and return its first column."""
        ...

    def get_var(self, sql: str, params: List[Any]) -> Any:
        """Run a prepared query and return a single value."""
        ...

    def get_results(self, sql: str, params: List[Any]) -> List[Any]:
        """Run a prepared query and return every row."""
        ...

    # -- Caching --

    def get_transient(self, key: str) -> Any:
        """Return a cached transient value, or ``None`` when missing/expired."""
        ...

    def set_transient(self, key: str, value: Any, expiration: int) -> None:
        """Store a transient value for ``expiration`` seconds."""
        ...

    def cache_get(self, key: str, group: str) -> Any:
        """Return an object-cache value, or ``None`` when missing."""
        ...

    def cache_set(self, key: str, value: Any, group: str, expiration: int) -> None:
        """Store an object-cache value."""
        ...

    # -- Store lookups --

    def get_country_list(self) -> Dict[str, str]:
        ...

    def get_shop_states(self, country_code: str) -> Dict[str, str]:
        ...

    def get_currencies(self) -> Dict[str, str]:
        ...

    def get_payment_gateways(self) -> Dict[str, Dict[str, Any]]:
        ...

    def get_payment_statuses(self) -> Dict[str, str]:
        ...

    def get_complete_order_statuses(self) -> List[str]:
        ...

    def get_download_type(self, download_id: int) -> str:
        ...

    def get_variable_prices(self, download_id: int) -> Dict[Any, Dict[str, Any]]:
        ...

    def format_amount(self, amount: Any, decimals: bool = True) -> str:
        ...

    def currency_filter(self, formatted_amount: str, currency: str = "") -> str:
        ...

    def get_gateway_admin_label(self, gateway: str) -> str:
        ...

    # -- Environment --

    def current_user_can(self, capability: str) -> bool:
        ...

    def apply_filters(self, hook: str, value: Any) -> Any:
        ...

    def symbol_exists(self, symbol: str) -> bool:
        """Check whether a class or function provided by an extension is loaded."""
        ...

    def get_constant(self, name: str) -> Optional[str]:
        """Return the value of a defined constant, or ``None``."""
        ...

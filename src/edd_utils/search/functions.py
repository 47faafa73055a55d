"""
One-call search helpers.

Each helper takes a flat argument mapping, builds the matching search object
and runs it. Unlike the search classes, these default to returning raw host
records (``return_objects=True``).
"""

from typing import Any, Dict, List, Optional

from ..host import HostBackend
from .customers import CustomerSearch
from .discounts import DiscountSearch
from .downloads import DownloadSearch


_CONFIG_KEYS = ('status', 'number', 'orderby', 'order')
_DOWNLOAD_KEYS = ('no_bundles', 'variations', 'variations_only', 'excludes')


def _split_args(args: Optional[Dict[str, Any]], config_keys: tuple) -> tuple:
    """Split a flat mapping into (search, return_objects, config, query args)."""
    remaining = dict(args or {})
    search = remaining.pop('s', '') or ''
    return_objects = remaining.pop('return_objects', True)

    config = {}
    for key in config_keys:
        if key in remaining:
            config[key] = remaining.pop(key)

    return search, return_objects, config, remaining


def search_customers(host: HostBackend, args: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Search customers with a flat argument mapping.

    Args:
        host: Host backend
        args: ``s`` (search), ``status``, ``number``, ``orderby``, ``order``,
            ``return_objects``; anything else is passed to the host query

    Returns:
        Customer records, or option mappings when ``return_objects`` is False
    """
    search, return_objects, config, query_args = _split_args(args, _CONFIG_KEYS)
    return CustomerSearch(host, **config).get_results(search, query_args, return_raw=return_objects)


def search_discounts(host: HostBackend, args: Optional[Dict[str, Any]] = None) -> List[Any]:
    """Search discounts with a flat argument mapping (see :func:`search_customers`)."""
    search, return_objects, config, query_args = _split_args(args, _CONFIG_KEYS)
    return DiscountSearch(host, **config).get_results(search, query_args, return_raw=return_objects)


def search_downloads(host: HostBackend, args: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Search downloads with a flat argument mapping.

    Accepts the keys of :func:`search_customers` plus ``no_bundles``,
    ``variations``, ``variations_only`` and ``excludes``.
    """
    search, return_objects, config, query_args = _split_args(args, _CONFIG_KEYS + _DOWNLOAD_KEYS)
    return DownloadSearch(host, **config).get_results(search, query_args, return_raw=return_objects)

"""
Key and identifier builders for product/price-option pairs.
"""

from typing import Optional


def product_meta_key(base_key: str, price_id: Optional[int] = None) -> str:
    """
    Build a metadata key scoped to a variable price.

    ``product_meta_key("price")`` is ``"price"``;
    ``product_meta_key("price", 3)`` is ``"price_3"``.
    """
    if price_id is not None:
        return f"{base_key}_{price_id}"
    return base_key


def product_identifier(product_id: int, price_id: Optional[int] = None) -> str:
    """Build the ``<product>`` or ``<product>_<price>`` identifier used in option values."""
    if price_id is not None:
        return f"{product_id}_{price_id}"
    return str(product_id)

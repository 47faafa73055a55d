"""
Amount and label formatting through the host's store settings.
"""

from typing import Any

from .host import HostBackend


class Format:
    """Formats amounts, rates and gateway names the way the store displays them."""

    def __init__(self, host: HostBackend):
        self.host = host

    def currency(self, amount: Any, currency: str = '') -> str:
        """Format an amount with the store (or given) currency symbol."""
        return self.host.currency_filter(self.host.format_amount(amount), currency)

    def rate(self, amount: float, rate_type: str = 'percentage', decimals: bool = True) -> str:
        """Format a rate: flat rates as currency, anything else as a percentage."""
        if rate_type == 'flat':
            return self.currency(amount)
        return f"{self.host.format_amount(amount, decimals)}%"

    def gateway_label(self, gateway: str) -> str:
        """Admin label of a payment gateway."""
        return self.host.get_gateway_admin_label(gateway) or ''

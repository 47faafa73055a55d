"""
Store-wide dropdown options: currencies, gateways, payment statuses, and the
fixed status lists for discounts and commissions.
"""

from typing import Dict, List

from .host import HostBackend
from .models.options import OptionPair
from .sanitize import decode_entities, sort_by_column


DISCOUNT_STATUSES = [
    ('active', 'Active'),
    ('inactive', 'Inactive'),
    ('archived', 'Archived'),
    ('expired', 'Expired'),
]

COMMISSION_STATUSES = [
    ('unpaid', 'Unpaid'),
    ('paid', 'Paid'),
    ('revoked', 'Revoked'),
]


class Options:
    """Option lists built from host registries."""

    def __init__(self, host: HostBackend):
        self.host = host

    def get_currencies(self, sort: bool = True) -> List[Dict[str, str]]:
        currencies = self.host.get_currencies() or {}
        options = [
            OptionPair.from_raw(key, decode_entities(label)).to_dict()
            for key, label in currencies.items()
        ]
        return sort_by_column(options, 'label') if sort else options

    def get_gateways(self, sort: bool = True) -> List[Dict[str, str]]:
        gateways = self.host.get_payment_gateways() or {}
        options = [
            OptionPair.from_raw(key, (gateway or {}).get('admin_label', key)).to_dict()
            for key, gateway in gateways.items()
        ]
        return sort_by_column(options, 'label') if sort else options

    def get_payment_statuses(self, sort: bool = True) -> List[Dict[str, str]]:
        statuses = self.host.get_payment_statuses() or {}
        options = [
            OptionPair.from_raw(status, label).to_dict()
            for status, label in statuses.items()
        ]
        return sort_by_column(options, 'label') if sort else options


class Statuses:
    """Fixed status option lists."""

    @staticmethod
    def get_discount_statuses(include_expired: bool = True) -> List[Dict[str, str]]:
        return [
            OptionPair.from_raw(value, label).to_dict()
            for value, label in DISCOUNT_STATUSES
            if include_expired or value != 'expired'
        ]

    @staticmethod
    def get_commission_statuses() -> List[Dict[str, str]]:
        return [OptionPair.from_raw(value, label).to_dict() for value, label in COMMISSION_STATUSES]

"""
Composition root for EDD Utils.

A Toolkit wires one focused service object per concern to a single host
backend and configuration, so callers do not have to pass the host around.
"""

import logging
from typing import Optional

from .countries import Countries, Country, Regions
from .entities import (
    Adjustment,
    Customer,
    CustomerAddress,
    CustomerEmailAddress,
    Discount,
    Download,
    Log,
    Note,
    Order,
    OrderAddress,
    OrderAdjustment,
    OrderItem,
    OrderTransaction
)
from .extensions import Extensions
from .format import Format
from .host import HostBackend
from .models.config import EddUtilsConfig
from .options import Options, Statuses
from .search import CustomerSearch, DiscountSearch, DownloadSearch
from .stats import OrderStats


logger = logging.getLogger(__name__)


class Toolkit:
    """
    All EDD Utils services bound to one host.

    Search objects are created per call (:meth:`customer_search` etc.) since
    their setters mutate configuration; every other service is stateless and
    shared.
    """

    def __init__(self, host: HostBackend, config: Optional[EddUtilsConfig] = None):
        self.host = host
        self.config = config or EddUtilsConfig()

        if not getattr(host, 'table_prefix', None):
            host.table_prefix = self.config.table_prefix

        self.customers = Customer(host)
        self.orders = Order(host)
        self.discounts = Discount(host)
        self.downloads = Download(host)
        self.adjustments = Adjustment(host)
        self.logs = Log(host)
        self.notes = Note(host)
        self.customer_addresses = CustomerAddress(host)
        self.customer_email_addresses = CustomerEmailAddress(host)
        self.order_items = OrderItem(host)
        self.order_addresses = OrderAddress(host)
        self.order_adjustments = OrderAdjustment(host)
        self.order_transactions = OrderTransaction(host)

        self.country = Country(host)
        self.countries = Countries(host)
        self.regions = Regions(host)
        self.options = Options(host)
        self.statuses = Statuses()
        self.extensions = Extensions(host)
        self.format = Format(host)
        self.stats = OrderStats(host, self.config.cache)

        logger.debug(f"Toolkit ready ({self.config})")

    def customer_search(self) -> CustomerSearch:
        return CustomerSearch(self.host, self.config.search.customers)

    def discount_search(self) -> DiscountSearch:
        return DiscountSearch(self.host, self.config.search.discounts)

    def download_search(self) -> DownloadSearch:
        return DownloadSearch(self.host, self.config.search.downloads)

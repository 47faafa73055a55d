"""
Detection of optional EDD extensions.

Extensions are listed in an explicit registry: each entry names the class or
function the extension loads and, where it has one, the constant holding its
version. An extension that is not active is simply reported as absent.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from packaging.version import InvalidVersion, Version

from .host import HostBackend


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionSpec:
    """
    How to detect one extension.

    Attributes:
        symbol: Class or function name loaded by the extension
        version_constant: Constant holding the extension version, if any
    """
    symbol: str
    version_constant: Optional[str] = None


EXTENSIONS: Dict[str, ExtensionSpec] = {
    'all_access': ExtensionSpec('EDD_All_Access'),
    'software_licensing': ExtensionSpec('EDD_Software_Licensing', 'EDD_SL_VERSION'),
    'recurring': ExtensionSpec('EDD_Recurring', 'EDD_RECURRING_VERSION'),
    'commissions': ExtensionSpec('EDDC', 'EDDC_VERSION'),
    'free_downloads': ExtensionSpec('EDD_Free_Downloads', 'EDD_FREE_DOWNLOADS_VER'),
    'reviews': ExtensionSpec('EDD_Reviews', 'EDD_REVIEWS_VERSION'),
    'product_updates': ExtensionSpec('EDD_Product_Updates', 'EDD_PRODUCT_UPDATES_VERSION'),
    'fes': ExtensionSpec('EDD_Front_End_Submissions', 'fes_plugin_version'),
    'invoices': ExtensionSpec('EDDInvoices', 'EDD_INVOICES_VERSION'),
    'stripe_pro': ExtensionSpec('EDD_Stripe_Pro', 'EDD_STRIPE_PRO_VERSION'),
    'wallet': ExtensionSpec('EDD_Wallet', 'EDD_WALLET_VERSION'),
    'gateway_fees': ExtensionSpec('EDD_GF', 'edd_gf_plugin_version'),
    'custom_deliverable': ExtensionSpec('EDD_Custom_Deliverables'),
}


def normalize_name(name: str) -> str:
    """``"Software-Licensing"`` -> ``"software_licensing"``."""
    return name.strip().lower().replace('-', '_')


class Extensions:
    """Checks which registered extensions are active on the host."""

    def __init__(self, host: HostBackend, registry: Optional[Dict[str, ExtensionSpec]] = None):
        self.host = host
        self.registry = dict(EXTENSIONS if registry is None else registry)

    def has(self, name: str) -> bool:
        """Check whether an extension is active; unknown names are inactive."""
        extension = self.registry.get(normalize_name(name))
        if extension is None:
            logger.warning(f"Unknown extension '{name}'")
            return False
        return bool(self.host.symbol_exists(extension.symbol))

    def check_multiple(self, names: List[str]) -> Dict[str, bool]:
        """Check several extensions; unknown names are left out of the result."""
        return {
            name: self.has(name)
            for name in names
            if normalize_name(name) in self.registry
        }

    def get_active_extensions(self) -> List[str]:
        """Names of all active extensions, in registry order."""
        return [name for name in self.registry if self.has(name)]

    def check_version(self, name: str, min_version: str) -> bool:
        """
        Check that an extension is active and at least ``min_version``.

        An active extension with no known version constant passes.
        """
        if not self.has(name):
            return False

        extension = self.registry[normalize_name(name)]
        if extension.version_constant is None:
            return True

        installed = self.host.get_constant(extension.version_constant)
        if installed is None:
            return True

        try:
            return Version(str(installed)) >= Version(min_version)
        except InvalidVersion:
            logger.warning(f"Cannot compare {name} version '{installed}' with '{min_version}'")
            return False

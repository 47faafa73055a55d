"""
EDD Utils - Core Package

Helpers layered over the Easy Digital Downloads host: entity field access,
search-box lookups returning dropdown option pairs, country and store
options, extension detection and cached order statistics.
"""

__version__ = "0.1.0"
__author__ = "EDD Utils Team"

from .host import HostBackend, HOUR_IN_SECONDS
from .toolkit import Toolkit

__all__ = ['HostBackend', 'HOUR_IN_SECONDS', 'Toolkit']

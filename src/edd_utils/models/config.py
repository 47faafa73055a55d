"""
Configuration data models for EDD Utils.

This module defines the library-wide configuration: default search settings
per entity and the cache settings used by the aggregate statistics helpers.
"""

from typing import Dict, List, Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..host import HOUR_IN_SECONDS
from .search_query import CustomerSearchConfig, DiscountSearchConfig, DownloadSearchConfig


class CacheConfig(BaseModel):
    """
    Configuration for host-level caching of aggregate queries.

    Attributes:
        enabled: Whether cached values may be read and written
        ttl_seconds: Expiry for transients and object-cache entries
        stats_group: Object-cache group for raw order statistics
    """

    enabled: bool = Field(True, description="Whether cached values may be used")
    ttl_seconds: int = Field(HOUR_IN_SECONDS, gt=0, description="Cache expiry in seconds")
    stats_group: str = Field('edd_raw_stats', min_length=1, description="Object-cache group for raw stats")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class SearchDefaults(BaseModel):
    """
    Default search configuration for each entity type.

    Attributes:
        customers: Defaults for customer searches
        discounts: Defaults for discount searches
        downloads: Defaults for download searches
    """

    customers: CustomerSearchConfig = Field(default_factory=CustomerSearchConfig)
    discounts: DiscountSearchConfig = Field(default_factory=DiscountSearchConfig)
    downloads: DownloadSearchConfig = Field(default_factory=DownloadSearchConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'customers': self.customers.to_dict(),
            'discounts': self.discounts.to_dict(),
            'downloads': self.downloads.to_dict()
        }


class EddUtilsConfig(BaseModel):
    """
    Main configuration class for EDD Utils.

    Attributes:
        search: Default search configuration per entity
        cache: Cache settings for aggregate helpers
        table_prefix: Table prefix used when the host does not provide one
    """

    search: SearchDefaults = Field(default_factory=SearchDefaults, description="Search defaults")
    cache: CacheConfig = Field(default_factory=CacheConfig, description="Cache settings")
    table_prefix: str = Field('wp_', description="Fallback database table prefix")

    @field_validator('table_prefix')
    @classmethod
    def validate_table_prefix(cls, v: str) -> str:
        """Table prefixes are interpolated into SQL, so only word characters are allowed."""
        if v and not v.replace('_', '').isalnum():
            raise ValueError(f"Invalid table prefix: {v}")
        return v

    def validate_configuration(self) -> List[str]:
        """
        Return non-fatal warnings about the configuration.

        Returns:
            List of warning messages (empty if nothing looks off)
        """
        warnings = []

        if not self.cache.enabled:
            warnings.append("Caching disabled - aggregate helpers will query the host on every call")

        if self.cache.ttl_seconds > 24 * HOUR_IN_SECONDS:
            warnings.append("Cache TTL longer than a day - distinct value lists may go stale")

        for name, config in (('customers', self.search.customers),
                             ('discounts', self.search.discounts),
                             ('downloads', self.search.downloads)):
            if config.number > 500:
                warnings.append(f"Large {name} page size ({config.number}) may slow down dropdowns")

        if self.search.downloads.variations_only and not self.search.downloads.variations:
            warnings.append("downloads.variations_only has no effect unless downloads.variations is enabled")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'search': self.search.to_dict(),
            'cache': self.cache.to_dict(),
            'table_prefix': self.table_prefix
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EddUtilsConfig':
        """Create an EddUtilsConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Cache: {'on' if self.cache.enabled else 'off'} ({self.cache.ttl_seconds}s)"]
        parts.append(f"Customers: {self.search.customers.number} per page")
        parts.append(f"Discounts: {self.search.discounts.number} per page")
        parts.append(f"Downloads: {self.search.downloads.number} per page")
        return " | ".join(parts)


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate raw configuration data and return its normalized form.

    Args:
        config_data: Raw configuration mapping

    Returns:
        Normalized configuration mapping

    Raises:
        ValueError: If the configuration is invalid
    """
    known_sections = {'search', 'cache', 'table_prefix'}
    unknown = set(config_data) - known_sections
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

    try:
        return EddUtilsConfig.from_dict(config_data).to_dict()
    except ValidationError as e:
        raise ValueError(str(e)) from e

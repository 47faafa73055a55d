"""
Search configuration data models for EDD Utils.

This module defines the query configuration held by each entity search:
status filter, page size, sort field and direction, plus the entity-specific
flags used by the download search.
"""

from typing import Dict, List, Any
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class SortOrder(Enum):
    """Sort direction passed to the host query."""
    ASC = "ASC"
    DESC = "DESC"


SORT_ORDERS = {order.value for order in SortOrder}


def normalize_order(value: Any) -> Any:
    """Upper-case a known sort direction; leave anything else unchanged."""
    if isinstance(value, SortOrder):
        return value.value
    if isinstance(value, str) and value.strip().upper() in SORT_ORDERS:
        return value.strip().upper()
    return value


def normalize_statuses(value: Any) -> List[str]:
    """Turn a status or list of statuses into a list without blanks or duplicates."""
    if isinstance(value, str):
        value = [value]

    statuses = []
    for status in value or []:
        status = str(status).strip()
        if status and status not in statuses:
            statuses.append(status)
    return statuses


class SearchConfig(BaseModel):
    """
    Default query configuration shared by every entity search.

    The setters on the search classes write straight into this model, so
    assignment is not re-validated: values the host does not understand are
    passed through and surface as host-level empty results.

    Attributes:
        status: Ordered list of statuses to include
        number: Number of records to retrieve
        orderby: Field to order the results by
        order: Sort direction
    """

    status: List[str] = Field(default_factory=lambda: ['active'], description="Statuses to include")
    number: int = Field(30, gt=0, description="Number of records to retrieve")
    orderby: str = Field('name', description="Field to order the results by")
    order: str = Field(SortOrder.ASC.value, description="Sort direction (ASC or DESC)")

    @field_validator('order', mode='before')
    @classmethod
    def validate_order(cls, v) -> str:
        """Normalize the sort direction to its upper-case name."""
        normalized = normalize_order(v)
        if isinstance(normalized, str) and normalized not in SORT_ORDERS:
            raise ValueError(f"Invalid sort order: {v}")
        return normalized

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v) -> List[str]:
        """Accept a single status or a list, dropping blanks and duplicates."""
        return normalize_statuses(v)

    @classmethod
    def with_overrides(cls, base: "SearchConfig", overrides: Dict[str, Any]) -> "SearchConfig":
        """
        Copy ``base`` with caller overrides applied as given.

        Overrides are not validated: statuses and sort direction are
        normalized, anything else (e.g. ``number=-1``) is left for the host
        to interpret.
        """
        values = base.model_dump()
        for key, value in overrides.items():
            if key == 'status':
                value = normalize_statuses(value)
            elif key == 'order':
                value = normalize_order(value)
            values[key] = value
        return cls.model_construct(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class CustomerSearchConfig(SearchConfig):
    """Defaults for customer searches (active customers ordered by name)."""


class DiscountSearchConfig(SearchConfig):
    """Defaults for discount searches (active discounts ordered by name)."""


class DownloadSearchConfig(SearchConfig):
    """
    Defaults for download (product) searches.

    An empty ``status`` list means "decide from the current user's
    capabilities" when the search is constructed.

    Attributes:
        no_bundles: Exclude bundle products from formatted results
        variations: Add one option per named variable price
        variations_only: Only list variable price options for priced products
        excludes: Download IDs excluded from the query
    """

    status: List[str] = Field(default_factory=list, description="Post statuses to include")
    orderby: str = Field('title', description="Field to order the results by")
    no_bundles: bool = Field(False, description="Exclude bundles from the results")
    variations: bool = Field(False, description="Include variable price options")
    variations_only: bool = Field(False, description="Only include variable price options")
    excludes: List[int] = Field(default_factory=list, description="Download IDs to exclude")

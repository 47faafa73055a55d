"""
Field accessors for EDD entities.

Every entity type with a parallel metadata table shares the same two-tier
lookup: the entity's own attribute first, then its metadata. Attributes are
authoritative, so a set-but-falsy attribute (``0``, ``""``) is returned as
is, while an empty metadata value counts as "not found".
"""

import logging
from typing import Any, Mapping, Optional

from ..host import HostBackend


logger = logging.getLogger(__name__)


def get_attribute(record: Any, field: str) -> Any:
    """Return ``record.field`` (or ``record[field]``), None when unset."""
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


class FieldAccessor:
    """
    Existence checks and field lookups for one entity type.

    Attributes:
        entity: Host entity name (e.g. ``order_item``)
        table: Database table checked by :meth:`exists` (without prefix)
        id_column: Primary-key column of that table
    """

    entity: str = ''
    table: str = ''
    id_column: str = 'id'

    def __init__(self, host: HostBackend, entity: Optional[str] = None, table: Optional[str] = None):
        self.host = host
        if entity is not None:
            self.entity = entity
        if table is not None:
            self.table = table

    def exists(self, entity_id: int) -> bool:
        """Check whether a row with this primary key exists."""
        if not entity_id:
            return False
        return bool(self.host.row_exists(self.table, self.id_column, entity_id))

    def get(self, entity_id: int) -> Optional[Any]:
        """Fetch the entity, or None when the ID is empty or unknown."""
        if not entity_id:
            return None
        return self.host.get(self.entity, entity_id) or None

    def get_field(self, entity_id: int, field: str) -> Any:
        """
        Get a field value from the entity or, failing that, its metadata.

        Args:
            entity_id: Primary key of the entity
            field: Attribute or metadata key

        Returns:
            The attribute value if set (falsy values included), else the
            metadata value if non-empty, else None
        """
        record = self.get(entity_id)
        if record is None:
            return None

        value = get_attribute(record, field)
        if value is not None:
            return value

        meta_value = self.host.get_meta(self.entity, entity_id, field, True)
        if meta_value:
            return meta_value

        logger.debug(f"Field '{field}' not found on {self.entity} {entity_id}")
        return None


class TypedFieldAccessor(FieldAccessor):
    """Field accessor for entities with a ``type`` field (adjustments)."""

    def is_type(self, entity_id: int, type_name: str = '') -> bool:
        """Check whether the entity's type matches, case-insensitively."""
        entity_type = self.get_field(entity_id, 'type')
        if not entity_type:
            return False
        return str(entity_type).lower() == type_name.lower()


class Adjustment(TypedFieldAccessor):
    entity = 'adjustment'
    table = 'edd_adjustments'


class Log(FieldAccessor):
    entity = 'log'
    table = 'edd_logs'


class Note(FieldAccessor):
    entity = 'note'
    table = 'edd_notes'


class CustomerAddress(FieldAccessor):
    entity = 'customer_address'
    table = 'edd_customer_addresses'


class CustomerEmailAddress(FieldAccessor):
    entity = 'customer_email_address'
    table = 'edd_customer_email_addresses'

"""
Formatting of host records into dropdown option pairs.
"""

from typing import Any, Dict, List, Sequence

from ..models.options import OptionPair
from ..sanitize import absint, esc_html, record_value


class ResultFormatter:
    """
    Maps raw entity records to ``{value, label}`` option pairs.

    The value is the record's ID reduced to digits; the label is
    ``"<primary> (<secondary>)"`` built from two record fields and escaped.

    Attributes:
        id_field: Record field holding the identifier
        label_field: Record field used as the main label text
        detail_field: Record field shown in parentheses after the label
    """

    def __init__(self, id_field: str = 'id', label_field: str = 'name', detail_field: str = 'email'):
        self.id_field = id_field
        self.label_field = label_field
        self.detail_field = detail_field

    def format_option(self, record: Any) -> OptionPair:
        """Format a single record."""
        entity_id = absint(record_value(record, self.id_field, 0))
        label = record_value(record, self.label_field, '') or ''
        detail = record_value(record, self.detail_field, '') or ''

        return OptionPair(
            value=str(entity_id),
            label=esc_html(f"{label} ({detail})")
        )

    def format(self, records: Sequence[Any]) -> List[Dict[str, str]]:
        """
        Format records into option mappings.

        Args:
            records: Host records (objects or mappings)

        Returns:
            Option mappings in record order; empty input gives an empty list
        """
        if not records:
            return []

        return [self.format_option(record).to_dict() for record in records]


def format_results(records: Sequence[Any], label_field: str = 'name', detail_field: str = 'email') -> List[Dict[str, str]]:
    """Convenience function to format records with a one-off formatter."""
    return ResultFormatter(label_field=label_field, detail_field=detail_field).format(records)

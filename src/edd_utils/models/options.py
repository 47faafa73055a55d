"""
Option data models for EDD Utils.

Option pairs are the de facto contract consumed by dropdown and autocomplete
widgets: ``{"value": ..., "label": ...}`` with both sides already escaped.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field, field_validator

from ..sanitize import esc_attr, esc_html


class OptionPair(BaseModel):
    """
    A single display-ready option.

    Build instances with :meth:`from_raw` so escaping is applied exactly once.

    Attributes:
        value: Escaped option value
        label: Escaped, human-readable label
    """

    value: str = Field(..., description="Escaped option value")
    label: str = Field(..., description="Escaped option label")

    @field_validator('value', mode='before')
    @classmethod
    def validate_value(cls, v) -> str:
        """Render integer identifiers as strings."""
        if isinstance(v, int):
            return str(v)
        return v

    @classmethod
    def from_raw(cls, value: Any, label: Any) -> 'OptionPair':
        """Create an option from unescaped text."""
        return cls(value=esc_attr(value), label=esc_html(label))

    def to_dict(self) -> Dict[str, str]:
        """Convert to the ``{value, label}`` mapping widgets expect."""
        return {'value': self.value, 'label': self.label}


class OptionGroup(BaseModel):
    """
    A labelled group of options (``<optgroup>``), e.g. states of a country.

    Attributes:
        label: Escaped group label
        options: Options inside the group
    """

    label: str = Field(..., description="Escaped group label")
    options: List[OptionPair] = Field(default_factory=list, description="Options inside the group")

    def has_options(self) -> bool:
        """Check if the group holds any options."""
        return len(self.options) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{label, options}`` mapping widgets expect."""
        return {
            'label': self.label,
            'options': [option.to_dict() for option in self.options]
        }

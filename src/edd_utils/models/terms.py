"""
Parsed search term data models for EDD Utils.

A raw search-box string is classified once per search call into one of four
mutually exclusive kinds; the search classes map each kind onto host query
arguments.
"""

from typing import Dict, List, Optional, Any
from enum import Enum
from pydantic import BaseModel, Field, model_validator


class TermKind(Enum):
    """Classification of a search term."""
    EMAIL = "email"
    EXACT = "exact"
    PREFIX = "prefix"
    FREE_TEXT = "free_text"


class ParsedTerm(BaseModel):
    """
    A classified search term.

    Attributes:
        kind: Which classification matched
        value: The email address, ID, or prefixed remainder (None for free text)
        prefix: Short code that introduced a prefixed lookup (``c``, ``id``, ``u``, ``user``)
        tokens: Free-text tokens, in input order
    """

    kind: TermKind = Field(..., description="Classification of the term")
    value: Optional[str] = Field(None, description="Email, ID or prefixed remainder")
    prefix: Optional[str] = Field(None, description="Prefix short code for prefixed lookups")
    tokens: List[str] = Field(default_factory=list, description="Free-text tokens")

    @model_validator(mode='after')
    def validate_term(self):
        """Validate that each kind carries the data it needs."""
        if self.kind == TermKind.PREFIX and not self.prefix:
            raise ValueError("Prefixed terms require a prefix")

        if self.kind != TermKind.FREE_TEXT and self.value is None:
            raise ValueError(f"{self.kind.value} terms require a value")

        if any(not token for token in self.tokens):
            raise ValueError("Free-text tokens cannot be empty")

        return self

    @classmethod
    def email(cls, address: str) -> 'ParsedTerm':
        return cls(kind=TermKind.EMAIL, value=address)

    @classmethod
    def exact(cls, entity_id: str) -> 'ParsedTerm':
        return cls(kind=TermKind.EXACT, value=entity_id)

    @classmethod
    def by_prefix(cls, prefix: str, remainder: str) -> 'ParsedTerm':
        return cls(kind=TermKind.PREFIX, prefix=prefix, value=remainder)

    @classmethod
    def free_text(cls, tokens: List[str]) -> 'ParsedTerm':
        return cls(kind=TermKind.FREE_TEXT, tokens=tokens)

    def is_email(self) -> bool:
        return self.kind == TermKind.EMAIL

    def is_free_text(self) -> bool:
        return self.kind == TermKind.FREE_TEXT

    def get_id(self) -> Optional[int]:
        """Get the value as an integer ID, if it is one."""
        if self.value is not None and self.value.isascii() and self.value.isdigit():
            return int(self.value)
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['kind'] = self.kind.value
        return data

    def __str__(self) -> str:
        if self.kind == TermKind.FREE_TEXT:
            return f"FreeText({self.tokens})"
        if self.kind == TermKind.PREFIX:
            return f"ByPrefix({self.prefix}, {self.value})"
        return f"{self.kind.value.capitalize()}({self.value})"

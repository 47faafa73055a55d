"""
Search term classification for EDD Utils.

A search-box string is classified in a fixed priority order:

1. an email address (spaces turned back into ``+``, since form encoding
   eats them),
2. an all-digit primary key,
3. a short-code prefixed ID (``c:5``, ``id:5``, ``u:12``, ``user:12``),
4. free text, split into tokens.

The order matters: ``"5"`` is an ID, never free text, and ``"c:5"`` is a
prefixed ID even though ``"5"`` alone would already be numeric.
"""

import re
import logging
from typing import Dict, List, Optional

from ..models.terms import ParsedTerm


logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$"
)

# Longest first so "user:" wins over "u:".
DEFAULT_PREFIXES: Dict[str, str] = {
    'user:': 'user',
    'id:': 'id',
    'c:': 'c',
    'u:': 'u',
}

_DIGITS = re.compile(r'^[0-9]+$')
_TOKEN = re.compile(r'"[^"]*"|\S+')
_EXACT_PHRASE = re.compile(r'^".+"$')
_NOISE = re.compile(r'^[a-z\-]$', re.IGNORECASE)


def is_email(value: str) -> bool:
    """Check whether a string is a syntactically valid email address."""
    if not value or '..' in value:
        return False
    return EMAIL_PATTERN.match(value) is not None


def normalize_email_term(search: str) -> Optional[str]:
    """
    Return the search as an email address, or None if it is not one.

    Form-encoded ``+`` signs arrive as spaces, so a term with spaces is
    retried with the spaces substituted back.
    """
    if is_email(search):
        return search

    if ' ' in search:
        candidate = search.replace(' ', '+')
        if is_email(candidate):
            return candidate

    return None


def parse_search_terms(search: str) -> List[str]:
    """
    Split free text into tokens for a "fuzzy" title search.

    Quoted phrases stay together and keep their inner spaces. Empty tokens
    and single letters or dashes are dropped.

    Args:
        search: Raw free-text search

    Returns:
        Tokens in input order
    """
    checked = []

    for term in _TOKEN.findall(search or ''):
        if _EXACT_PHRASE.match(term):
            term = term.strip("\"'")
        else:
            term = term.strip("\"' ")

        if not term or _NOISE.match(term):
            continue

        checked.append(term)

    return checked


class TermParser:
    """
    Classifies raw search strings into :class:`ParsedTerm` values.

    Entity searches configure which classifications apply: customer search
    uses all of them, download search only IDs and free text.
    """

    def __init__(self, prefixes: Optional[Dict[str, str]] = None, detect_email: bool = True):
        """
        Initialize the parser.

        Args:
            prefixes: Mapping of short-code prefix (with colon) to its kind.
                Defaults to ``c:``, ``id:``, ``u:`` and ``user:``.
            detect_email: Whether email addresses are recognized
        """
        if prefixes is None:
            prefixes = DEFAULT_PREFIXES
        self.prefixes = dict(sorted(prefixes.items(), key=lambda item: len(item[0]), reverse=True))
        self.detect_email = detect_email

    def parse(self, search: str) -> ParsedTerm:
        """
        Classify a search string.

        Args:
            search: Sanitized search string

        Returns:
            The parsed term
        """
        search = (search or '').strip()

        if self.detect_email:
            email = normalize_email_term(search)
            if email is not None:
                return ParsedTerm.email(email)

        if _DIGITS.match(search):
            return ParsedTerm.exact(search)

        lowered = search.lower()
        for prefix, kind in self.prefixes.items():
            if lowered.startswith(prefix):
                return ParsedTerm.by_prefix(kind, search[len(prefix):].strip())

        tokens = parse_search_terms(search)
        logger.debug(f"Free-text search '{search}' parsed into {len(tokens)} tokens")
        return ParsedTerm.free_text(tokens)

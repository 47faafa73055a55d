"""
Unit tests for search term classification.
"""

import pytest
from pydantic import ValidationError

from edd_utils.models.terms import ParsedTerm, TermKind
from edd_utils.search.terms import TermParser, is_email, normalize_email_term, parse_search_terms


class TestIsEmail:
    """Test cases for email detection."""

    def test_valid_addresses(self):
        """Test common valid addresses."""
        assert is_email("a@b.com")
        assert is_email("john.doe+shop@example.co.uk")
        assert is_email("123@example.com")

    def test_invalid_addresses(self):
        """Test strings that are not addresses."""
        assert not is_email("")
        assert not is_email("john")
        assert not is_email("john@localhost")
        assert not is_email("john doe@example.com")
        assert not is_email("john..doe@example.com")

    def test_space_restored_to_plus(self):
        """Test that form-encoded plus signs are restored."""
        assert normalize_email_term("john doe@example.com") == "john+doe@example.com"
        assert normalize_email_term("john smith") is None


class TestParseSearchTerms:
    """Test cases for free-text tokenizing."""

    def test_whitespace_split(self):
        """Test plain words are split on whitespace."""
        assert parse_search_terms("john smith") == ["john", "smith"]

    def test_single_letters_and_dashes_dropped(self):
        """Test single letters and dashes are treated as noise."""
        assert parse_search_terms("x") == []
        assert parse_search_terms("a - b ebook") == ["ebook"]

    def test_single_digit_kept(self):
        """Test that single digits are not noise."""
        assert parse_search_terms("volume 2") == ["volume", "2"]

    def test_quoted_phrase_kept_together(self):
        """Test that exact-match phrases keep their inner spaces."""
        assert parse_search_terms('"blue shirt" large') == ["blue shirt", "large"]

    def test_stray_quotes_stripped(self):
        """Test quotes around single words are removed."""
        assert parse_search_terms("'quoted' \"") == ["quoted"]

    def test_empty_input(self):
        """Test empty and blank input."""
        assert parse_search_terms("") == []
        assert parse_search_terms("   ") == []


class TestTermParser:
    """Test cases for TermParser classification order."""

    def setup_method(self):
        """Set up a parser with every classification enabled."""
        self.parser = TermParser()

    def test_numeric_is_exact_id(self):
        """Test that an all-digit term is an exact ID."""
        term = self.parser.parse("5")
        assert term.kind == TermKind.EXACT
        assert term.get_id() == 5

    def test_prefixed_id(self):
        """Test the c: prefix even though the remainder is numeric."""
        term = self.parser.parse("c:5")
        assert term.kind == TermKind.PREFIX
        assert term.prefix == "c"
        assert term.value == "5"

    def test_user_prefixes(self):
        """Test that user: is not mistaken for u:."""
        assert self.parser.parse("user:12").prefix == "user"
        assert self.parser.parse("u: 12").prefix == "u"
        assert self.parser.parse("u: 12").value == "12"
        assert self.parser.parse("ID:7").prefix == "id"

    def test_email(self):
        """Test email classification."""
        term = self.parser.parse("a@b.com")
        assert term.kind == TermKind.EMAIL
        assert term.value == "a@b.com"

    def test_email_takes_precedence(self):
        """Test numeric-looking and space-mangled emails stay emails."""
        assert self.parser.parse("123@example.com").kind == TermKind.EMAIL
        term = self.parser.parse("john doe@example.com")
        assert term.is_email()
        assert term.value == "john+doe@example.com"

    def test_free_text(self):
        """Test that anything else is free text."""
        term = self.parser.parse("john smith")
        assert term.is_free_text()
        assert term.tokens == ["john", "smith"]

    def test_single_letter_filtered_to_empty(self):
        """Test that a single letter yields no tokens."""
        term = self.parser.parse("x")
        assert term.kind == TermKind.FREE_TEXT
        assert term.tokens == []

    def test_prefix_must_lead(self):
        """Test that a prefix inside the term does not count."""
        term = self.parser.parse("abc:5")
        assert term.is_free_text()

    def test_restricted_parser(self):
        """Test a parser without email or prefix detection."""
        parser = TermParser(prefixes={}, detect_email=False)
        assert parser.parse("a@b.com").tokens == ["a@b.com"]
        assert parser.parse("c:5").tokens == ["c:5"]
        assert parser.parse("42").kind == TermKind.EXACT


class TestParsedTerm:
    """Test cases for the ParsedTerm model."""

    def test_empty_token_rejected(self):
        """Test that free-text tokens can never be empty."""
        with pytest.raises(ValidationError):
            ParsedTerm(kind=TermKind.FREE_TEXT, tokens=["ok", ""])

    def test_prefix_requires_prefix(self):
        """Test that prefixed terms need their short code."""
        with pytest.raises(ValidationError):
            ParsedTerm(kind=TermKind.PREFIX, value="5")

    def test_exact_requires_value(self):
        """Test that exact terms need a value."""
        with pytest.raises(ValidationError):
            ParsedTerm(kind=TermKind.EXACT)

    def test_non_numeric_id(self):
        """Test get_id on a non-numeric remainder."""
        assert ParsedTerm.by_prefix("c", "abc").get_id() is None

    def test_string_representation(self):
        """Test string forms used in debug logs."""
        assert str(ParsedTerm.by_prefix("c", "5")) == "ByPrefix(c, 5)"
        assert str(ParsedTerm.free_text(["a1"])) == "FreeText(['a1'])"
        assert ParsedTerm.email("a@b.com").to_dict()['kind'] == "email"

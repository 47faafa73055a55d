"""
Country and region helpers for EDD Utils.

Country names come from the store's country list; state lists from the
store's shop states. Invalid codes never raise: every accessor returns an
empty string, list or mapping instead.
"""

import logging
from typing import Any, Dict, List

from .host import HostBackend
from .models.options import OptionGroup, OptionPair
from .sanitize import decode_entities, esc_html, sort_by_column


logger = logging.getLogger(__name__)

REGIONAL_INDICATOR_A = 0x1F1E6


class Country:
    """Lookups for a single two-letter country code."""

    def __init__(self, host: HostBackend):
        self.host = host

    def _countries(self) -> Dict[str, str]:
        return self.host.get_country_list() or {}

    def is_valid(self, code: str) -> bool:
        """Check whether the code is a two-letter code known to the store."""
        code = (code or '').strip().upper()
        if len(code) != 2:
            return False
        return code in self._countries()

    def get_name(self, code: str) -> str:
        """Get the escaped country name, or an empty string."""
        if not self.is_valid(code):
            return ''
        name = self._countries().get(code.strip().upper())
        return esc_html(decode_entities(name)) if name else ''

    def get_flag(self, code: str) -> str:
        """Get the flag emoji (two regional indicator symbols), or an empty string."""
        if not self.is_valid(code):
            return ''
        code = code.strip().upper()
        return ''.join(chr(ord(letter) - ord('A') + REGIONAL_INDICATOR_A) for letter in code)

    def format(self, code: str, include_flag: bool = True) -> str:
        """Format as ``"<flag> Name (CODE)"``, or an empty string."""
        if not self.is_valid(code):
            return ''
        code = code.strip().upper()
        flag = f"{self.get_flag(code)} " if include_flag else ''
        return f"{flag}{self.get_name(code)} ({code})"

    def get_details(self, code: str) -> Dict[str, str]:
        """Get name, code and flag, or an empty mapping."""
        if not self.is_valid(code):
            return {}
        code = code.strip().upper()
        return {
            'name': self.get_name(code),
            'code': code,
            'flag': self.get_flag(code),
        }

    def normalize(self, code: str) -> str:
        """Upper-case and trim a code, or return an empty string if invalid."""
        code = (code or '').strip().upper()
        return code if self.is_valid(code) else ''

    def search(self, search: str, case_sensitive: bool = False) -> Dict[str, str]:
        """Find countries whose name contains the search string."""
        if not search:
            return {}

        needle = search if case_sensitive else search.lower()
        results = {}
        for code, name in self._countries().items():
            haystack = name if case_sensitive else name.lower()
            if needle in haystack:
                results[code] = name
        return results

    # -- States --

    def get_states(self, code: str) -> Dict[str, str]:
        """Get the country's states keyed by state code."""
        if not self.is_valid(code):
            return {}
        return self.host.get_shop_states(code.strip().upper()) or {}

    def get_state_name(self, code: str, state_code: str) -> str:
        """Get a state's name, or an empty string."""
        return self.get_states(code).get(state_code, '')

    def has_states(self, code: str) -> bool:
        return bool(self.get_states(code))

    def has_state(self, code: str, state_code: str) -> bool:
        return state_code in self.get_states(code)

    def get_state_details(self, code: str, state_code: str) -> Dict[str, str]:
        """Get state name, code and country code, or an empty mapping."""
        if not self.has_state(code, state_code):
            return {}
        return {
            'name': self.get_state_name(code, state_code),
            'code': state_code,
            'country_code': code.strip().upper(),
        }


class Countries:
    """Country dropdown options."""

    def __init__(self, host: HostBackend):
        self.host = host

    def get_options(self, sort: bool = True) -> List[Dict[str, str]]:
        """
        Get every country as an option pair.

        Args:
            sort: Sort options by label

        Returns:
            Option mappings; empty when the store has no country list
        """
        countries = self.host.get_country_list() or {}

        options = [
            OptionPair.from_raw(code, decode_entities(name)).to_dict()
            for code, name in countries.items()
            if code and name
        ]

        return sort_by_column(options, 'label') if sort else options


class Regions:
    """State/region dropdown options grouped by country."""

    def __init__(self, host: HostBackend):
        self.host = host

    def get_options(self, sort: bool = True) -> List[Dict[str, Any]]:
        """
        Get states grouped under their country.

        Countries without states are left out.

        Args:
            sort: Sort countries, and states within each country, by label

        Returns:
            Group mappings ``{label, options}``
        """
        countries = self.host.get_country_list() or {}
        groups = []

        for country_code, country_name in countries.items():
            if not country_code or not country_name:
                continue

            states = self.host.get_shop_states(country_code) or {}
            group = OptionGroup(label=esc_html(decode_entities(country_name)))
            for state_code, state_name in states.items():
                if state_code and state_name:
                    group.options.append(OptionPair.from_raw(state_code, decode_entities(state_name)))

            if group.has_options():
                groups.append(group.to_dict())

        if sort:
            groups = sort_by_column(groups, 'label')
            for group in groups:
                group['options'] = sort_by_column(group['options'], 'label')

        return groups

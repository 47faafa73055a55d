"""
Unit tests for country and region helpers.
"""

from unittest.mock import MagicMock

from edd_utils.countries import Countries, Country, Regions


COUNTRY_LIST = {
    'US': 'United States',
    'CI': 'C&ocirc;te d\'Ivoire',
    'AX': 'Åland Islands',
    'CA': 'Canada',
    '': 'Choose a country',
}

STATES = {
    'US': {'NY': 'New York', 'CA': 'California'},
    'CA': {'ON': 'Ontario', 'BC': 'British Columbia'},
}


def make_host():
    host = MagicMock()
    host.get_country_list.return_value = dict(COUNTRY_LIST)
    host.get_shop_states.side_effect = lambda code: dict(STATES.get(code, {}))
    return host


class TestCountry:
    """Test cases for Country."""

    def setup_method(self):
        """Set up a country helper over a fixed list."""
        self.country = Country(make_host())

    def test_is_valid(self):
        """Test code validation."""
        assert self.country.is_valid('US')
        assert self.country.is_valid(' us ')
        assert not self.country.is_valid('USA')
        assert not self.country.is_valid('ZZ')
        assert not self.country.is_valid('')
        assert not self.country.is_valid(None)

    def test_get_name(self):
        """Test names are decoded then escaped."""
        assert self.country.get_name('us') == 'United States'
        assert self.country.get_name('CI') == 'Côte d&#x27;Ivoire'
        assert self.country.get_name('ZZ') == ''

    def test_get_flag(self):
        """Test flag emoji from regional indicators."""
        assert self.country.get_flag('US') == '\U0001F1FA\U0001F1F8'
        assert self.country.get_flag('ZZ') == ''

    def test_format(self):
        """Test the display format with and without a flag."""
        assert self.country.format('us') == '\U0001F1FA\U0001F1F8 United States (US)'
        assert self.country.format('US', include_flag=False) == 'United States (US)'
        assert self.country.format('XX') == ''

    def test_get_details(self):
        """Test the details mapping."""
        assert self.country.get_details('ca') == {
            'name': 'Canada',
            'code': 'CA',
            'flag': '\U0001F1E8\U0001F1E6',
        }
        assert self.country.get_details('nope') == {}

    def test_normalize(self):
        """Test normalization."""
        assert self.country.normalize(' ca') == 'CA'
        assert self.country.normalize('zz') == ''

    def test_search(self):
        """Test name search."""
        assert self.country.search('united') == {'US': 'United States'}
        assert self.country.search('united', case_sensitive=True) == {}
        assert self.country.search('') == {}

    def test_states(self):
        """Test state lookups."""
        assert self.country.has_states('US')
        assert not self.country.has_states('AX')
        assert self.country.has_state('US', 'NY')
        assert self.country.get_state_name('US', 'NY') == 'New York'
        assert self.country.get_state_name('US', 'XX') == ''
        assert self.country.get_states('ZZ') == {}

    def test_state_details(self):
        """Test the state details mapping."""
        assert self.country.get_state_details('us', 'CA') == {
            'name': 'California',
            'code': 'CA',
            'country_code': 'US',
        }
        assert self.country.get_state_details('US', 'ON') == {}


class TestCountries:
    """Test cases for country options."""

    def test_sorted_options(self):
        """Test options skip the placeholder and sort by label."""
        options = Countries(make_host()).get_options()

        assert [option['value'] for option in options] == ['CA', 'CI', 'US', 'AX']
        assert options[1]['label'] == 'Côte d&#x27;Ivoire'

    def test_repeatable(self):
        """Test unchanged host data gives identical output."""
        countries = Countries(make_host())
        assert countries.get_options(sort=True) == countries.get_options(sort=True)

    def test_unsorted_options(self):
        """Test the host order is kept when sorting is off."""
        options = Countries(make_host()).get_options(sort=False)
        assert [option['value'] for option in options] == ['US', 'CI', 'AX', 'CA']

    def test_no_countries(self):
        """Test an empty country list."""
        host = MagicMock()
        host.get_country_list.return_value = None
        assert Countries(host).get_options() == []


class TestRegions:
    """Test cases for grouped region options."""

    def test_grouped_options(self):
        """Test countries without states are skipped and groups are sorted."""
        groups = Regions(make_host()).get_options()

        assert [group['label'] for group in groups] == ['Canada', 'United States']
        assert groups[0]['options'] == [
            {'value': 'BC', 'label': 'British Columbia'},
            {'value': 'ON', 'label': 'Ontario'},
        ]
        assert [option['value'] for option in groups[1]['options']] == ['CA', 'NY']

    def test_repeatable(self):
        """Test unchanged host data gives identical groups."""
        regions = Regions(make_host())
        assert regions.get_options(sort=True) == regions.get_options(sort=True)

    def test_unsorted_groups(self):
        """Test host order when sorting is off."""
        groups = Regions(make_host()).get_options(sort=False)
        assert [group['label'] for group in groups] == ['United States', 'Canada']
        assert groups[0]['options'][0]['value'] == 'NY'

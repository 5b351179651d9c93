"""
Tests for submission field formatting.
"""
from datetime import datetime, timezone as dt_timezone

import pytest
from django.utils import formats

from touch.services.formatter import FieldFormatter, format_timestamp
from touch.services.options import OptionsProvider

from .conftest import epoch

LANGUAGES = [('en', 'English'), ('fr', 'French')]


@pytest.fixture
def formatter():
    return FieldFormatter(OptionsProvider(languages=LANGUAGES))


class TestLabels:

    def test_known_keys(self, formatter):
        assert formatter.label('mail') == 'Email address'
        assert formatter.label('timestamp') == 'Date'
        assert formatter.label('ip_address_proxy') == 'IP address (proxy)'
        assert formatter.label('delete_link') == 'Delete'

    def test_unknown_key(self, formatter):
        assert formatter.label('favourite_colour') is None


class TestValues:

    def test_plain_values_pass_through(self, formatter):
        assert formatter.value('name', 'Jane') == 'Jane'
        assert formatter.value('id', 7) == 7
        assert formatter.value('user_agent', 'Mozilla/5.0') == 'Mozilla/5.0'

    def test_mail_is_a_mailto_link(self, formatter):
        assert formatter.value('mail', 'jane@example.com') == (
            '<a href="mailto:jane@example.com">jane@example.com</a>'
        )

    def test_mail_is_escaped(self, formatter):
        assert '<b>' not in formatter.value('mail', '<b>@example.com')

    @pytest.mark.parametrize('value, expected', [
        (True, 'Yes'),
        (1, 'Yes'),
        ('1', 'Yes'),
        (False, 'No'),
        (0, 'No'),
        ('0', 'No'),
        ('maybe', ''),
        (None, ''),
    ])
    def test_newsletter(self, formatter, value, expected):
        assert formatter.value('newsletter', value) == expected

    def test_language_name(self, formatter):
        assert formatter.value('language', 'fr') == 'French'

    def test_unknown_language_shows_code(self, formatter):
        assert formatter.value('language', 'xx') == 'xx'

    def test_timestamp_short_date(self, formatter):
        moment = datetime(2024, 3, 5, 14, 30, tzinfo=dt_timezone.utc)

        assert formatter.value('timestamp', epoch(2024, 3, 5, 14, 30)) == (
            formats.date_format(moment, 'SHORT_DATETIME_FORMAT')
        )
        assert format_timestamp(str(epoch(2024, 3, 5, 14, 30))) == formatter.value(
            'timestamp', epoch(2024, 3, 5, 14, 30)
        )

    def test_user_agent_details_placeholder(self, formatter):
        assert formatter.value('browser', 'Mozilla/5.0').startswith('This value is coming soon')
        assert formatter.value('operating_system', '') == formatter.value('browser', '')

    def test_unknown_key(self, formatter):
        assert formatter.value('favourite_colour', 'blue') is None


@pytest.mark.django_db
class TestSubject:

    def test_live_subject_links_to_term(self, formatter, sales):
        value = formatter.value('subject', {'id': sales.id, 'name': 'Old sales name'})

        assert value == f'<a href="/api/taxonomy/terms/{sales.id}/">Sales</a>'

    def test_deleted_subject_shows_snapshot(self, formatter, sales):
        sales_id = sales.id
        sales.delete()

        assert formatter.value('subject', {'id': sales_id, 'name': 'Sales'}) == 'Sales'

    def test_unpublished_subject_shows_snapshot(self, formatter, sales):
        sales.status = False
        sales.save()

        assert formatter.value('subject', {'id': sales.id, 'name': 'Old sales name'}) == 'Old sales name'

    def test_no_subject(self, formatter):
        assert formatter.value('subject', {'id': 0, 'name': ''}) == ''
        assert formatter.value('subject', None) == ''

"""
Field Formatter

Maps submission keys to human labels and raw values to display strings.
"""

from datetime import datetime, timezone as dt_timezone

from django.utils import formats, timezone
from django.utils.html import format_html
from django.utils.translation import gettext, gettext_lazy as _


LABELS = {
    'id': _('ID'),
    'name': _('Name'),
    'mail': _('Email address'),
    'subject': _('Subject'),
    'message': _('Message'),
    'newsletter': _('Newsletter subscription'),
    'language': _('Language'),
    'timestamp': _('Date'),
    'ip_address': _('IP address'),
    'ip_address_proxy': _('IP address (proxy)'),
    'browser': _('Browser'),
    'operating_system': _('Operating system'),
    'user_agent': _('User agent'),
    'operations': _('Operations'),
    'canonical_link': _('View'),
    'edit_link': _('Edit'),
    'delete_link': _('Delete'),
}

PASSTHROUGH_KEYS = {'id', 'name', 'message', 'ip_address', 'ip_address_proxy', 'user_agent'}

# Values accepted for the newsletter opt-in
NEWSLETTER_YES = ('1', 1, True)
NEWSLETTER_NO = ('0', 0, False)


def format_timestamp(value) -> str:
    """Short date of an epoch timestamp in the active time zone."""
    moment = datetime.fromtimestamp(int(value), tz=dt_timezone.utc)
    return formats.date_format(timezone.localtime(moment), 'SHORT_DATETIME_FORMAT')


class FieldFormatter:
    """
    Formats submission fields for display.

    Args:
        options: Options provider used to resolve languages and live
            subject terms
    """

    def __init__(self, options):
        self.options = options

    def label(self, key):
        label = LABELS.get(key)
        return str(label) if label is not None else None

    def value(self, key, value):
        """
        Display value of a submission field.

        Returns:
            The display string, or None for an unknown key
        """
        if key in PASSTHROUGH_KEYS:
            return value

        if key == 'mail':
            return format_html('<a href="mailto:{}">{}</a>', value, value)

        if key == 'subject':
            return self._subject(value)

        if key == 'newsletter':
            if value in NEWSLETTER_YES:
                return gettext('Yes')
            if value in NEWSLETTER_NO:
                return gettext('No')
            return ''

        if key == 'language':
            return self.options.languages().get(value, value)

        if key == 'timestamp':
            return format_timestamp(value)

        if key in ('browser', 'operating_system'):
            return gettext('This value is coming soon as a compatible library version is about to be released.')

        return None

    def _subject(self, value):
        """Link to the published subject term, else the stored subject name."""
        value = value or {}

        if value.get('id'):
            term = self.options.load_subject(value['id'])

            if term is not None and term.is_published:
                return format_html('<a href="{}">{}</a>', term.get_absolute_url(), term.name)

        return value.get('name') or ''

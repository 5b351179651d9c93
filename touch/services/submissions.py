"""
Submission Admin Service

Presentation of stored submissions for the admin screens: sortable list,
detail record, edit form and delete confirmation. Data access goes through
the submission store and every display value through the field formatter.
"""

from datetime import datetime, timezone as dt_timezone

from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext
import logging
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


# ==============================================================================
# LIST TABLE
# ==============================================================================

LIST_COLUMNS = ('id', 'name', 'mail', 'subject', 'language', 'timestamp', 'operations')
SORTABLE_COLUMNS = ('name', 'mail', 'subject', 'language', 'timestamp')
DEFAULT_ORDER = 'timestamp'
DEFAULT_SORT = 'desc'

# Detail rows, in display order
DETAIL_KEYS = (
    'id',
    'name',
    'mail',
    'subject',
    'message',
    'newsletter',
    'language',
    'timestamp',
    'ip_address',
    'ip_address_proxy',
    'browser',
    'operating_system',
    'user_agent',
)

DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def table_sort(order: Optional[str], sort: Optional[str]) -> Tuple[str, str]:
    """
    Resolve the requested column and direction.

    Unknown columns fall back to the default one. Without an explicit
    direction the default column sorts descending and the others ascending.
    """
    if order not in SORTABLE_COLUMNS:
        order = DEFAULT_ORDER

    if sort not in ('asc', 'desc'):
        sort = DEFAULT_SORT if order == DEFAULT_ORDER else 'asc'

    return order, sort


def sort_rows(rows: List[Dict[str, Any]], order: str, sort: str) -> List[Dict[str, Any]]:
    """Sort rows on the formatted value of a column."""
    return sorted(
        rows,
        key=lambda row: '' if row[order] is None else str(row[order]),
        reverse=(sort == 'desc'),
    )


class SubmissionAdminService:
    """
    Builds the admin views of submissions.

    Args:
        store: Submission store
        options: Options provider
        formatter: Field formatter
    """

    def __init__(self, store, options, formatter):
        self.store = store
        self.options = options
        self.formatter = formatter

    def get(self, submission_id) -> Optional[Dict[str, Any]]:
        """Stored submission by id, or None."""
        submissions = self.store.select([submission_id])
        return submissions[0] if submissions else None

    def title_arguments(self, submission) -> Dict[str, Any]:
        return {
            'name': self.formatter.value('name', submission['name']),
            'date': self.formatter.value('timestamp', submission['timestamp']),
        }

    def title(self, submission) -> str:
        return gettext('Submission by %(name)s on %(date)s') % self.title_arguments(submission)

    def links(self, submission) -> List[Dict[str, str]]:
        kwargs = {'pk': submission['id']}

        return [
            {
                'key': 'canonical',
                'title': self.formatter.label('canonical_link'),
                'url': reverse('touch_admin:submission-detail', kwargs=kwargs),
            },
            {
                'key': 'edit',
                'title': self.formatter.label('edit_link'),
                'url': reverse('touch_admin:submission-edit', kwargs=kwargs),
            },
            {
                'key': 'delete',
                'title': self.formatter.label('delete_link'),
                'url': reverse('touch_admin:submission-delete', kwargs=kwargs),
            },
        ]

    # ==========================================================================
    # LIST
    # ==========================================================================

    def row(self, submission) -> Dict[str, Any]:
        subject = {'id': submission['subject_id'], 'name': submission['subject_name']}

        return {
            'id': self.formatter.value('id', submission['id']),
            'name': self.formatter.value('name', submission['name']),
            'mail': self.formatter.value('mail', submission['mail']),
            'subject': self.formatter.value('subject', subject),
            'language': self.formatter.value('language', submission['language']),
            'timestamp': self.formatter.value('timestamp', submission['timestamp']),
            'operations': self.links(submission),
        }

    def list(self, order: Optional[str] = None, sort: Optional[str] = None) -> Dict[str, Any]:
        """
        Table of every submission.

        Rows are fetched once and sorted in memory on their display values.
        """
        order, sort = table_sort(order, sort)

        rows = [self.row(submission) for submission in self.store.select()]

        header = [
            {
                'key': key,
                'label': self.formatter.label(key),
                'sortable': key in SORTABLE_COLUMNS,
                'active': key == order,
                'sort': sort if key == order else None,
            }
            for key in LIST_COLUMNS
        ]

        return {
            'header': header,
            'rows': sort_rows(rows, order, sort),
            'order': order,
            'sort': sort,
        }

    # ==========================================================================
    # DETAIL
    # ==========================================================================

    def record(self, submission) -> Dict[str, Any]:
        """Submission reshaped in display order with its derived fields."""
        derived = {
            'subject': {'id': submission['subject_id'], 'name': submission['subject_name']},
            'browser': submission['user_agent'],
            'operating_system': submission['user_agent'],
        }

        return {key: derived[key] if key in derived else submission[key] for key in DETAIL_KEYS}

    def detail(self, submission) -> Dict[str, Any]:
        rows = [
            {
                'key': key,
                'label': self.formatter.label(key),
                'value': self.formatter.value(key, value),
            }
            for key, value in self.record(submission).items()
        ]

        return {
            'id': submission['id'],
            'title': self.title(submission),
            'rows': rows,
            'operations': self.links(submission),
        }

    # ==========================================================================
    # EDIT
    # ==========================================================================

    def subjects(self) -> Dict[int, Dict[str, Any]]:
        return self.options.subjects_information(self.options.subject_entities())

    @staticmethod
    def subject_names(subjects) -> Dict[int, str]:
        return {subject_id: subject['name'] for subject_id, subject in subjects.items() if subject['name']}

    def subject_control(self, submission, subjects) -> str:
        """
        'select' while the submission's subject still exists, else 'text'
        for a free-text subject name.
        """
        return 'select' if submission['subject_id'] in self.subject_names(subjects) else 'text'

    @staticmethod
    def local_datetime(timestamp) -> str:
        moment = datetime.fromtimestamp(int(timestamp), tz=dt_timezone.utc)
        return timezone.localtime(moment).strftime(DATETIME_FORMAT)

    def edit_form(self, submission, subjects) -> Dict[str, Any]:
        control = self.subject_control(submission, subjects)
        label = self.formatter.label

        fields = {
            'name': {'type': 'textfield', 'label': label('name'), 'required': True,
                     'max_length': 255, 'value': submission['name']},
            'mail': {'type': 'email', 'label': label('mail'), 'required': True,
                     'max_length': 254, 'value': submission['mail']},
            'subject_id': {
                'type': 'select',
                'label': label('subject'),
                'options': [
                    {'value': subject_id, 'label': name}
                    for subject_id, name in self.subject_names(subjects).items()
                ],
                'required': True,
                'access': control == 'select',
                'value': submission['subject_id'] or None,
            },
        }

        if control == 'text':
            fields['subject_name'] = {
                'type': 'textfield',
                'label': label('subject'),
                'required': True,
                'value': submission['subject_name'],
            }

        fields.update({
            'message': {'type': 'textarea', 'label': label('message'), 'required': True,
                        'value': submission['message']},
            'newsletter': {'type': 'checkbox', 'label': label('newsletter'),
                           'value': bool(submission['newsletter'])},
            'language': {
                'type': 'select',
                'label': label('language'),
                'options': [
                    {'value': code, 'label': name}
                    for code, name in self.options.languages().items()
                ],
                'required': True,
                'value': submission['language'],
            },
            'datetime': {'type': 'datetime', 'label': label('timestamp'), 'required': True,
                         'format': 'Y-m-d H:i:s', 'value': self.local_datetime(submission['timestamp'])},
            'ip_address': {'type': 'textfield', 'label': label('ip_address'), 'disabled': True,
                           'value': submission['ip_address']},
            'ip_address_proxy': {'type': 'textfield', 'label': label('ip_address_proxy'), 'disabled': True,
                                 'value': submission['ip_address_proxy']},
            'user_agent': {'type': 'textarea', 'label': label('user_agent'), 'disabled': True,
                           'value': submission['user_agent']},
        })

        return {
            'form_id': 'touch_submission_edit_form',
            'title': self.title(submission),
            'subject_control': control,
            'fields': fields,
            'operations': self.links(submission),
        }

    def prepare_update(self, submission, subjects, values) -> Dict[str, Any]:
        """
        Turn validated edit values into an update of the submission.

        The subject id is kept when edited as free text. A blank subject
        name is snapshotted again from the current subject.
        """
        if self.subject_control(submission, subjects) == 'select':
            subject_id = values['subject_id']
            subject_name = ''
        else:
            subject_id = submission['subject_id']
            subject_name = values.get('subject_name', '')

        if not subject_name:
            subject = subjects.get(subject_id) or {}
            subject_name = subject.get('name') or submission['subject_name']

        return {
            'id': submission['id'],
            'name': values['name'],
            'mail': values['mail'],
            'subject_id': subject_id,
            'subject_name': subject_name,
            'message': values['message'],
            'newsletter': bool(values.get('newsletter', False)),
            'language': values['language'],
            'timestamp': int(values['datetime'].timestamp()),
        }

    def save(self, submission, subjects, values) -> Tuple[bool, str]:
        """
        Update the submission.

        Returns:
            (saved, message)
        """
        updated = self.store.update([self.prepare_update(submission, subjects, values)])

        if updated > 0:
            message = gettext('The submission by %(name)s on %(date)s has been successfully saved.') % (
                self.title_arguments(submission)
            )
            return True, message

        return False, gettext('The submission could not be saved.')

    # ==========================================================================
    # DELETE
    # ==========================================================================

    def delete_confirmation(self, submission) -> Dict[str, Any]:
        return {
            'id': submission['id'],
            'question': gettext('Are you sure you want to delete the submission by %(name)s on %(date)s?') % (
                self.title_arguments(submission)
            ),
            'description': gettext('This action cannot be undone.'),
            'confirm_text': self.formatter.label('delete_link'),
            'cancel_url': reverse('touch_admin:submission-detail', kwargs={'pk': submission['id']}),
        }

    def delete(self, submission) -> Tuple[int, str]:
        """
        Delete the submission.

        Returns:
            (deleted count, acknowledgment message)
        """
        deleted = self.store.delete([submission['id']])

        message = gettext('The submission by %(name)s on %(date)s has been deleted.') % (
            self.title_arguments(submission)
        )
        logger.info(message)

        return deleted, message

"""
Contact Form Controller

Builds the public contact form, refreshes the subject description and
handles a validated submission:
1. Enrich the values (subject snapshot, language, time, request metadata)
2. Store the submission
3. Email it to the subject's address, or the site address
4. Acknowledge only when both the store and the email succeeded

Every method takes the subjects it works on and returns new data; nothing
is kept on the controller between calls.
"""

from django.utils import timezone
from django.utils.translation import gettext
import logging
from typing import Any, Dict, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


NAME_MAX_LENGTH = 255
MAIL_MAX_LENGTH = 254


class SubmitResult(NamedTuple):
    success: bool
    submission: Dict[str, Any]
    form: Dict[str, Any]


class ContactFormController:
    """
    Contact form orchestration.

    Args:
        store: Submission store
        options: Options provider
        mailer: Submission mailer
        site_mail: Address used when the subject has none
        clock: Callable returning the current aware datetime
    """

    form_id = 'touch_contact_form'

    def __init__(self, store, options, mailer, site_mail, clock=timezone.now):
        self.store = store
        self.options = options
        self.mailer = mailer
        self.site_mail = site_mail
        self.clock = clock

    def subjects(self, preselected=None) -> Dict[int, Dict[str, Any]]:
        """Subjects information for the preselected terms, or all subjects."""
        return self.options.subjects_information(self.options.subject_entities(preselected))

    @staticmethod
    def subject_names(subjects) -> Dict[int, str]:
        return {subject_id: subject['name'] for subject_id, subject in subjects.items() if subject['name']}

    def subject_choice_visible(self, subjects) -> bool:
        return len(self.subject_names(subjects)) >= 2

    def default_subject(self, subjects) -> Optional[int]:
        """
        Value forced on a hidden subject control.

        The sole subject when there is one, 0 when there is none, None when
        the submitter has to choose.
        """
        names = self.subject_names(subjects)

        if len(names) == 1:
            return int(next(iter(names)))
        if not names:
            return 0
        return None

    def describe_subject(self, subjects, subject_id) -> str:
        """Description of the selected subject ('' when unknown)."""
        try:
            subject_id = int(subject_id)
        except (TypeError, ValueError):
            return ''

        subject = subjects.get(subject_id)
        return subject['description'] if subject else ''

    def build(self, subjects, values=None, errors=None, messages: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Form definition for the frontend.

        Args:
            subjects: Subjects information
            values: Submitted values to show again (pristine form if None)
            errors: Field errors to show inline
            messages: Status messages to show above the submit button
        """
        values = values or {}
        errors = errors or {}

        visible = self.subject_choice_visible(subjects)
        default_subject = self.default_subject(subjects)
        subject_value = values.get('subject') if visible else default_subject

        fields = {
            'name': {
                'type': 'textfield',
                'label': gettext('My name is'),
                'placeholder': gettext('Complete name'),
                'required': True,
                'max_length': NAME_MAX_LENGTH,
                'value': values.get('name', ''),
            },
            'mail': {
                'type': 'email',
                'label': gettext("I'm reachable at"),
                'placeholder': gettext('Email address'),
                'required': True,
                'max_length': MAIL_MAX_LENGTH,
                'value': values.get('mail', ''),
            },
            'subject': {
                'type': 'select',
                'label': gettext('I write to you about'),
                'options': [
                    {'value': subject_id, 'label': name}
                    for subject_id, name in self.subject_names(subjects).items()
                ],
                'required': True,
                'access': visible,
                'value': subject_value,
                'description': self.describe_subject(subjects, values.get('subject')),
            },
            'message': {
                'type': 'textarea',
                'label': gettext('I also have some details'),
                'placeholder': gettext('Message'),
                'required': True,
                'value': values.get('message', ''),
            },
            'newsletter': {
                'type': 'checkbox',
                'label': gettext('I would like to receive occasional news'),
                'value': bool(values.get('newsletter', False)),
            },
        }

        for field_name, field_errors in errors.items():
            if field_name in fields:
                fields[field_name]['errors'] = [str(error) for error in field_errors]

        return {
            'form_id': self.form_id,
            'fields': fields,
            'messages': {'status': list(messages or [])},
            'submit': gettext('Send'),
        }

    def prepare(self, subjects, values, metadata) -> Dict[str, Any]:
        """
        Enrich validated values into a storable submission.

        Args:
            subjects: Subjects information
            values: Validated form values
            metadata: Request metadata (ip_address, ip_address_proxy,
                user_agent)
        """
        subject_id = int(values.get('subject') or 0)
        subject = subjects.get(subject_id) or {}

        return {
            'name': values['name'],
            'mail': values['mail'],
            'subject_id': subject_id,
            'subject_name': subject.get('name') or gettext('Undefined subject'),
            'message': values['message'],
            'newsletter': bool(values.get('newsletter', False)),
            'language': self.options.current_language(),
            'timestamp': int(self.clock().timestamp()),
            'ip_address': metadata.get('ip_address') or '',
            'ip_address_proxy': metadata.get('ip_address_proxy') or '',
            'user_agent': metadata.get('user_agent') or '',
        }

    def recipient(self, subjects, subject_id) -> str:
        subject = subjects.get(subject_id) or {}
        return subject.get('mail') or self.site_mail

    def submit(self, subjects, values, metadata) -> SubmitResult:
        """
        Store and send a validated submission.

        Returns:
            SubmitResult. On success the form is pristine and carries the
            acknowledgment; otherwise it shows the submitted values again.
        """
        submission = self.prepare(subjects, values, metadata)

        submission_id = self.store.insert([submission])
        stored = submission_id > 0

        sent = self.mailer.send(submission, self.recipient(subjects, submission['subject_id']))

        if stored and sent:
            logger.info(f"Contact submission {submission_id} stored and sent for subject {submission['subject_id']}")

            form = self.build(subjects, messages=[
                gettext("Thank you for contacting me, I'll reach back to you shortly."),
            ])
            return SubmitResult(True, {**submission, 'id': submission_id}, form)

        logger.warning(
            f"Contact submission not acknowledged (stored={stored}, sent={sent}) "
            f"for subject {submission['subject_id']}"
        )

        return SubmitResult(False, submission, self.build(subjects, values=values))

"""
Touch Serializers

Validation of the public contact form and of the admin edit form.
"""
from rest_framework import serializers
from django.utils.html import strip_tags

from .services.contact_form import MAIL_MAX_LENGTH, NAME_MAX_LENGTH
from .services.submissions import DATETIME_FORMAT


def _subject_choices(subjects):
    return [(subject_id, subject['name']) for subject_id, subject in subjects.items() if subject['name']]


def _sanitize(value):
    cleaned = strip_tags(value).strip()
    if not cleaned:
        raise serializers.ValidationError("This field may not be blank.")
    return cleaned


class ContactFormSubmitSerializer(serializers.Serializer):
    """
    Public contact form submission.

    The subject is only asked for when there are at least two subjects to
    choose from; otherwise the sole subject (or 0) is used.
    """

    name = serializers.CharField(
        max_length=NAME_MAX_LENGTH,
        required=True
    )

    mail = serializers.EmailField(
        max_length=MAIL_MAX_LENGTH,
        required=True
    )

    subject = serializers.ChoiceField(
        choices=[],
        required=True
    )

    message = serializers.CharField(
        required=True
    )

    newsletter = serializers.BooleanField(
        required=False,
        default=False
    )

    def __init__(self, *args, subjects=None, default_subject=0, **kwargs):
        super().__init__(*args, **kwargs)

        choices = _subject_choices(subjects or {})
        self.default_subject = default_subject

        if len(choices) >= 2:
            self.fields['subject'].choices = choices
        else:
            self.fields.pop('subject')

    def validate_name(self, value):
        """Sanitize name field."""
        return _sanitize(value)

    def validate_message(self, value):
        """Sanitize message field."""
        return _sanitize(value)

    def validate_mail(self, value):
        return value.strip()

    def validate(self, attrs):
        if 'subject' not in self.fields:
            attrs['subject'] = self.default_subject
        return attrs


class SubmissionEditSerializer(serializers.Serializer):
    """
    Admin edit of a stored submission.

    While the submission's subject exists it is chosen from the subjects
    ("subject_id"); otherwise its name is edited as free text
    ("subject_name"). Request metadata is never edited.
    """

    name = serializers.CharField(max_length=NAME_MAX_LENGTH)

    mail = serializers.EmailField(max_length=MAIL_MAX_LENGTH)

    subject_id = serializers.ChoiceField(choices=[])

    subject_name = serializers.CharField(max_length=255)

    message = serializers.CharField()

    newsletter = serializers.BooleanField(required=False, default=False)

    language = serializers.ChoiceField(choices=[])

    datetime = serializers.DateTimeField(input_formats=[DATETIME_FORMAT, 'iso-8601'])

    def __init__(self, *args, subjects=None, languages=None, subject_control='select', **kwargs):
        super().__init__(*args, **kwargs)

        self.fields['language'].choices = list((languages or {}).items())

        if subject_control == 'select':
            self.fields['subject_id'].choices = _subject_choices(subjects or {})
            self.fields.pop('subject_name')
        else:
            self.fields.pop('subject_id')

    def validate_name(self, value):
        return _sanitize(value)

    def validate_message(self, value):
        return _sanitize(value)

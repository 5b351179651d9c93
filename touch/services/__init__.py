"""
Touch Services

Factories assembling the contact form components. Views build what they
need here instead of reaching for globals, and tests pass their own
collaborators to the constructors.
"""

from django.conf import settings

from .contact_form import ContactFormController
from .formatter import FieldFormatter
from .mailer import SubmissionMailer
from .options import OptionsProvider
from .store import SubmissionStore
from .submissions import SubmissionAdminService


def build_options():
    return OptionsProvider(vocabulary=settings.TOUCH_SUBJECT_VOCABULARY)


def build_contact_form(store=None, options=None, mailer=None):
    options = options or build_options()
    formatter = FieldFormatter(options)

    return ContactFormController(
        store=store or SubmissionStore(),
        options=options,
        mailer=mailer or SubmissionMailer(formatter, from_email=settings.TOUCH_EMAIL_FROM),
        site_mail=settings.TOUCH_SITE_MAIL,
    )


def build_submission_admin(store=None, options=None):
    options = options or build_options()

    return SubmissionAdminService(
        store=store or SubmissionStore(),
        options=options,
        formatter=FieldFormatter(options),
    )


__all__ = [
    'ContactFormController',
    'FieldFormatter',
    'OptionsProvider',
    'SubmissionAdminService',
    'SubmissionMailer',
    'SubmissionStore',
    'build_contact_form',
    'build_options',
    'build_submission_admin',
]

"""
Submission Mailer

Sends a contact form submission by email. Mail goes out inside the request
because the contact form only acknowledges a submission once it was sent.
"""

from smtplib import SMTPException

from django.conf import settings
from django.core.mail import BadHeaderError, EmailMultiAlternatives
from django.template import TemplateDoesNotExist
from django.template.loader import render_to_string
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class SubmissionMailer:
    """
    Builds and sends the submission email.

    Args:
        formatter: Field formatter used for labels and display values
        from_email: Sender address
    """

    template_name = 'touch/emails/contact_form.html'

    def __init__(self, formatter, from_email=None):
        self.formatter = formatter
        self.from_email = from_email or getattr(settings, 'TOUCH_EMAIL_FROM', settings.DEFAULT_FROM_EMAIL)

    def send(self, submission: Dict[str, Any], recipient: str) -> bool:
        """
        Send the submission to the recipient, replying to the submitter.

        Returns:
            True if the message was handed to the email backend
        """
        subject = f"[{submission['subject_name']}] {submission['name']}"
        rows = self.rows(submission)

        text_content = "\n".join(f"{label}: {value}" for label, value in rows)
        text_content += f"\n\n{self.formatter.label('message')}:\n{submission['message']}\n"

        try:
            html_content = render_to_string(self.template_name, {
                'rows': rows,
                'submission': submission,
                'message_label': self.formatter.label('message'),
            })
        except TemplateDoesNotExist:
            html_content = None

        email = EmailMultiAlternatives(
            subject=subject,
            body=text_content,
            from_email=self.from_email,
            to=[recipient],
            reply_to=[submission['mail']],
        )

        if html_content:
            email.attach_alternative(html_content, "text/html")

        try:
            sent = email.send(fail_silently=False)
        except (SMTPException, BadHeaderError, OSError) as exc:
            logger.error(f"Failed to send submission from {submission['mail']} to {recipient}: {exc}")
            return False

        return sent == 1

    def rows(self, submission):
        """Label/value pairs shown in the email, message excluded."""
        return [
            (self.formatter.label('name'), submission['name']),
            (self.formatter.label('mail'), submission['mail']),
            (self.formatter.label('subject'), submission['subject_name']),
            (self.formatter.label('newsletter'), self.formatter.value('newsletter', submission['newsletter'])),
            (self.formatter.label('language'), self.formatter.value('language', submission['language'])),
            (self.formatter.label('timestamp'), self.formatter.value('timestamp', submission['timestamp'])),
        ]

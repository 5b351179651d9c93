"""
Touch Models

Database schema for contact form submissions.
"""
from django.db import models


class Submission(models.Model):
    """
    One contact form post.

    The subject is kept as an id plus a name snapshot, so a submission
    still reads correctly after its taxonomy term is deleted.
    """

    id = models.BigAutoField(primary_key=True)

    # Contact Information
    name = models.CharField(
        max_length=255,
        help_text="Name of the person contacting us"
    )

    mail = models.EmailField(
        max_length=254,
        help_text="Email address for follow-up"
    )

    # Subject reference (no foreign key, terms are owned by the taxonomy app)
    subject_id = models.PositiveBigIntegerField(
        default=0,
        db_index=True,
        help_text="Taxonomy term id of the subject at submission time"
    )

    subject_name = models.CharField(
        max_length=255,
        help_text="Subject name at submission time"
    )

    message = models.TextField()

    newsletter = models.BooleanField(
        default=False,
        help_text="Newsletter opt-in"
    )

    language = models.CharField(
        max_length=12,
        help_text="Submitter's language code"
    )

    timestamp = models.PositiveBigIntegerField(
        db_index=True,
        help_text="Submission time (epoch seconds)"
    )

    # Security and Tracking
    ip_address = models.CharField(
        max_length=45,
        blank=True,
        default=''
    )

    ip_address_proxy = models.CharField(
        max_length=255,
        blank=True,
        default='',
        help_text="X-Forwarded-For header"
    )

    user_agent = models.TextField(
        blank=True,
        default=''
    )

    class Meta:
        db_table = 'submissions'
        ordering = ['-timestamp']
        verbose_name = 'Submission'
        verbose_name_plural = 'Submissions'

    def __str__(self):
        return f"{self.name} - {self.subject_name}"

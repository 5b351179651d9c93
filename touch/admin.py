"""
Touch Django Admin Configuration
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Submission
from .services.formatter import format_timestamp


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    """Admin interface for contact form submissions."""

    list_display = [
        'id', 'name', 'email_link', 'subject_name', 'language', 'submitted_at'
    ]

    list_filter = [
        'language', 'newsletter', 'subject_name'
    ]

    search_fields = [
        'name', 'mail', 'message', 'subject_name'
    ]

    readonly_fields = [
        'id', 'ip_address', 'ip_address_proxy', 'user_agent'
    ]

    fieldsets = (
        ('Submission', {
            'fields': ('id', 'name', 'mail', 'subject_id', 'subject_name', 'message')
        }),
        ('Preferences', {
            'fields': ('newsletter', 'language', 'timestamp')
        }),
        ('Request', {
            'fields': ('ip_address', 'ip_address_proxy', 'user_agent'),
            'classes': ('collapse',)
        }),
    )

    def email_link(self, obj):
        return format_html('<a href="mailto:{}">{}</a>', obj.mail, obj.mail)
    email_link.short_description = 'Email'

    def submitted_at(self, obj):
        """Submission time in the site's short date format."""
        return format_timestamp(obj.timestamp)
    submitted_at.short_description = 'Date'
    submitted_at.admin_order_field = 'timestamp'

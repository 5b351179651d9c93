from django.apps import AppConfig


class TouchConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'touch'
    verbose_name = 'Contact Form Submissions'

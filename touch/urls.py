"""
Touch Public URL Configuration
"""
from django.urls import path
from .views import (
    ContactFormView,
    ContactFormSubjectView,
    ContactFormSubmitView,
)

app_name = 'touch'

# Public URLs (no auth required)
urlpatterns = [
    path('contact-form/', ContactFormView.as_view(), name='contact-form'),
    path('contact-form/subject/', ContactFormSubjectView.as_view(), name='contact-form-subject'),
    path('contact-form/submit/', ContactFormSubmitView.as_view(), name='contact-form-submit'),
]

"""
Touch Admin URL Configuration

Separate admin URLs for submission management.
"""
from django.urls import path
from .views import (
    SubmissionListView,
    SubmissionDetailView,
    SubmissionEditView,
    SubmissionDeleteView,
)

app_name = 'touch_admin'

urlpatterns = [
    path('submissions/', SubmissionListView.as_view(), name='submission-list'),
    path('submissions/<int:pk>/', SubmissionDetailView.as_view(), name='submission-detail'),
    path('submissions/<int:pk>/edit/', SubmissionEditView.as_view(), name='submission-edit'),
    path('submissions/<int:pk>/delete/', SubmissionDeleteView.as_view(), name='submission-delete'),
]

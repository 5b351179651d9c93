"""
Taxonomy Public URLs
"""
from django.urls import path
from . import views

app_name = 'taxonomy'

urlpatterns = [
    path('terms/<int:pk>/', views.PublicTermView.as_view(), name='term-detail'),
]

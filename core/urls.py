"""
URL configuration for the Touch contact form backend.

Public contact form under api/touch/, submission admin under
api/admin/touch/, subject terms under api/taxonomy/.
"""
from django.contrib import admin
from django.urls import path, include
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/touch/', include('touch.urls')),  # Public contact form (no auth)
    path('api/admin/touch/', include('touch.admin_urls')),  # Submission management
    path('api/taxonomy/', include('taxonomy.urls')),  # Canonical subject terms
]

"""
Taxonomy Views
"""
from django.utils import translation
from rest_framework import generics
from rest_framework.permissions import AllowAny

from .models import Term
from .serializers import TermPublicSerializer


class PublicTermView(generics.RetrieveAPIView):
    """
    Canonical page of a published term.

    GET /api/taxonomy/terms/:id/

    No authentication required.
    """

    queryset = (
        Term.objects.filter(status=True)
        .select_related('vocabulary')
        .prefetch_related('translations')
    )
    serializer_class = TermPublicSerializer
    permission_classes = [AllowAny]

    def get_object(self):
        """Get the term in the active language when translated."""
        term = super().get_object()
        return term.get_translation(translation.get_language())

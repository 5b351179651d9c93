"""
Taxonomy Serializers
"""
from rest_framework import serializers
from .models import Term


class TermPublicSerializer(serializers.ModelSerializer):
    """Public view of a published term, in the requested language."""

    vocabulary = serializers.CharField(source='vocabulary.vid', read_only=True)

    class Meta:
        model = Term
        fields = ['id', 'vocabulary', 'name', 'description', 'weight', 'language']
        read_only_fields = fields

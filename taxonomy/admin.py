"""
Taxonomy Django Admin Configuration
"""
from django.contrib import admin
from .models import Vocabulary, Term, TermTranslation


@admin.register(Vocabulary)
class VocabularyAdmin(admin.ModelAdmin):
    list_display = ['name', 'vid', 'has_mail_field']
    search_fields = ['name', 'vid']


class TermTranslationInline(admin.TabularInline):
    model = TermTranslation
    extra = 0


@admin.register(Term)
class TermAdmin(admin.ModelAdmin):
    list_display = ['name', 'vocabulary', 'weight', 'mail', 'status', 'updated_at']
    list_filter = ['vocabulary', 'status', 'language']
    search_fields = ['name', 'description', 'mail']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [TermTranslationInline]

    fieldsets = (
        ('Term', {
            'fields': ('vocabulary', 'name', 'description', 'language')
        }),
        ('Contact', {
            'fields': ('mail',)
        }),
        ('Publishing', {
            'fields': ('status', 'weight')
        }),
        ('Audit', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

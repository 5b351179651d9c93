"""
Taxonomy Models

Vocabularies and terms used to categorise site content. The contact form
reads its subjects from the "contact_subjects" vocabulary.
"""
import copy

from django.db import models
from django.urls import reverse


class Vocabulary(models.Model):
    """
    A named group of taxonomy terms.

    Vocabularies decide which optional fields their terms expose.
    """

    vid = models.SlugField(
        max_length=32,
        unique=True,
        help_text="Machine name (e.g., 'contact_subjects')"
    )

    name = models.CharField(
        max_length=255,
        help_text="Human readable vocabulary name"
    )

    description = models.TextField(
        blank=True,
        default=''
    )

    has_mail_field = models.BooleanField(
        default=False,
        help_text="Whether terms of this vocabulary expose an email address"
    )

    class Meta:
        db_table = 'taxonomy_vocabulary'
        ordering = ['name']
        verbose_name = 'Vocabulary'
        verbose_name_plural = 'Vocabularies'

    def __str__(self):
        return self.name


class Term(models.Model):
    """
    A taxonomy term.

    Terms of a mail-enabled vocabulary carry a routing email address, which
    is how contact subjects decide where submissions are sent.
    """

    vocabulary = models.ForeignKey(
        Vocabulary,
        on_delete=models.CASCADE,
        related_name='terms',
        help_text="Vocabulary this term belongs to"
    )

    name = models.CharField(max_length=255)

    description = models.TextField(
        blank=True,
        default=''
    )

    weight = models.IntegerField(
        default=0,
        help_text="Terms with lower weights are listed first"
    )

    mail = models.EmailField(
        max_length=254,
        blank=True,
        default='',
        help_text="Routing email address"
    )

    status = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Published"
    )

    language = models.CharField(
        max_length=12,
        default='en',
        help_text="Language code of the source values"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'taxonomy_term'
        ordering = ['weight', 'name']
        verbose_name = 'Term'
        verbose_name_plural = 'Terms'
        indexes = [
            models.Index(fields=['vocabulary', 'status'], name='taxonomy_term_vocab_status_idx'),
        ]

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('taxonomy:term-detail', kwargs={'pk': self.pk})

    @property
    def is_published(self):
        return self.status

    def has_field(self, field_name):
        """Whether the term's vocabulary exposes the given optional field."""
        if field_name == 'mail':
            return self.vocabulary.has_mail_field
        return field_name in {'name', 'description', 'weight'}

    def has_translation(self, language):
        if language == self.language:
            return True
        return any(t.language == language for t in self.translations.all())

    def get_translation(self, language):
        """
        Return a copy of the term carrying the values of the given language.

        The source term is returned untouched when the language is its own
        or when no translation exists.
        """
        if language == self.language:
            return self

        for translation in self.translations.all():
            if translation.language == language:
                translated = copy.copy(self)
                translated.name = translation.name
                translated.description = translation.description
                translated.language = language
                return translated

        return self


class TermTranslation(models.Model):
    """Per-language name and description of a term."""

    term = models.ForeignKey(
        Term,
        on_delete=models.CASCADE,
        related_name='translations'
    )

    language = models.CharField(max_length=12)

    name = models.CharField(max_length=255)

    description = models.TextField(
        blank=True,
        default=''
    )

    class Meta:
        db_table = 'taxonomy_term_translation'
        unique_together = [['term', 'language']]
        verbose_name = 'Term Translation'
        verbose_name_plural = 'Term Translations'

    def __str__(self):
        return f"{self.term} ({self.language})"

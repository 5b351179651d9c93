"""
Options Provider

Resolves the contact subjects (taxonomy terms) and the language catalog
used by the contact form and the submission screens.
"""

from django.conf import settings
from django.utils import translation
import logging
from typing import Any, Dict, Iterable, List, Optional

from taxonomy.models import Term

logger = logging.getLogger(__name__)


class OptionsProvider:
    """Subjects and languages for the contact form."""

    def __init__(self, vocabulary: Optional[str] = None, languages=None):
        self.vocabulary = vocabulary or getattr(settings, 'TOUCH_SUBJECT_VOCABULARY', 'contact_subjects')
        self._languages = languages if languages is not None else settings.LANGUAGES

    def languages(self) -> Dict[str, str]:
        """All configured languages, keyed by language code."""
        return {code: str(name) for code, name in self._languages}

    def current_language(self) -> str:
        return translation.get_language() or settings.LANGUAGE_CODE

    def subject_entities(self, preselected: Optional[Iterable[Any]] = None) -> List[Term]:
        """
        Get the subject terms to offer.

        Args:
            preselected: Terms chosen by the page embedding the form. Only
                published terms of the subject vocabulary are kept.

        Returns:
            The kept terms, or every published subject term when none were
            kept, each in the current language when translated
        """
        subjects = [
            entity for entity in (preselected or [])
            if isinstance(entity, Term)
            and entity.vocabulary.vid == self.vocabulary
            and entity.is_published
        ]

        if not subjects:
            try:
                subjects = list(
                    Term.objects.filter(vocabulary__vid=self.vocabulary, status=True)
                    .select_related('vocabulary')
                    .prefetch_related('translations')
                )
            except Exception as exc:
                logger.error(f"Failed to load contact subjects: {exc}")
                subjects = []

        language = self.current_language()

        return [
            subject.get_translation(language) if subject.has_translation(language) else subject
            for subject in subjects
        ]

    def terms(self, ids: Iterable[int]) -> List[Term]:
        """Load terms by id, e.g. the subjects chosen by an embedding page."""
        ids = list(ids)
        if not ids:
            return []

        try:
            return list(
                Term.objects.filter(pk__in=ids)
                .select_related('vocabulary')
                .prefetch_related('translations')
            )
        except Exception as exc:
            logger.error(f"Failed to load terms {ids}: {exc}")
            return []

    def subjects_information(self, entities: Iterable[Any]) -> Dict[int, Dict[str, Any]]:
        """
        Project subject terms to plain dicts keyed by term id.

        Terms are sorted by name, then by weight, so weight decides the
        order and the name only breaks ties.
        """
        subjects = [
            {
                'id': entity.id,
                'name': entity.name,
                'description': entity.description,
                'weight': entity.weight,
                'mail': entity.mail or '',
            }
            for entity in entities
            if isinstance(entity, Term) and entity.has_field('mail')
        ]

        subjects.sort(key=lambda subject: subject['name'].lower())
        subjects.sort(key=lambda subject: subject['weight'])

        return {subject['id']: subject for subject in subjects}

    def load_subject(self, subject_id) -> Optional[Term]:
        """Get the live subject term in the current language, or None."""
        try:
            term = (
                Term.objects.select_related('vocabulary')
                .prefetch_related('translations')
                .get(pk=subject_id)
            )
        except Term.DoesNotExist:
            logger.info(f"Subject {subject_id} no longer exists")
            return None
        except Exception as exc:
            logger.error(f"Failed to load subject {subject_id}: {exc}")
            return None

        return term.get_translation(self.current_language())

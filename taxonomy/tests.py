"""
Tests for taxonomy terms.
"""
import pytest
from django.utils import translation
from rest_framework import status
from rest_framework.test import APIClient

from taxonomy.models import Term, TermTranslation, Vocabulary

pytestmark = pytest.mark.django_db


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def vocabulary():
    return Vocabulary.objects.create(vid='contact_subjects', name='Contact subjects', has_mail_field=True)


@pytest.fixture
def term(vocabulary):
    term = Term.objects.create(
        vocabulary=vocabulary,
        name='Sales',
        description='Quotes and pricing',
        mail='sales@example.com'
    )
    TermTranslation.objects.create(term=term, language='fr', name='Ventes', description='Devis')
    return term


class TestTerm:

    def test_absolute_url(self, term):
        assert term.get_absolute_url() == f'/api/taxonomy/terms/{term.id}/'

    def test_mail_field_follows_vocabulary(self, term):
        tags = Vocabulary.objects.create(vid='tags', name='Tags')

        assert term.has_field('mail') is True
        assert Term(vocabulary=tags, name='News').has_field('mail') is False

    def test_translation(self, term):
        assert term.has_translation('en') is True
        assert term.has_translation('fr') is True
        assert term.has_translation('de') is False

        translated = term.get_translation('fr')

        assert translated.name == 'Ventes'
        assert translated.language == 'fr'
        assert translated.pk == term.pk
        assert term.name == 'Sales'

    def test_missing_translation_returns_source(self, term):
        assert term.get_translation('de') is term


class TestPublicTermView:

    @pytest.fixture(autouse=True)
    def reset_language(self):
        # LocaleMiddleware leaves the request language active on the thread
        yield
        translation.deactivate()

    def test_published_term(self, api_client, term):
        response = api_client.get(f'/api/taxonomy/terms/{term.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'id': term.id,
            'vocabulary': 'contact_subjects',
            'name': 'Sales',
            'description': 'Quotes and pricing',
            'weight': 0,
            'language': 'en',
        }

    def test_translated_term(self, api_client, term):
        response = api_client.get(f'/api/taxonomy/terms/{term.id}/', HTTP_ACCEPT_LANGUAGE='fr')

        assert response.data['name'] == 'Ventes'
        assert response.data['language'] == 'fr'

    def test_unpublished_term(self, api_client, term):
        term.status = False
        term.save()

        response = api_client.get(f'/api/taxonomy/terms/{term.id}/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

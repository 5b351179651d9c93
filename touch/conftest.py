"""
Shared pytest fixtures for touch tests.
"""
from datetime import datetime, timezone as dt_timezone

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission
from rest_framework.test import APIClient

from taxonomy.models import Term, Vocabulary
from touch.models import Submission

User = get_user_model()


def epoch(*args):
    """Epoch seconds of a UTC date."""
    return int(datetime(*args, tzinfo=dt_timezone.utc).timestamp())


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def subject_vocabulary(db):
    return Vocabulary.objects.create(
        vid='contact_subjects',
        name='Contact subjects',
        has_mail_field=True
    )


@pytest.fixture
def sales(subject_vocabulary):
    return Term.objects.create(
        vocabulary=subject_vocabulary,
        name='Sales',
        description='Quotes and pricing',
        weight=0,
        mail='sales@example.com'
    )


@pytest.fixture
def support(subject_vocabulary):
    return Term.objects.create(
        vocabulary=subject_vocabulary,
        name='Support',
        description='Help with an existing order',
        weight=1
    )


@pytest.fixture
def subjects(sales, support):
    return [sales, support]


def _user_with_perms(username, *codenames):
    user = User.objects.create_user(
        username=username,
        email=f'{username}@test.com',
        password='testpass123'
    )
    user.user_permissions.add(
        *Permission.objects.filter(content_type__app_label='touch', codename__in=codenames)
    )
    return user


@pytest.fixture
def submission_admin(db):
    return _user_with_perms('manager', 'view_submission', 'change_submission', 'delete_submission')


@pytest.fixture
def submission_viewer(db):
    return _user_with_perms('viewer', 'view_submission')


@pytest.fixture
def admin_client(api_client, submission_admin):
    api_client.force_authenticate(user=submission_admin)
    return api_client


@pytest.fixture
def make_submission(db):
    def make(**kwargs):
        values = {
            'name': 'Jane',
            'mail': 'jane@example.com',
            'subject_id': 0,
            'subject_name': 'Undefined subject',
            'message': 'Hello there',
            'newsletter': False,
            'language': 'en',
            'timestamp': epoch(2024, 1, 1, 10, 0),
            'ip_address': '10.0.0.1',
            'ip_address_proxy': '',
            'user_agent': 'Mozilla/5.0',
        }
        values.update(kwargs)
        return Submission.objects.create(**values)
    return make


@pytest.fixture
def sample_submission(make_submission, sales):
    return make_submission(subject_id=sales.id, subject_name='Sales')

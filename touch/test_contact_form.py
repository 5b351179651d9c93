"""
Tests for the public contact form.
"""
from datetime import datetime, timezone as dt_timezone
from smtplib import SMTPException
from unittest import mock

import pytest
from rest_framework import status

from taxonomy.models import Term
from touch.models import Submission
from touch.services import build_contact_form
from touch.services.contact_form import ContactFormController

pytestmark = pytest.mark.django_db

FORM_URL = '/api/touch/contact-form/'
SUBJECT_URL = '/api/touch/contact-form/subject/'
SUBMIT_URL = '/api/touch/contact-form/submit/'

THANKS = "Thank you for contacting me, I'll reach back to you shortly."


def fixed_clock():
    return datetime(2024, 6, 1, 9, 30, tzinfo=dt_timezone.utc)


class TestController:

    @pytest.fixture
    def controller(self):
        return build_contact_form()

    def test_default_subject_without_subjects(self, controller, subject_vocabulary):
        subjects = controller.subjects()

        assert subjects == {}
        assert controller.default_subject(subjects) == 0
        assert controller.subject_choice_visible(subjects) is False

    def test_default_subject_with_one_subject(self, controller, sales):
        subjects = controller.subjects()

        assert controller.default_subject(subjects) == sales.id
        assert controller.subject_choice_visible(subjects) is False

    def test_choice_with_two_subjects(self, controller, subjects):
        subjects = controller.subjects()

        assert controller.default_subject(subjects) is None
        assert controller.subject_choice_visible(subjects) is True

    def test_unnamed_subjects_are_not_offered(self, controller, sales, subject_vocabulary):
        Term.objects.create(vocabulary=subject_vocabulary, name='')
        subjects = controller.subjects()

        assert controller.subject_names(subjects) == {sales.id: 'Sales'}
        assert controller.subject_choice_visible(subjects) is False

    def test_describe_subject(self, controller, sales, support):
        subjects = controller.subjects()

        assert controller.describe_subject(subjects, sales.id) == 'Quotes and pricing'
        assert controller.describe_subject(subjects, str(support.id)) == 'Help with an existing order'
        assert controller.describe_subject(subjects, 999) == ''
        assert controller.describe_subject(subjects, 'abc') == ''

    def test_prepare_snapshots_subject(self, sales):
        controller = ContactFormController(
            store=None, options=build_contact_form().options, mailer=None,
            site_mail='site@example.com', clock=fixed_clock
        )
        subjects = controller.subjects()

        submission = controller.prepare(
            subjects,
            {'name': 'Jane', 'mail': 'jane@example.com', 'subject': sales.id, 'message': 'Hi'},
            {'ip_address': '10.0.0.1'}
        )

        assert list(submission) == [
            'name', 'mail', 'subject_id', 'subject_name', 'message', 'newsletter',
            'language', 'timestamp', 'ip_address', 'ip_address_proxy', 'user_agent',
        ]
        assert submission['subject_name'] == 'Sales'
        assert submission['newsletter'] is False
        assert submission['language'] == 'en'
        assert submission['timestamp'] == int(fixed_clock().timestamp())
        assert submission['ip_address_proxy'] == ''

    def test_recipient(self, controller, sales, support):
        subjects = controller.subjects()

        assert controller.recipient(subjects, sales.id) == 'sales@example.com'
        assert controller.recipient(subjects, support.id) == 'site@example.com'
        assert controller.recipient(subjects, 0) == 'site@example.com'


class TestContactFormRender:

    def test_render_with_subject_choice(self, api_client, sales, support):
        response = api_client.get(FORM_URL)

        assert response.status_code == status.HTTP_200_OK
        subject = response.data['fields']['subject']
        assert subject['access'] is True
        assert subject['options'] == [
            {'value': sales.id, 'label': 'Sales'},
            {'value': support.id, 'label': 'Support'},
        ]
        assert response.data['messages'] == {'status': []}

    def test_render_hides_single_subject(self, api_client, sales):
        subject = api_client.get(FORM_URL).data['fields']['subject']

        assert subject['access'] is False
        assert subject['value'] == sales.id

    def test_render_without_subjects(self, api_client, subject_vocabulary):
        subject = api_client.get(FORM_URL).data['fields']['subject']

        assert subject['access'] is False
        assert subject['value'] == 0

    def test_preselected_subjects(self, api_client, sales, support):
        subject = api_client.get(FORM_URL, {'subjects': f'{support.id}'}).data['fields']['subject']

        assert subject['access'] is False
        assert subject['value'] == support.id

    def test_subject_description(self, api_client, sales, support):
        response = api_client.get(SUBJECT_URL, {'subject': sales.id})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['description'] == 'Quotes and pricing'

    def test_unknown_subject_description(self, api_client, sales, support):
        assert api_client.get(SUBJECT_URL, {'subject': 999}).data['description'] == ''


class TestContactFormSubmit:

    def payload(self, **kwargs):
        data = {
            'name': 'Jane',
            'mail': 'jane@example.com',
            'message': 'I would like a quote.',
        }
        data.update(kwargs)
        return data

    def test_submit_to_subject_address(self, api_client, sales, support, mailoutbox):
        response = api_client.post(
            SUBMIT_URL,
            self.payload(subject=sales.id, newsletter=True),
            format='json',
            HTTP_X_FORWARDED_FOR='203.0.113.7',
            HTTP_USER_AGENT='Mozilla/5.0'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['message'] == THANKS
        assert response.data['form']['fields']['name']['value'] == ''

        submission = Submission.objects.get()
        assert response.data['submission_id'] == submission.id
        assert submission.subject_id == sales.id
        assert submission.subject_name == 'Sales'
        assert submission.newsletter is True
        assert submission.language == 'en'
        assert submission.ip_address == '127.0.0.1'
        assert submission.ip_address_proxy == '203.0.113.7'
        assert submission.user_agent == 'Mozilla/5.0'

        assert len(mailoutbox) == 1
        email = mailoutbox[0]
        assert email.subject == '[Sales] Jane'
        assert email.to == ['sales@example.com']
        assert email.reply_to == ['jane@example.com']
        assert email.from_email == 'noreply@example.com'
        assert 'I would like a quote.' in email.body

    def test_subject_without_address_goes_to_site(self, api_client, sales, support, mailoutbox):
        api_client.post(SUBMIT_URL, self.payload(subject=support.id), format='json')

        assert mailoutbox[0].to == ['site@example.com']

    def test_single_subject_is_implied(self, api_client, sales, mailoutbox):
        response = api_client.post(SUBMIT_URL, self.payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Submission.objects.get().subject_id == sales.id

    def test_no_subjects(self, api_client, subject_vocabulary, mailoutbox):
        response = api_client.post(SUBMIT_URL, self.payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        submission = Submission.objects.get()
        assert submission.subject_id == 0
        assert submission.subject_name == 'Undefined subject'
        assert mailoutbox[0].to == ['site@example.com']

    def test_subject_required_when_offered(self, api_client, sales, support, mailoutbox):
        response = api_client.post(SUBMIT_URL, self.payload(), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'subject' in response.data['fields']
        assert response.data['form']['fields']['subject']['errors']

    def test_invalid_email(self, api_client, sales, mailoutbox):
        response = api_client.post(SUBMIT_URL, self.payload(mail='not-an-email'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['error'] == 'Validation failed'
        assert response.data['form']['fields']['mail']['value'] == 'not-an-email'
        assert response.data['form']['fields']['mail']['errors']
        assert Submission.objects.count() == 0
        assert len(mailoutbox) == 0

    def test_name_too_long(self, api_client, sales):
        response = api_client.post(SUBMIT_URL, self.payload(name='x' * 256), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.data['fields']

    def test_markup_is_stripped(self, api_client, sales, mailoutbox):
        api_client.post(
            SUBMIT_URL,
            self.payload(name='<b>Jane</b>', message='<script>alert(1)</script>Hello'),
            format='json'
        )

        submission = Submission.objects.get()
        assert submission.name == 'Jane'
        assert submission.message == 'alert(1)Hello'

    def test_markup_only_message_is_rejected(self, api_client, sales):
        response = api_client.post(SUBMIT_URL, self.payload(message='<p></p>'), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'message' in response.data['fields']

    def test_mail_failure_is_not_acknowledged(self, api_client, sales, support):
        with mock.patch(
            'django.core.mail.EmailMultiAlternatives.send',
            side_effect=SMTPException('relay refused')
        ):
            response = api_client.post(SUBMIT_URL, self.payload(subject=sales.id), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is False
        assert response.data['form']['messages']['status'] == []
        assert response.data['form']['fields']['name']['value'] == 'Jane'
        # The stored row is kept
        assert Submission.objects.count() == 1

    def test_store_failure_is_not_acknowledged(self, api_client, sales, mailoutbox):
        with mock.patch('touch.services.store.SubmissionStore.insert', return_value=0):
            response = api_client.post(SUBMIT_URL, self.payload(), format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is False
        assert len(mailoutbox) == 1

    @pytest.mark.parametrize('body', [[], ['x'], 'x'])
    def test_body_that_is_not_an_object(self, api_client, sales, support, body, mailoutbox):
        response = api_client.post(SUBMIT_URL, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Validation failed'
        assert 'non_field_errors' in response.data['fields']
        assert response.data['form']['fields']['name']['value'] == ''
        assert Submission.objects.count() == 0
        assert len(mailoutbox) == 0

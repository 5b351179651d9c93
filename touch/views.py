"""
Touch Views

API endpoints for the public contact form and the submission admin.
"""
from collections.abc import Mapping

from django.urls import reverse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .permissions import CanChangeSubmissions, CanDeleteSubmissions, CanViewSubmissions
from .serializers import ContactFormSubmitSerializer, SubmissionEditSerializer
from .services import build_contact_form, build_submission_admin


CONTACT_FORM_FIELDS = ('name', 'mail', 'subject', 'message', 'newsletter')
TRUE_VALUES = ('1', 'true', 'on', 'yes')


def get_client_ip(request):
    """Get client IP address from request."""
    return request.META.get('REMOTE_ADDR', '')


def request_metadata(request):
    """Request details stored along with a submission."""
    return {
        'ip_address': get_client_ip(request),
        'ip_address_proxy': request.META.get('HTTP_X_FORWARDED_FOR', ''),
        'user_agent': request.META.get('HTTP_USER_AGENT', ''),
    }


def parse_ids(raw):
    """Ids from a comma separated query parameter, ignoring junk."""
    ids = []
    for part in (raw or '').split(','):
        part = part.strip()
        if part.isdigit():
            ids.append(int(part))
    return ids


def submitted_values(data):
    """Raw contact form values, to show the form again as submitted."""
    if not isinstance(data, Mapping):
        return {}

    values = {key: data.get(key) for key in CONTACT_FORM_FIELDS if data.get(key) is not None}

    if 'subject' in values:
        try:
            values['subject'] = int(values['subject'])
        except (TypeError, ValueError):
            values.pop('subject')

    if 'newsletter' in values and not isinstance(values['newsletter'], bool):
        values['newsletter'] = str(values['newsletter']).lower() in TRUE_VALUES

    return values


def not_found():
    return Response(
        {'error': 'Submission not found'},
        status=status.HTTP_404_NOT_FOUND
    )


# =============================================================================
# PUBLIC CONTACT FORM
# =============================================================================

class ContactFormMixin:
    """
    Shared subject resolution for the contact form endpoints.

    The embedding page may restrict the subjects with "?subjects=1,2".
    """

    permission_classes = [AllowAny]

    def get_controller(self):
        return build_contact_form()

    def get_subjects(self, controller):
        preselected = controller.options.terms(parse_ids(self.request.query_params.get('subjects')))
        return controller.subjects(preselected)


class ContactFormView(ContactFormMixin, APIView):
    """
    Render the contact form.

    GET /api/touch/contact-form/
    """

    def get(self, request):
        controller = self.get_controller()
        subjects = self.get_subjects(controller)
        return Response(controller.build(subjects))


class ContactFormSubjectView(ContactFormMixin, APIView):
    """
    Description of the selected subject, refreshed when the subject changes.

    GET /api/touch/contact-form/subject/?subject=:id
    """

    def get(self, request):
        controller = self.get_controller()
        subjects = self.get_subjects(controller)
        subject_id = request.query_params.get('subject')

        return Response({
            'subject': subject_id,
            'description': controller.describe_subject(subjects, subject_id),
        })


class ContactFormSubmitView(ContactFormMixin, APIView):
    """
    Submit the contact form.

    POST /api/touch/contact-form/submit/

    No authentication required.
    """

    def post(self, request):
        """Validate, store and send a submission."""
        controller = self.get_controller()
        subjects = self.get_subjects(controller)

        serializer = ContactFormSubmitSerializer(
            data=request.data,
            subjects=subjects,
            default_subject=controller.default_subject(subjects)
        )

        if not serializer.is_valid():
            return Response(
                {
                    'success': False,
                    'error': 'Validation failed',
                    'fields': serializer.errors,
                    'form': controller.build(
                        subjects,
                        values=submitted_values(request.data),
                        errors=serializer.errors
                    ),
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        result = controller.submit(subjects, serializer.validated_data, request_metadata(request))

        if not result.success:
            return Response({'success': False, 'form': result.form})

        return Response(
            {
                'success': True,
                'message': result.form['messages']['status'][0],
                'submission_id': result.submission['id'],
                'form': result.form,
            },
            status=status.HTTP_201_CREATED
        )


# =============================================================================
# SUBMISSION ADMIN
# =============================================================================

class SubmissionListView(APIView):
    """
    List all submissions.

    GET /api/admin/touch/submissions/

    Query Parameters:
    - order: Column to sort on (name, mail, subject, language, timestamp)
    - sort: asc or desc (default: timestamp desc)
    """

    permission_classes = [CanViewSubmissions]

    def get(self, request):
        service = build_submission_admin()
        return Response(service.list(
            order=request.query_params.get('order'),
            sort=request.query_params.get('sort'),
        ))


class SubmissionDetailView(APIView):
    """
    Get single submission details.

    GET /api/admin/touch/submissions/:id/
    """

    permission_classes = [CanViewSubmissions]

    def get(self, request, pk):
        service = build_submission_admin()
        submission = service.get(pk)

        if submission is None:
            return not_found()

        return Response(service.detail(submission))


class SubmissionEditView(APIView):
    """
    Edit a submission.

    GET  /api/admin/touch/submissions/:id/edit/   pre-filled form
    PUT  /api/admin/touch/submissions/:id/edit/   save (PATCH and POST too)
    """

    permission_classes = [CanChangeSubmissions]

    def get(self, request, pk):
        service = build_submission_admin()
        submission = service.get(pk)

        if submission is None:
            return not_found()

        return Response(service.edit_form(submission, service.subjects()))

    def put(self, request, pk):
        return self.save(request, pk)

    def post(self, request, pk):
        return self.save(request, pk)

    def patch(self, request, pk):
        return self.save(request, pk, partial=True)

    def save(self, request, pk, partial=False):
        service = build_submission_admin()
        submission = service.get(pk)

        if submission is None:
            return not_found()

        subjects = service.subjects()
        form = service.edit_form(submission, subjects)

        data = request.data
        # A body that is not an object is left to the serializer to reject
        if partial and isinstance(request.data, Mapping):
            data = {name: field['value'] for name, field in form['fields'].items() if not field.get('disabled')}
            data.update({key: request.data.get(key) for key in request.data})

        serializer = SubmissionEditSerializer(
            data=data,
            subjects=subjects,
            languages=service.options.languages(),
            subject_control=form['subject_control']
        )

        if not serializer.is_valid():
            return Response(
                {'success': False, 'error': 'Validation failed', 'fields': serializer.errors, 'form': form},
                status=status.HTTP_400_BAD_REQUEST
            )

        saved, message = service.save(submission, subjects, serializer.validated_data)

        if not saved:
            return Response({'success': False, 'error': message, 'form': form})

        return Response({
            'success': True,
            'message': message,
            'redirect': reverse('touch_admin:submission-detail', kwargs={'pk': submission['id']}),
        })


class SubmissionDeleteView(APIView):
    """
    Delete a submission.

    GET    /api/admin/touch/submissions/:id/delete/   confirmation
    POST   /api/admin/touch/submissions/:id/delete/   delete (DELETE too)
    """

    permission_classes = [CanDeleteSubmissions]

    def get(self, request, pk):
        service = build_submission_admin()
        submission = service.get(pk)

        if submission is None:
            return not_found()

        return Response(service.delete_confirmation(submission))

    def post(self, request, pk):
        service = build_submission_admin()
        submission = service.get(pk)

        if submission is None:
            return not_found()

        deleted, message = service.delete(submission)

        return Response({
            'success': deleted > 0,
            'deleted': deleted,
            'message': message,
            'redirect': reverse('touch_admin:submission-list'),
        })

    def delete(self, request, pk):
        return self.post(request, pk)

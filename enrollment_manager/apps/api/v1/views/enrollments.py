"""
Admin-facing REST API views for Enrollments in the enrollments app.
"""
from uuid import UUID

from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.filters import OrderingFilter
from rest_framework.response import Response

from enrollment_manager.apps.api import filters, serializers
from enrollment_manager.apps.api.v1.views.utils import PaginationWithPageCount
from enrollment_manager.apps.courses.models import Course
from enrollment_manager.apps.enrollments import api as enrollments_api
from enrollment_manager.apps.enrollments.constants import TransitionErrorKinds
from enrollment_manager.apps.enrollments.exceptions import EnrollmentNotFound, EnrollmentTransitionError
from enrollment_manager.apps.enrollments.models import Enrollment
from enrollment_manager.constants import GENERIC_TRANSITION_ERROR_MESSAGE

ENROLLMENT_ADMIN_API_TAG = 'Enrollment Admin'


class CourseEnrollmentAdminViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Viewset supporting admin review of the ``Enrollment`` records of one course.

    Permissions come from the ``REST_FRAMEWORK`` defaults: authenticated staff users only.
    """
    serializer_class = serializers.EnrollmentResponseSerializer
    filter_backends = (filters.NoFilterOnDetailBackend, OrderingFilter)
    filterset_class = filters.EnrollmentFilter
    pagination_class = PaginationWithPageCount
    lookup_field = 'uuid'

    ordering_fields = ['created', 'waitlist_position']
    # Newest enrollments first.
    ordering = ['-created']

    @property
    def requested_course_uuid(self):
        """
        Look in the requested URL path for a Course UUID.
        """
        try:
            return UUID(self.kwargs.get('course_uuid'))
        except (TypeError, ValueError) as exc:
            raise NotFound('Course not found.') from exc

    def get_queryset(self):
        """
        A base queryset to list or retrieve the ``Enrollment`` records of the requested course.
        """
        return Enrollment.objects.filter(
            course_id=self.requested_course_uuid,
        ).select_related(
            'user',
            'region_quota',
        )

    @extend_schema(
        tags=[ENROLLMENT_ADMIN_API_TAG],
        summary='List the enrollments of a course.',
        responses={
            status.HTTP_200_OK: serializers.EnrollmentResponseSerializer,
            status.HTTP_404_NOT_FOUND: None,
        },
    )
    def list(self, request, *args, **kwargs):
        """
        Lists ``Enrollment`` records of the course, newest first, filtered by the given query parameters.
        """
        if not Course.objects.filter(uuid=self.requested_course_uuid).exists():
            raise NotFound('Course not found.')
        return super().list(request, *args, **kwargs)

    @extend_schema(
        tags=[ENROLLMENT_ADMIN_API_TAG],
        summary='Retrieve an enrollment of a course by UUID.',
        responses={
            status.HTTP_200_OK: serializers.EnrollmentResponseSerializer,
            status.HTTP_404_NOT_FOUND: None,
        },
    )
    def retrieve(self, request, *args, uuid=None, **kwargs):
        """
        Retrieves a single ``Enrollment`` record by uuid.
        """
        return super().retrieve(request, *args, uuid=uuid, **kwargs)

    @extend_schema(
        tags=[ENROLLMENT_ADMIN_API_TAG],
        summary='Transition an enrollment to a new status.',
        request=serializers.EnrollmentTransitionRequestSerializer,
        responses={
            status.HTTP_200_OK: serializers.EnrollmentTransitionResponseSerializer,
            status.HTTP_400_BAD_REQUEST: serializers.EnrollmentTransitionErrorSerializer,
            status.HTTP_404_NOT_FOUND: serializers.EnrollmentTransitionErrorSerializer,
            status.HTTP_500_INTERNAL_SERVER_ERROR: serializers.EnrollmentTransitionErrorSerializer,
        },
    )
    def partial_update(self, request, *args, uuid=None, **kwargs):
        """
        Moves an enrollment to the requested status, revalidating course, region and
        waitlist capacity and keeping region quota counters and waitlist positions in line.
        """
        request_serializer = serializers.EnrollmentTransitionRequestSerializer(data=request.data)
        request_serializer.is_valid(raise_exception=True)
        data = request_serializer.validated_data

        try:
            enrollment_uuid = UUID(uuid)
        except (TypeError, ValueError):
            return self._transition_error_response(EnrollmentNotFound(f'Enrollment {uuid} not found.'))

        try:
            result = enrollments_api.transition_enrollment(
                enrollment_uuid,
                self.requested_course_uuid,
                data['status'],
                region_quota_id=data.get('region_quota_id'),
                notify_user=data.get('notify_user', True),
                message=data.get('message'),
            )
        except EnrollmentTransitionError as exc:
            return self._transition_error_response(exc)

        response_serializer = serializers.EnrollmentTransitionResponseSerializer({
            'enrollment': result.enrollment,
            'message': result.message,
        })
        return Response(response_serializer.data, status=status.HTTP_200_OK)

    @staticmethod
    def _transition_error_response(exc):
        """
        Maps a failed transition to an ``{error_reason, error_kind}`` response.
        Internal failures never expose their details.
        """
        error_reason = exc.message
        if exc.error_kind == TransitionErrorKinds.INTERNAL:
            error_reason = GENERIC_TRANSITION_ERROR_MESSAGE
        error_serializer = serializers.EnrollmentTransitionErrorSerializer({
            'error_reason': error_reason,
            'error_kind': exc.error_kind,
        })
        return Response(error_serializer.data, status=exc.http_status_code)

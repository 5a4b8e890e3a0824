"""
Tests for the course Enrollment admin API views.
"""
from unittest import mock
from uuid import uuid4

import ddt
from django.db import DatabaseError
from django.utils import timezone
from rest_framework import status
from rest_framework.reverse import reverse

from enrollment_manager.apps.courses.tests.factories import CourseFactory, CourseRegionQuotaFactory
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses
from enrollment_manager.apps.enrollments.tests.factories import EnrollmentFactory
from enrollment_manager.apps.notifications.models import Notification
from test_utils import TEST_CITY, TEST_STATE, APITest


def enrollment_list_url(course_uuid):
    return reverse('api:v1:course-enrollments-list', kwargs={'course_uuid': course_uuid})


def enrollment_detail_url(course_uuid, enrollment_uuid):
    return reverse(
        'api:v1:course-enrollments-detail',
        kwargs={'course_uuid': course_uuid, 'uuid': enrollment_uuid},
    )


# pylint: disable=missing-function-docstring
class EnrollmentViewTestMixin:
    """
    Mixin to set some basic state for test classes that cover the Enrollment admin views.
    """

    def setUp(self):
        super().setUp()
        self.course = CourseFactory(
            title='Machine Learning Basics',
            max_enrollments=2,
            waitlist_enabled=True,
            waitlist_limit=1,
            region_restriction_enabled=True,
        )
        self.quota = CourseRegionQuotaFactory(course=self.course, state=TEST_STATE, city=None, limit=2)

        now = timezone.now()
        self.oldest_enrollment = EnrollmentFactory(
            course=self.course,
            state=TEST_STATE,
            city=TEST_CITY,
            created=now - timezone.timedelta(days=3),
        )
        self.middle_enrollment = EnrollmentFactory(
            course=self.course,
            state=TEST_STATE,
            status=EnrollmentStatuses.REJECTED,
            eligibility_reason='Prerequisites missing.',
            created=now - timezone.timedelta(days=2),
        )
        self.newest_enrollment = EnrollmentFactory(
            course=self.course,
            state=TEST_STATE,
            created=now - timezone.timedelta(days=1),
        )
        self.other_course_enrollment = EnrollmentFactory()


@ddt.ddt
class TestEnrollmentListAndRetrieve(EnrollmentViewTestMixin, APITest):
    """
    Tests for listing and retrieving the enrollments of a course.
    """

    def test_list_newest_first(self):
        response = self.client.get(enrollment_list_url(self.course.uuid))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response_json = response.json()
        self.assertEqual(response_json['count'], 3)
        self.assertEqual(response_json['num_pages'], 1)
        self.assertEqual(response_json['current_page'], 1)
        self.assertEqual(
            [item['uuid'] for item in response_json['results']],
            [
                str(self.newest_enrollment.uuid),
                str(self.middle_enrollment.uuid),
                str(self.oldest_enrollment.uuid),
            ],
        )

    @ddt.data(
        (EnrollmentStatuses.REJECTED, 1),
        (EnrollmentStatuses.PENDING_REGION, 2),
        (EnrollmentStatuses.CONFIRMED, 0),
    )
    @ddt.unpack
    def test_list_filtered_by_status(self, status_filter, expected_count):
        response = self.client.get(enrollment_list_url(self.course.uuid), {'status': status_filter})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        results = response.json()['results']
        self.assertEqual(len(results), expected_count)
        for item in results:
            self.assertEqual(item['status'], status_filter)

    def test_list_invalid_status_filter(self):
        response = self.client.get(enrollment_list_url(self.course.uuid), {'status': 'ENROLLED'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @ddt.data(uuid4(), 'not-a-uuid')
    def test_list_unknown_course(self, course_uuid):
        response = self.client.get(enrollment_list_url(course_uuid))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_retrieve(self):
        response = self.client.get(enrollment_detail_url(self.course.uuid, self.middle_enrollment.uuid))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response_json = response.json()
        self.assertEqual(response_json['status'], EnrollmentStatuses.REJECTED)
        self.assertEqual(response_json['eligibility_reason'], 'Prerequisites missing.')
        self.assertEqual(response_json['user_email'], self.middle_enrollment.user.email)
        self.assertIsNone(response_json['region_quota'])

    def test_retrieve_enrollment_of_another_course(self):
        response = self.client.get(enrollment_detail_url(self.course.uuid, self.other_course_enrollment.uuid))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)


class TestEnrollmentViewsRequireStaff(EnrollmentViewTestMixin, APITest):
    """
    Non-staff users may not use the Enrollment admin views.
    """
    is_staff = False

    def test_list_forbidden(self):
        response = self.client.get(enrollment_list_url(self.course.uuid))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_transition_forbidden(self):
        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.oldest_enrollment.uuid),
            {'status': EnrollmentStatuses.CONFIRMED},
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.oldest_enrollment.refresh_from_db()
        self.assertEqual(self.oldest_enrollment.status, EnrollmentStatuses.PENDING_REGION)


class TestEnrollmentAnonymousAccess(EnrollmentViewTestMixin, APITest):
    """
    Anonymous users may not use the Enrollment admin views.
    """

    def test_list_requires_authentication(self):
        self.client.logout()

        response = self.client.get(enrollment_list_url(self.course.uuid))

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))


@ddt.ddt
class TestEnrollmentTransition(EnrollmentViewTestMixin, APITest):
    """
    Tests for transitioning an enrollment through the admin API.
    """

    def test_confirm(self):
        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.patch(
                enrollment_detail_url(self.course.uuid, self.oldest_enrollment.uuid),
                {'status': EnrollmentStatuses.CONFIRMED},
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response_json = response.json()
        self.assertEqual(response_json['message'], 'confirmed')
        self.assertEqual(response_json['enrollment']['status'], EnrollmentStatuses.CONFIRMED)
        self.assertEqual(response_json['enrollment']['region_quota']['uuid'], str(self.quota.uuid))
        self.assertEqual(response_json['enrollment']['region_quota']['current_count'], 1)
        self.assertIsNone(response_json['enrollment']['eligibility_reason'])
        self.assertTrue(Notification.objects.filter(user=self.oldest_enrollment.user).exists())

    def test_no_changes(self):
        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.middle_enrollment.uuid),
            {'status': EnrollmentStatuses.REJECTED},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['message'], 'no changes')
        self.assertEqual(response.json()['enrollment']['eligibility_reason'], 'Prerequisites missing.')

    def test_waitlist_with_message_and_no_notification(self):
        with self.captureOnCommitCallbacks(execute=True) as callbacks:
            response = self.client.patch(
                enrollment_detail_url(self.course.uuid, self.middle_enrollment.uuid),
                {
                    'status': EnrollmentStatuses.WAITLIST,
                    'message': 'A seat may open up next week.',
                    'notify_user': False,
                },
            )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        response_json = response.json()
        self.assertEqual(response_json['message'], 'moved to waitlist')
        self.assertEqual(response_json['enrollment']['waitlist_position'], 1)
        self.assertEqual(response_json['enrollment']['eligibility_reason'], 'A seat may open up next week.')
        self.assertEqual(callbacks, [])

    def test_rejected_by_capacity(self):
        for enrollment in (self.oldest_enrollment, self.newest_enrollment):
            response = self.client.patch(
                enrollment_detail_url(self.course.uuid, enrollment.uuid),
                {'status': EnrollmentStatuses.CONFIRMED},
            )
            self.assertEqual(response.status_code, status.HTTP_200_OK)

        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.middle_enrollment.uuid),
            {'status': EnrollmentStatuses.CONFIRMED},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json(), {
            'error_reason': 'Course capacity reached.',
            'error_kind': 'Rejected',
        })
        self.quota.refresh_from_db()
        self.assertEqual(self.quota.current_count, 2)

    def test_region_reassignment(self):
        other_quota = CourseRegionQuotaFactory(course=self.course, state='MG', city=None, limit=1)
        url = enrollment_detail_url(self.course.uuid, self.oldest_enrollment.uuid)
        self.client.patch(url, {'status': EnrollmentStatuses.CONFIRMED})

        response = self.client.patch(
            url,
            {'status': EnrollmentStatuses.CONFIRMED, 'region_quota_id': str(other_quota.uuid)},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['enrollment']['region_quota']['uuid'], str(other_quota.uuid))
        self.quota.refresh_from_db()
        other_quota.refresh_from_db()
        self.assertEqual(self.quota.current_count, 0)
        self.assertEqual(other_quota.current_count, 1)

    @ddt.data(uuid4(), 'not-a-uuid')
    def test_enrollment_not_found(self, enrollment_uuid):
        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, enrollment_uuid),
            {'status': EnrollmentStatuses.CONFIRMED},
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error_kind'], 'NotFound')

    def test_enrollment_of_another_course_not_found(self):
        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.other_course_enrollment.uuid),
            {'status': EnrollmentStatuses.CONFIRMED},
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()['error_kind'], 'NotFound')

    @mock.patch('enrollment_manager.apps.enrollments.api.apply_quota_deltas')
    def test_internal_error_hides_details(self, mock_apply_quota_deltas):
        mock_apply_quota_deltas.side_effect = DatabaseError('connection reset by peer')

        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.oldest_enrollment.uuid),
            {'status': EnrollmentStatuses.CONFIRMED},
        )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {
            'error_reason': 'Error updating enrollment.',
            'error_kind': 'Internal',
        })
        self.oldest_enrollment.refresh_from_db()
        self.assertEqual(self.oldest_enrollment.status, EnrollmentStatuses.PENDING_REGION)

    @ddt.data(
        {},
        {'status': 'ENROLLED'},
        {'status': EnrollmentStatuses.CONFIRMED, 'region_quota_id': 'not-a-uuid'},
    )
    def test_invalid_request_body(self, payload):
        response = self.client.patch(
            enrollment_detail_url(self.course.uuid, self.oldest_enrollment.uuid),
            payload,
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.oldest_enrollment.refresh_from_db()
        self.assertEqual(self.oldest_enrollment.status, EnrollmentStatuses.PENDING_REGION)

"""
Tests for the ``enrollments`` models.
"""
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase

from enrollment_manager.apps.courses.tests.factories import CourseFactory, CourseRegionQuotaFactory

from ..constants import EnrollmentStatuses
from ..models import Enrollment
from .factories import EnrollmentFactory


class TestEnrollment(TestCase):
    """
    Tests for the ``Enrollment`` model.
    """

    def setUp(self):
        super().setUp()
        self.course = CourseFactory(waitlist_enabled=True)

    def test_defaults(self):
        enrollment = EnrollmentFactory(course=self.course)

        self.assertEqual(enrollment.status, EnrollmentStatuses.PENDING_REGION)
        self.assertIsNone(enrollment.waitlist_position)
        self.assertEqual(enrollment.history.count(), 1)

    def test_waitlisted_enrollment_requires_position(self):
        with self.assertRaisesRegex(ValidationError, 'require a waitlist position'):
            EnrollmentFactory(course=self.course, status=EnrollmentStatuses.WAITLIST)

    def test_position_only_for_waitlisted_enrollments(self):
        with self.assertRaisesRegex(ValidationError, 'Only waitlisted enrollments'):
            EnrollmentFactory(course=self.course, status=EnrollmentStatuses.CONFIRMED, waitlist_position=1)

    def test_region_quota_of_another_course(self):
        foreign_quota = CourseRegionQuotaFactory()

        with self.assertRaisesRegex(ValidationError, 'does not belong to course'):
            EnrollmentFactory(course=self.course, region_quota=foreign_quota)

    def test_one_enrollment_per_user_and_course(self):
        enrollment = EnrollmentFactory(course=self.course)

        with self.assertRaises((ValidationError, IntegrityError)):
            EnrollmentFactory(course=self.course, user=enrollment.user)

        self.assertEqual(Enrollment.objects.filter(course=self.course).count(), 1)

    def test_deleting_quota_unassigns_enrollments(self):
        quota = CourseRegionQuotaFactory(course=self.course)
        enrollment = EnrollmentFactory(course=self.course, region_quota=quota)

        quota.delete()

        enrollment.refresh_from_db()
        self.assertIsNone(enrollment.region_quota_id)

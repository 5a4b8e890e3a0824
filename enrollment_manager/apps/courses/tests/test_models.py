"""
Tests for the ``courses`` models.
"""
import ddt
from django.core.exceptions import ValidationError
from django.test import TestCase

from ..models import CourseRegionQuota
from .factories import CourseFactory, CourseRegionQuotaFactory


@ddt.ddt
class TestCourseRegionQuota(TestCase):
    """
    Tests for the ``CourseRegionQuota`` model.
    """

    def setUp(self):
        super().setUp()
        self.course = CourseFactory()

    def test_state_and_city_normalized_on_save(self):
        quota = CourseRegionQuotaFactory(course=self.course, state=' sp ', city='  Campinas ')

        quota.refresh_from_db()
        self.assertEqual(quota.state, 'SP')
        self.assertEqual(quota.city, 'Campinas')
        self.assertFalse(quota.is_state_wide)
        self.assertEqual(quota.region_label, 'Campinas/SP')

    @ddt.data(None, '', '   ')
    def test_blank_city_is_state_wide(self, city):
        quota = CourseRegionQuotaFactory(course=self.course, state='RJ', city=city)

        self.assertTrue(quota.is_state_wide)
        self.assertEqual(quota.region_label, 'RJ')

    @ddt.data(
        (None, None),
        (None, ''),
        ('', '  '),
    )
    @ddt.unpack
    def test_duplicate_state_wide_quota_rejected(self, first_city, second_city):
        CourseRegionQuotaFactory(course=self.course, state='SP', city=first_city)

        with self.assertRaisesRegex(ValidationError, 'already has a state-wide quota for SP'):
            CourseRegionQuotaFactory(course=self.course, state='sp', city=second_city)

        self.assertEqual(CourseRegionQuota.objects.filter(course=self.course).count(), 1)

    def test_duplicate_city_quota_rejected(self):
        CourseRegionQuotaFactory(course=self.course, state='SP', city='Campinas')

        with self.assertRaisesRegex(ValidationError, 'already has a quota for CAMPINAS/SP'):
            CourseRegionQuotaFactory(course=self.course, state='SP', city='CAMPINAS')

    def test_same_region_allowed_across_courses(self):
        CourseRegionQuotaFactory(course=self.course, state='SP', city=None)
        CourseRegionQuotaFactory(course=CourseFactory(), state='SP', city=None)

        self.assertEqual(CourseRegionQuota.objects.filter(state='SP').count(), 2)

    def test_city_and_state_wide_quotas_coexist(self):
        CourseRegionQuotaFactory(course=self.course, state='SP', city=None)
        CourseRegionQuotaFactory(course=self.course, state='SP', city='Campinas')
        CourseRegionQuotaFactory(course=self.course, state='SP', city='Santos')

        self.assertEqual(self.course.region_quotas.count(), 3)

    def test_resaving_existing_quota_is_not_a_duplicate(self):
        quota = CourseRegionQuotaFactory(course=self.course, state='SP', city=None)
        quota.limit = 42
        quota.save()

        quota.refresh_from_db()
        self.assertEqual(quota.limit, 42)

    def test_negative_counter_rejected(self):
        quota = CourseRegionQuotaFactory(course=self.course)
        quota.current_count = -1

        with self.assertRaises(ValidationError):
            quota.save()

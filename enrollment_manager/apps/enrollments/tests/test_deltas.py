"""
Tests for the ``deltas`` module of the enrollments app.
"""
from uuid import uuid4

import ddt
from django.test import SimpleTestCase, TestCase

from enrollment_manager.apps.courses.tests.factories import CourseRegionQuotaFactory

from ..constants import EnrollmentStatuses
from ..deltas import QuotaDelta, accumulate_quota_deltas, apply_quota_deltas

QUOTA_A = uuid4()
QUOTA_B = uuid4()

CONFIRMED = EnrollmentStatuses.CONFIRMED
WAITLIST = EnrollmentStatuses.WAITLIST
PENDING_REGION = EnrollmentStatuses.PENDING_REGION
REJECTED = EnrollmentStatuses.REJECTED


@ddt.ddt
class TestAccumulateQuotaDeltas(SimpleTestCase):
    """
    Tests for ``accumulate_quota_deltas``.
    """

    @ddt.data(
        # Same quota, same dimension nets to nothing.
        (CONFIRMED, CONFIRMED, QUOTA_A, QUOTA_A, {}),
        (WAITLIST, WAITLIST, QUOTA_A, QUOTA_A, {}),
        # Entering a dimension.
        (PENDING_REGION, CONFIRMED, None, QUOTA_A, {QUOTA_A: QuotaDelta(1, 0)}),
        (PENDING_REGION, WAITLIST, None, QUOTA_A, {QUOTA_A: QuotaDelta(0, 1)}),
        (REJECTED, CONFIRMED, QUOTA_A, QUOTA_A, {QUOTA_A: QuotaDelta(1, 0)}),
        # Leaving a dimension.
        (CONFIRMED, REJECTED, QUOTA_A, None, {QUOTA_A: QuotaDelta(-1, 0)}),
        (WAITLIST, PENDING_REGION, QUOTA_A, QUOTA_A, {QUOTA_A: QuotaDelta(0, -1)}),
        # Switching dimension within one quota.
        (WAITLIST, CONFIRMED, QUOTA_A, QUOTA_A, {QUOTA_A: QuotaDelta(1, -1)}),
        (CONFIRMED, WAITLIST, QUOTA_A, QUOTA_A, {QUOTA_A: QuotaDelta(-1, 1)}),
        # Moving across quotas.
        (CONFIRMED, CONFIRMED, QUOTA_A, QUOTA_B, {QUOTA_A: QuotaDelta(-1, 0), QUOTA_B: QuotaDelta(1, 0)}),
        (WAITLIST, CONFIRMED, QUOTA_A, QUOTA_B, {QUOTA_A: QuotaDelta(0, -1), QUOTA_B: QuotaDelta(1, 0)}),
        # Unassigned enrollments are not tracked.
        (PENDING_REGION, CONFIRMED, None, None, {}),
        (CONFIRMED, WAITLIST, None, None, {}),
        # Uncounted statuses contribute nothing.
        (PENDING_REGION, REJECTED, QUOTA_A, QUOTA_B, {}),
    )
    @ddt.unpack
    def test_accumulate(self, old_status, target_status, old_quota_id, new_quota_id, expected):
        self.assertEqual(
            accumulate_quota_deltas(old_status, target_status, old_quota_id, new_quota_id),
            expected,
        )

    def test_empty_string_quota_ids_contribute_nothing(self):
        self.assertEqual(accumulate_quota_deltas(CONFIRMED, WAITLIST, '', ''), {})


class TestApplyQuotaDeltas(TestCase):
    """
    Tests for ``apply_quota_deltas``.
    """

    def test_relative_updates(self):
        quota_a = CourseRegionQuotaFactory(state='SP', current_count=3, waitlist_count=2)
        quota_b = CourseRegionQuotaFactory(state='RJ', current_count=0, waitlist_count=5)

        apply_quota_deltas({
            quota_a.uuid: QuotaDelta(-1, 1),
            quota_b.uuid: QuotaDelta(1, 0),
        })

        quota_a.refresh_from_db()
        quota_b.refresh_from_db()
        self.assertEqual((quota_a.current_count, quota_a.waitlist_count), (2, 3))
        self.assertEqual((quota_b.current_count, quota_b.waitlist_count), (1, 5))

    def test_one_query_per_quota(self):
        quota_a = CourseRegionQuotaFactory(state='SP')
        quota_b = CourseRegionQuotaFactory(state='RJ')

        with self.assertNumQueries(2):
            apply_quota_deltas({
                quota_a.uuid: QuotaDelta(1, 0),
                quota_b.uuid: QuotaDelta(0, 1),
            })

    def test_zero_delta_issues_no_write(self):
        quota = CourseRegionQuotaFactory(state='SP')

        with self.assertNumQueries(0):
            apply_quota_deltas({quota.uuid: QuotaDelta(0, 0)})
            apply_quota_deltas({})

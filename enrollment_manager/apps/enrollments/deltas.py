"""
Bookkeeping of region quota counters across an enrollment transition.
"""
import logging
from collections import defaultdict
from typing import NamedTuple

from django.db.models import F

from enrollment_manager.apps.courses.models import CourseRegionQuota
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses

logger = logging.getLogger(__name__)


class QuotaDelta(NamedTuple):
    confirmed: int = 0
    waitlist: int = 0

    def __add__(self, other):
        return QuotaDelta(self.confirmed + other.confirmed, self.waitlist + other.waitlist)

    def is_zero(self):
        return self.confirmed == 0 and self.waitlist == 0


def _unit_delta(status, sign):
    """
    The delta of one enrollment with ``status`` entering (+1) or leaving (-1) a quota.
    """
    if status == EnrollmentStatuses.CONFIRMED:
        return QuotaDelta(confirmed=sign)
    if status == EnrollmentStatuses.WAITLIST:
        return QuotaDelta(waitlist=sign)
    return QuotaDelta()


def accumulate_quota_deltas(old_status, target_status, old_quota_id, new_quota_id):
    """
    Computes the net counter change per region quota for one transition.

    The vacated (old quota, old status) slot contributes -1 and the occupied
    (new quota, target status) slot contributes +1. Unassigned quotas contribute
    nothing, and quotas whose net change is zero are left out.

    Returns:
        dict mapping quota id to ``QuotaDelta``.
    """
    deltas = defaultdict(QuotaDelta)
    if old_quota_id:
        deltas[old_quota_id] += _unit_delta(old_status, -1)
    if new_quota_id:
        deltas[new_quota_id] += _unit_delta(target_status, +1)

    return {
        quota_id: delta
        for quota_id, delta in deltas.items()
        if not delta.is_zero()
    }


def apply_quota_deltas(deltas):
    """
    Applies ``deltas`` as relative updates, one query per affected quota.
    Dimensions with a zero delta are not written.
    """
    for quota_id, delta in deltas.items():
        updates = {}
        if delta.confirmed:
            updates['current_count'] = F('current_count') + delta.confirmed
        if delta.waitlist:
            updates['waitlist_count'] = F('waitlist_count') + delta.waitlist
        if not updates:
            continue

        CourseRegionQuota.objects.filter(uuid=quota_id).update(**updates)
        logger.info(
            'Applied quota delta confirmed=%s waitlist=%s to region quota %s',
            delta.confirmed,
            delta.waitlist,
            quota_id,
        )

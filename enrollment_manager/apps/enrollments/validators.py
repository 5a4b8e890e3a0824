"""
Admission rules guarding each enrollment status transition.

Rules return a ``TransitionRejection`` instead of raising, so the transition
engine can reject a request before it writes anything.
"""
import itertools
from typing import NamedTuple, Optional

from rest_framework import status

from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses, TransitionRejectionReasons
from enrollment_manager.apps.enrollments.models import Enrollment


class TransitionRejection(NamedTuple):
    reason: str
    http_status_code: int = status.HTTP_400_BAD_REQUEST


def _other_enrollments(enrollment, **filters):
    """
    Enrollments of the same course matching ``filters``, excluding ``enrollment`` itself.
    """
    return Enrollment.objects.filter(
        course_id=enrollment.course_id,
        **filters,
    ).exclude(uuid=enrollment.uuid)


def validate_confirmation(enrollment, course, resolved_quota) -> Optional[TransitionRejection]:
    """
    Checks region restriction, the course-wide cap and the region cap.
    """
    if course.region_restriction_enabled and resolved_quota is None and not course.allow_all_regions:
        return TransitionRejection(TransitionRejectionReasons.REGION_REQUIRED)

    if course.max_enrollments is not None:
        confirmed_count = _other_enrollments(enrollment, status=EnrollmentStatuses.CONFIRMED).count()
        if confirmed_count + 1 > course.max_enrollments:
            return TransitionRejection(TransitionRejectionReasons.COURSE_CAPACITY_REACHED)

    if resolved_quota is not None:
        region_confirmed_count = _other_enrollments(
            enrollment,
            status=EnrollmentStatuses.CONFIRMED,
            region_quota_id=resolved_quota.uuid,
        ).count()
        if region_confirmed_count + 1 > resolved_quota.limit:
            return TransitionRejection(TransitionRejectionReasons.REGION_CAPACITY_REACHED)

    return None


def validate_waitlisting(enrollment, course, resolved_quota) -> Optional[TransitionRejection]:
    """
    Checks that the waitlist is open and that neither the course nor the region waitlist is full.
    A waitlist limit of 0 means unlimited.
    """
    if not course.waitlist_enabled:
        return TransitionRejection(TransitionRejectionReasons.WAITLIST_DISABLED)

    if course.waitlist_limit > 0:
        waitlist_count = _other_enrollments(enrollment, status=EnrollmentStatuses.WAITLIST).count()
        if waitlist_count + 1 > course.waitlist_limit:
            return TransitionRejection(TransitionRejectionReasons.WAITLIST_LIMIT_REACHED)

    if resolved_quota is not None and resolved_quota.waitlist_limit > 0:
        region_waitlist_count = _other_enrollments(
            enrollment,
            status=EnrollmentStatuses.WAITLIST,
            region_quota_id=resolved_quota.uuid,
        ).count()
        if region_waitlist_count + 1 > resolved_quota.waitlist_limit:
            return TransitionRejection(TransitionRejectionReasons.REGION_WAITLIST_LIMIT_REACHED)

    return None


def always_allowed(enrollment, course, resolved_quota) -> Optional[TransitionRejection]:  # pylint: disable=unused-argument
    """
    Downgrades to PENDING_REGION or REJECTED consume no capacity.
    """
    return None


TARGET_STATUS_VALIDATORS = {
    EnrollmentStatuses.CONFIRMED: validate_confirmation,
    EnrollmentStatuses.WAITLIST: validate_waitlisting,
    EnrollmentStatuses.PENDING_REGION: always_allowed,
    EnrollmentStatuses.REJECTED: always_allowed,
}

# Every legal (from_status, to_status) edge, mapped to the rule that guards it.
TRANSITION_TABLE = {
    (from_status, to_status): TARGET_STATUS_VALIDATORS[to_status]
    for from_status, to_status in itertools.permutations(EnrollmentStatuses.ALL, 2)
}

# Moving a counted enrollment to another region quota without changing its status.
TRANSITION_TABLE.update({
    (counted_status, counted_status): TARGET_STATUS_VALIDATORS[counted_status]
    for counted_status in EnrollmentStatuses.COUNTED
})


def validate_transition(enrollment, course, target_status, resolved_quota) -> Optional[TransitionRejection]:
    """
    Validates moving ``enrollment`` to ``target_status`` while counting against ``resolved_quota``.

    Capacity counts always exclude the enrollment being moved and then add it
    back, so the checks hold whether or not it already occupies the bucket.

    Returns:
        None when the transition is allowed, else a ``TransitionRejection``.
    """
    validator = TRANSITION_TABLE.get((enrollment.status, target_status))
    if validator is None:
        return TransitionRejection(
            TransitionRejectionReasons.TRANSITION_NOT_ALLOWED.format(
                from_status=enrollment.status,
                to_status=target_status,
            )
        )
    return validator(enrollment, course, resolved_quota)

"""
Primary Python API for transitioning Enrollment records between statuses
and keeping region quota counters in line with them.
"""
import logging
from typing import NamedTuple, Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.db.models import Count, Q

from enrollment_manager.apps.courses.models import Course, CourseRegionQuota
from enrollment_manager.apps.notifications.tasks import send_enrollment_transition_notification
from enrollment_manager.constants import GENERIC_TRANSITION_ERROR_MESSAGE

from .constants import (
    DEFAULT_ELIGIBILITY_REASONS,
    ENROLLMENT_NOT_FOUND_MESSAGE,
    EnrollmentStatuses,
    TransitionMessages
)
from .deltas import accumulate_quota_deltas, apply_quota_deltas
from .exceptions import EnrollmentNotFound, EnrollmentPersistenceError, EnrollmentTransitionRejected
from .models import Enrollment
from .quotas import resolve_region_quota
from .validators import validate_transition
from .waitlist import resequence_waitlist

logger = logging.getLogger(__name__)


class TransitionResult(NamedTuple):
    enrollment: Enrollment
    message: str
    changed: bool
    quota_deltas: dict


class QuotaDrift(NamedTuple):
    quota: CourseRegionQuota
    expected_confirmed: int
    expected_waitlist: int


def transition_enrollment(
    enrollment_uuid,
    course_uuid,
    target_status,
    region_quota_id=None,
    notify_user=True,
    message: Optional[str] = None,
) -> TransitionResult:
    """
    Moves an enrollment to ``target_status`` as one atomic unit of work.

    Validates capacity, reassigns the enrollment's region quota, applies the
    resulting counter deltas and resequences the course waitlist. Nothing is
    written unless every step succeeds. When ``notify_user`` is true and the
    status changed, the enrollee is notified after the transaction commits.

    Requesting the enrollment's current status is a no-op, so retrying the
    same request after a failure is always safe.

    Raises:
        EnrollmentNotFound: the enrollment does not exist in the given course.
        EnrollmentTransitionRejected: a capacity or region rule forbids the transition.
        EnrollmentPersistenceError: the transition could not be committed.
    """
    try:
        with transaction.atomic():
            result = _transition_enrollment(
                enrollment_uuid,
                course_uuid,
                target_status,
                region_quota_id=region_quota_id,
                message=message,
            )
            if result.changed and notify_user and settings.ENROLLMENT_NOTIFICATIONS_ENABLED:
                transaction.on_commit(
                    _transition_notification_callback(result.enrollment.uuid, target_status, message),
                    robust=True,
                )
    except (DatabaseError, ValidationError) as exc:
        logger.exception(
            'Failed to transition enrollment %s of course %s to %s',
            enrollment_uuid,
            course_uuid,
            target_status,
        )
        raise EnrollmentPersistenceError(GENERIC_TRANSITION_ERROR_MESSAGE) from exc

    return result


def _transition_enrollment(enrollment_uuid, course_uuid, target_status, region_quota_id=None, message=None):
    """
    The body of ``transition_enrollment``. Must be called inside a transaction.
    """
    course = _lock_course(enrollment_uuid, course_uuid)
    enrollment = _lock_enrollment(enrollment_uuid, course)

    course_region_quotas = list(course.region_quotas.all())

    if enrollment.status == target_status and not _is_region_reassignment(
        enrollment, target_status, region_quota_id, course_region_quotas,
    ):
        return TransitionResult(enrollment, TransitionMessages.NO_CHANGES, False, {})

    resolved_quota_id = resolve_region_quota(
        region_quota_id,
        course_region_quotas,
        enrollment.state,
        enrollment.city,
    )
    resolved_quota = None
    if resolved_quota_id:
        resolved_quota = CourseRegionQuota.objects.select_for_update().get(uuid=resolved_quota_id)

    rejection = validate_transition(enrollment, course, target_status, resolved_quota)
    if rejection:
        logger.info(
            'Rejected transition of enrollment %s from %s to %s: %s',
            enrollment.uuid,
            enrollment.status,
            target_status,
            rejection.reason,
        )
        raise EnrollmentTransitionRejected(rejection.reason, rejection.http_status_code)

    old_status = enrollment.status
    old_quota_id = enrollment.region_quota_id

    enrollment.status = target_status
    enrollment.region_quota = resolved_quota
    enrollment.waitlist_position = None

    if target_status == EnrollmentStatuses.CONFIRMED:
        enrollment.eligibility_reason = None
        outcome = TransitionMessages.CONFIRMED
    elif target_status == EnrollmentStatuses.WAITLIST:
        waitlist_count = Enrollment.objects.filter(
            course_id=course.uuid,
            status=EnrollmentStatuses.WAITLIST,
        ).exclude(uuid=enrollment.uuid).count()
        enrollment.waitlist_position = waitlist_count + 1
        enrollment.eligibility_reason = message or DEFAULT_ELIGIBILITY_REASONS[target_status]
        outcome = TransitionMessages.MOVED_TO_WAITLIST
    else:
        enrollment.eligibility_reason = message or DEFAULT_ELIGIBILITY_REASONS[target_status]
        outcome = TransitionMessages.STATUS_UPDATED

    enrollment.save()

    quota_deltas = accumulate_quota_deltas(old_status, target_status, old_quota_id, resolved_quota_id)
    apply_quota_deltas(quota_deltas)

    resequence_waitlist(course.uuid)
    enrollment.refresh_from_db()

    logger.info(
        'Transitioned enrollment %s of course %s from %s to %s (region quota %s -> %s)',
        enrollment.uuid,
        course.uuid,
        old_status,
        target_status,
        old_quota_id,
        resolved_quota_id,
    )
    return TransitionResult(enrollment, outcome, True, quota_deltas)


def _lock_course(enrollment_uuid, course_uuid):
    """
    Row-locks the course. Every transition of a course takes this lock first, so
    transitions within one course run one at a time and course-wide counts stay exact.
    """
    try:
        return Course.objects.select_for_update().get(uuid=course_uuid)
    except (Course.DoesNotExist, ValidationError, ValueError) as exc:
        raise EnrollmentNotFound(
            ENROLLMENT_NOT_FOUND_MESSAGE.format(enrollment_uuid=enrollment_uuid, course_uuid=course_uuid)
        ) from exc


def _lock_enrollment(enrollment_uuid, course):
    """
    Fetches and row-locks the enrollment, verifying it belongs to the given course.
    """
    try:
        enrollment = Enrollment.objects.select_for_update().get(
            uuid=enrollment_uuid,
            course_id=course.uuid,
        )
    except (Enrollment.DoesNotExist, ValidationError, ValueError) as exc:
        raise EnrollmentNotFound(
            ENROLLMENT_NOT_FOUND_MESSAGE.format(enrollment_uuid=enrollment_uuid, course_uuid=course.uuid)
        ) from exc

    enrollment.course = course
    return enrollment


def _is_region_reassignment(enrollment, target_status, region_quota_id, course_region_quotas):
    """
    A same-status request is a region reassignment when it explicitly names another
    quota of the course for a CONFIRMED or WAITLIST enrollment. Anything else is a no-op.
    """
    if not region_quota_id or target_status not in EnrollmentStatuses.COUNTED:
        return False
    requested = str(region_quota_id).lower()
    if requested == str(enrollment.region_quota_id):
        return False
    return any(str(quota.uuid) == requested for quota in course_region_quotas)


def _transition_notification_callback(enrollment_uuid, target_status, message):
    """
    Returns the on-commit hook that enqueues the enrollee notification.
    The hook must carry a ``__qualname__``: the robust on-commit runner logs failures by it.
    """
    def enqueue_transition_notification():
        send_enrollment_transition_notification.delay(str(enrollment_uuid), target_status, message)

    return enqueue_transition_notification


def reconcile_quota_counts(course=None, commit=True):
    """
    Recomputes every region quota's counters from its Enrollment rows.

    Args:
        course: Limit reconciliation to the quotas of this ``Course``.
        commit: When false, only report the drift.

    Returns:
        A list of ``QuotaDrift`` records, one per quota whose stored counters were wrong.
    """
    quotas = CourseRegionQuota.objects.order_by('course_id', 'created')
    if course is not None:
        quotas = quotas.filter(course=course)

    drifts = []
    for quota_uuid in quotas.values_list('uuid', flat=True):
        with transaction.atomic():
            quota = CourseRegionQuota.objects.select_for_update().get(uuid=quota_uuid)
            expected = Enrollment.objects.filter(region_quota_id=quota_uuid).aggregate(
                confirmed=Count('uuid', filter=Q(status=EnrollmentStatuses.CONFIRMED)),
                waitlist=Count('uuid', filter=Q(status=EnrollmentStatuses.WAITLIST)),
            )
            if quota.current_count == expected['confirmed'] and quota.waitlist_count == expected['waitlist']:
                continue

            logger.warning(
                'Region quota %s of course %s has drifted: current_count %s (expected %s), '
                'waitlist_count %s (expected %s)',
                quota.uuid,
                quota.course_id,
                quota.current_count,
                expected['confirmed'],
                quota.waitlist_count,
                expected['waitlist'],
            )
            drifts.append(QuotaDrift(quota, expected['confirmed'], expected['waitlist']))

            if commit:
                CourseRegionQuota.objects.filter(uuid=quota_uuid).update(
                    current_count=expected['confirmed'],
                    waitlist_count=expected['waitlist'],
                )

    return drifts

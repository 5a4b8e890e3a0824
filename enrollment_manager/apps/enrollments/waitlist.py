"""
Waitlist ordering for a course.
"""
import logging

from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses
from enrollment_manager.apps.enrollments.models import Enrollment

logger = logging.getLogger(__name__)


def resequence_waitlist(course_uuid):
    """
    Recomputes ``waitlist_position`` for every waitlisted enrollment of a course.

    Positions are the 1-based rank by creation time, with uuid as a tiebreaker.
    Only enrollments whose position actually changed are written. Must run in
    the same transaction as the enrollment write it follows.

    Returns:
        The list of enrollments whose position changed.
    """
    waitlisted = Enrollment.objects.filter(
        course_id=course_uuid,
        status=EnrollmentStatuses.WAITLIST,
    ).order_by('created', 'uuid')

    changed = []
    for position, enrollment in enumerate(waitlisted, start=1):
        if enrollment.waitlist_position != position:
            enrollment.waitlist_position = position
            changed.append(enrollment)

    if changed:
        Enrollment.bulk_update(changed, ['waitlist_position'])
        logger.info(
            'Resequenced %s waitlisted enrollment(s) for course %s',
            len(changed),
            course_uuid,
        )
    return changed

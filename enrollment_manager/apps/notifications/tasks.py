"""
Tasks for the notifications app.
"""

import logging

from celery import shared_task
from django.conf import settings

from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses
from enrollment_manager.apps.enrollments.models import Enrollment
from enrollment_manager.apps.notifications import constants
from enrollment_manager.apps.notifications.api import notify
from enrollment_manager.tasks import LoggedTaskWithRetry

logger = logging.getLogger(__name__)


# pylint: disable=abstract-method
class SendEnrollmentTransitionNotificationTask(LoggedTaskWithRetry):
    """
    Base class for the ``send_enrollment_transition_notification`` task.
    """
    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """
        A failed notification never affects the committed transition, so it is only logged.
        """
        logger.error(
            f'Enrollment transition notification task failed. '
            f'Enrollment ID: {args[0] if args else None}, '
            f'Exception: {exc}'
        )
        if self.request.retries == settings.TASK_MAX_RETRIES:
            logger.error(
                f'The task id: {task_id} failure resulted from exceeding the locally defined max number of retries '
                '(settings.TASK_MAX_RETRIES).'
            )


def build_transition_notification(enrollment, target_status, message=None):
    """
    Returns the ``(kind, title, body, link)`` of the notification for an enrollment
    that moved to ``target_status``. A provided ``message`` replaces the default body.
    """
    course = enrollment.course
    link = settings.ENROLLMENT_COURSE_LINK_TEMPLATE.format(course_uuid=course.uuid)

    if target_status == EnrollmentStatuses.CONFIRMED:
        kind = constants.NotificationKinds.ENROLLED
        title = constants.ENROLLMENT_APPROVED_TITLE
        default_body = constants.ENROLLMENT_CONFIRMED_BODY
    elif target_status == EnrollmentStatuses.WAITLIST:
        kind = constants.NotificationKinds.UPDATED
        title = constants.ENROLLMENT_UPDATED_TITLE
        default_body = constants.ENROLLMENT_WAITLISTED_BODY
    else:
        kind = constants.NotificationKinds.UPDATED
        title = constants.ENROLLMENT_UPDATED_TITLE
        default_body = constants.ENROLLMENT_UPDATED_BODY

    body = message or default_body.format(course_title=course.title, status=target_status)
    return kind, title, body, link


@shared_task(base=SendEnrollmentTransitionNotificationTask)
def send_enrollment_transition_notification(enrollment_uuid, target_status, message=None):
    """
    Notify the enrollee that their enrollment moved to a new status.

    Args:
        enrollment_uuid: (string) the transitioned enrollment uuid
        target_status: (string) the status the enrollment moved to
        message: (string) optional administrator message used as the body
    """
    try:
        enrollment = Enrollment.objects.select_related('course').get(uuid=enrollment_uuid)
    except Enrollment.DoesNotExist:
        logger.warning(f'Enrollment with uuid: {enrollment_uuid} does not exist.')
        raise

    kind, title, body, link = build_transition_notification(enrollment, target_status, message)
    notification = notify(enrollment.user_id, kind, title, body, link)
    logger.info(
        f'Sent {kind} notification {notification.uuid} for enrollment {enrollment_uuid} moving to {target_status}'
    )

"""
Python API for creating in-app notifications.
"""
import logging

from enrollment_manager.apps.notifications.models import Notification

logger = logging.getLogger(__name__)


def notify(user_id, kind, title, body, link=None):
    """
    Creates an in-app notification for the given user.

    Returns:
        The created ``Notification``.
    """
    notification = Notification.objects.create(
        user_id=user_id,
        kind=kind,
        title=title,
        body=body,
        link=link,
    )
    logger.info('Created %s notification %s for user %s', kind, notification.uuid, user_id)
    return notification

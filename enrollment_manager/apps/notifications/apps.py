"""
Initialization app for enrollment_manager.apps.notifications.
"""

from django.apps import AppConfig


class NotificationsConfig(AppConfig):
    """
    Application Configuration for the notifications app.
    """

    name = 'enrollment_manager.apps.notifications'

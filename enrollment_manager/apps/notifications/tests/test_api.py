"""
Tests for the ``api.py`` module of the notifications app.
"""
from django.test import TestCase

from enrollment_manager.apps.core.tests.factories import UserFactory

from ..api import notify
from ..constants import NotificationKinds
from ..models import Notification


class TestNotify(TestCase):
    """
    Tests for ``notify``.
    """

    def test_creates_unread_notification(self):
        user = UserFactory()

        notification = notify(user.id, NotificationKinds.UPDATED, 'Title', 'Body', link='/course/abc')

        self.assertEqual(Notification.objects.get(), notification)
        self.assertEqual(notification.user, user)
        self.assertEqual(notification.link, '/course/abc')
        self.assertFalse(notification.read)

    def test_link_is_optional(self):
        user = UserFactory()

        notification = notify(user.id, NotificationKinds.ENROLLED, 'Title', 'Body')

        self.assertIsNone(notification.link)

""" Models for notifications. """

from uuid import uuid4

from django.conf import settings
from django.db import models
from model_utils.models import TimeStampedModel

from enrollment_manager.apps.notifications.constants import NotificationKinds


class Notification(TimeStampedModel):
    """
    An in-app message shown to a user.

    .. no_pii: This model has no PII
    """

    uuid = models.UUIDField(
        primary_key=True,
        default=uuid4,
        editable=False,
        unique=True,
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='notifications',
        on_delete=models.CASCADE,
    )

    kind = models.CharField(
        max_length=32,
        choices=NotificationKinds.CHOICES,
    )

    title = models.CharField(
        max_length=255,
    )

    body = models.TextField()

    link = models.CharField(
        max_length=255,
        null=True,
        blank=True,
    )

    read = models.BooleanField(
        default=False,
    )

    class Meta:
        ordering = ['-created']
        indexes = [
            models.Index(fields=['user', 'read'], name='notificatio_user_id_6e1f3b_idx'),
        ]

    def __str__(self):
        return f'<Notification {self.uuid}: {self.kind} for user {self.user_id}>'

""" Core models. """

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _


class User(AbstractUser):
    """
    Custom user model for administrators and enrollees.

    .. pii: Stores full name, username, and email address for a user.
    .. pii_types: name, username, email_address
    .. pii_retirement: local_api

    """
    full_name = models.CharField(_('Full Name'), max_length=255, blank=True, null=True)

    class Meta:
        get_latest_by = 'date_joined'
        indexes = [
            models.Index(fields=['username'], name='core_user_usernam_c8d9ed_idx'),
            models.Index(fields=['email'], name='core_user_email_8f6d2c_idx'),
        ]

    def get_full_name(self):
        return self.full_name or super().get_full_name()

    def __str__(self):
        return f'{self.email}'

""" Admin configuration for notifications models. """

from django.contrib import admin
from djangoql.admin import DjangoQLSearchMixin

from enrollment_manager.apps.notifications import models


@admin.register(models.Notification)
class NotificationAdmin(DjangoQLSearchMixin, admin.ModelAdmin):
    """
    Admin configuration for Notifications.
    """
    list_display = (
        'uuid',
        'user',
        'kind',
        'title',
        'read',
        'created',
    )
    list_filter = (
        'kind',
        'read',
    )
    search_fields = (
        'uuid',
        'user__email',
        'title',
    )
    ordering = ['-created']
    readonly_fields = (
        'created',
        'modified',
    )
    autocomplete_fields = [
        'user',
    ]

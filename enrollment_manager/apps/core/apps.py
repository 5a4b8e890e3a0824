""" App config for the core module. """

from django.apps import AppConfig


class CoreAppConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'enrollment_manager.apps.core'

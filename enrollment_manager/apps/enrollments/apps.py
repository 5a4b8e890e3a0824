"""
Initialization app for enrollment_manager.apps.enrollments.
"""

from django.apps import AppConfig


class EnrollmentsConfig(AppConfig):
    """
    Application Configuration for the enrollments app.
    """

    name = 'enrollment_manager.apps.enrollments'

"""
Initialization app for enrollment_manager.apps.courses.
"""

from django.apps import AppConfig


class CoursesConfig(AppConfig):
    """
    Application Configuration for the courses app.
    """

    name = 'enrollment_manager.apps.courses'
    default_auto_field = 'django.db.models.AutoField'

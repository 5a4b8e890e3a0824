"""
Top-level views module for convenience of maintaining imports of v1 views.
"""
from .enrollments import CourseEnrollmentAdminViewSet

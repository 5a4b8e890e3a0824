"""
Module for filters across all enrollment-manager apps.
"""
from .base import HelpfulFilterSet, NoFilterOnDetailBackend
from .enrollments import EnrollmentFilter

"""
API serializers module.
"""
from .enrollments import (
    EnrollmentRegionQuotaSerializer,
    EnrollmentResponseSerializer,
    EnrollmentTransitionErrorSerializer,
    EnrollmentTransitionRequestSerializer,
    EnrollmentTransitionResponseSerializer
)

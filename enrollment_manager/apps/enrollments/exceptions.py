"""
Exceptions that can be raised by the ``enrollments`` app.
"""
from rest_framework import status

from enrollment_manager.apps.enrollments.constants import TransitionErrorKinds


class EnrollmentTransitionError(Exception):
    """
    Base exception for failed enrollment transitions.
    """
    error_kind = TransitionErrorKinds.INTERNAL
    default_http_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message, http_status_code=None):
        super().__init__(message)
        self.message = message
        self.http_status_code = http_status_code or self.default_http_status_code


class EnrollmentNotFound(EnrollmentTransitionError):
    """
    Raised when the enrollment does not exist or belongs to a different course.
    """
    error_kind = TransitionErrorKinds.NOT_FOUND
    default_http_status_code = status.HTTP_404_NOT_FOUND


class EnrollmentTransitionRejected(EnrollmentTransitionError):
    """
    Raised when a capacity or region rule forbids the requested transition.
    The message is user-facing and names the limit that was hit.
    """
    error_kind = TransitionErrorKinds.REJECTED
    default_http_status_code = status.HTTP_400_BAD_REQUEST


class EnrollmentPersistenceError(EnrollmentTransitionError):
    """
    Raised when the transition could not be committed. Retrying the same
    request is safe.
    """
    error_kind = TransitionErrorKinds.INTERNAL
    default_http_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

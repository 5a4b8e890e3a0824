"""
API Filters for resources defined in the ``enrollments`` app.
"""
from django_filters import ChoiceFilter

from ...enrollments.constants import EnrollmentStatuses
from ...enrollments.models import Enrollment
from .base import HelpfulFilterSet

STATUS_HELP_TEXT = (
    'Choose from the following valid statuses: ' +
    ', '.join([choice for choice, _ in EnrollmentStatuses.CHOICES])
)


class EnrollmentFilter(HelpfulFilterSet):
    """
    Base filter for Enrollment views.
    """
    status = ChoiceFilter(
        field_name='status',
        choices=EnrollmentStatuses.CHOICES,
        help_text=STATUS_HELP_TEXT,
    )

    class Meta:
        model = Enrollment
        fields = {
            'region_quota': ['exact'],
            'state': ['exact'],
        }

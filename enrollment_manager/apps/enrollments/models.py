""" Models for enrollments. """

from uuid import uuid4

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel
from simple_history.models import HistoricalRecords
from simple_history.utils import bulk_update_with_history

from enrollment_manager.apps.courses.models import Course, CourseRegionQuota
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses


class Enrollment(TimeStampedModel):
    """
    A student's request to take a course, and where it currently stands.

    Enrollments are created by the intake flow and from then on only change
    status through ``enrollments.api.transition_enrollment``. They are never
    deleted by this app.

    .. pii: Stores the enrollee's declared state and city.
    .. pii_types: other
    .. pii_retirement: local_api
    """

    uuid = models.UUIDField(
        primary_key=True,
        default=uuid4,
        editable=False,
        unique=True,
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name='enrollments',
        on_delete=models.CASCADE,
        db_index=True,
    )

    course = models.ForeignKey(
        Course,
        related_name='enrollments',
        on_delete=models.CASCADE,
    )

    status = models.CharField(
        max_length=32,
        choices=EnrollmentStatuses.CHOICES,
        default=EnrollmentStatuses.PENDING_REGION,
        db_index=True,
    )

    region_quota = models.ForeignKey(
        CourseRegionQuota,
        related_name='enrollments',
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        help_text=_("The region bucket this enrollment currently counts against, if any."),
    )

    waitlist_position = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text=_("1-based rank among the course's waitlisted enrollments, by creation time."),
    )

    eligibility_reason = models.TextField(
        null=True,
        blank=True,
        help_text=_("Explanation of the current status, shown to the enrollee."),
    )

    state = models.CharField(
        max_length=2,
        null=True,
        blank=True,
        help_text=_("The enrollee's declared two-letter state (UF) code."),
    )

    city = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text=_("The enrollee's declared city."),
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['-created']
        constraints = [
            models.UniqueConstraint(
                fields=['user', 'course'],
                name='enrollments_unique_user_course',
            ),
        ]
        indexes = [
            models.Index(fields=['course', 'status'], name='enrollments_course__0b4f57_idx'),
            models.Index(fields=['region_quota', 'status'], name='enrollments_region__4f2a1c_idx'),
        ]

    def __str__(self):
        return f'<Enrollment {self.uuid}: user {self.user_id} in course {self.course_id} ({self.status})>'

    def clean(self):
        is_waitlisted = self.status == EnrollmentStatuses.WAITLIST
        if is_waitlisted and self.waitlist_position is None:
            raise ValidationError('Waitlisted enrollments require a waitlist position.')
        if not is_waitlisted and self.waitlist_position is not None:
            raise ValidationError('Only waitlisted enrollments can hold a waitlist position.')

        if self.region_quota_id and self.region_quota.course_id != self.course_id:
            raise ValidationError(
                f'Region quota {self.region_quota_id} does not belong to course {self.course_id}.'
            )

        return super().clean()

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    @classmethod
    def bulk_update(cls, enrollments, field_names, batch_size=settings.WAITLIST_RESEQUENCE_BATCH_SIZE):
        """
        Queryset and bulk updates skip the post_save signal that django-simple-history
        records history with, so bulk writes go through ``bulk_update_with_history``.

        https://django-simple-history.readthedocs.io/en/latest/common_issues.html#bulk-creating-and-queryset-updating
        """
        bulk_update_with_history(enrollments, cls, field_names, batch_size=batch_size)

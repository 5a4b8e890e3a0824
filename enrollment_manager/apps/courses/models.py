"""
Models for the courses app.

Course and region quota records are created and edited by course configuration
flows. The enrollment transition engine only reads ``Course`` and only mutates the
``current_count``/``waitlist_count`` counters of ``CourseRegionQuota`` through
relative updates.
"""
from uuid import uuid4

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _
from model_utils.models import TimeStampedModel
from simple_history.models import HistoricalRecords

from enrollment_manager.utils import normalize_city_name, normalize_state_code


class Course(TimeStampedModel):
    """
    A course that students enroll in, along with the capacity rules that govern admission.

    .. no_pii: This model has no PII
    """

    uuid = models.UUIDField(
        primary_key=True,
        default=uuid4,
        editable=False,
        unique=True,
    )

    title = models.CharField(
        max_length=255,
    )

    max_enrollments = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text=_(
            "Course-wide cap on confirmed enrollments. Leave empty for no cap."
        ),
    )

    waitlist_enabled = models.BooleanField(
        default=False,
        help_text=_(
            "Whether enrollments may be placed on this course's waitlist."
        ),
    )

    waitlist_limit = models.PositiveIntegerField(
        default=0,
        help_text=_(
            "Course-wide cap on waitlisted enrollments. 0 means unlimited."
        ),
    )

    region_restriction_enabled = models.BooleanField(
        default=False,
        help_text=_(
            "Whether confirmed enrollments are governed by region quotas."
        ),
    )

    allow_all_regions = models.BooleanField(
        default=True,
        help_text=_(
            "If false and region restriction is enabled, enrollments without a matching "
            "region quota cannot be confirmed."
        ),
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['title']

    def __str__(self):
        return f'<Course {self.uuid}: {self.title}>'


class CourseRegionQuota(TimeStampedModel):
    """
    A capacity bucket of a course, keyed by state and optionally by city.

    A quota with an empty city covers the whole state. ``current_count`` and
    ``waitlist_count`` mirror the number of CONFIRMED and WAITLIST enrollments
    assigned to this bucket.

    .. no_pii: This model has no PII
    """

    uuid = models.UUIDField(
        primary_key=True,
        default=uuid4,
        editable=False,
        unique=True,
    )

    course = models.ForeignKey(
        Course,
        related_name='region_quotas',
        on_delete=models.CASCADE,
    )

    state = models.CharField(
        max_length=2,
        help_text=_("Two-letter state (UF) code."),
    )

    city = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text=_("Leave empty for a quota covering the whole state."),
    )

    limit = models.PositiveIntegerField(
        help_text=_("Cap on confirmed enrollments in this region."),
    )

    waitlist_limit = models.PositiveIntegerField(
        default=0,
        help_text=_("Cap on waitlisted enrollments in this region. 0 means unlimited."),
    )

    current_count = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text=_("Live count of confirmed enrollments in this region."),
    )

    waitlist_count = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        help_text=_("Live count of waitlisted enrollments in this region."),
    )

    class Meta:
        ordering = ['created']
        indexes = [
            models.Index(fields=['course', 'state'], name='courses_quota_course_state_idx'),
        ]

    def __str__(self):
        return f'<CourseRegionQuota {self.uuid}: {self.region_label} for course {self.course_id}>'

    @property
    def is_state_wide(self):
        return normalize_city_name(self.city) is None

    @property
    def region_label(self):
        if self.is_state_wide:
            return self.state
        return f'{self.city}/{self.state}'

    def normalize_region(self):
        """
        Stores the state upper-cased and a blank city as None.
        """
        self.state = normalize_state_code(self.state) or ''
        if self.city is not None:
            self.city = self.city.strip() or None

    def clean(self):
        self.normalize_region()

        siblings = CourseRegionQuota.objects.filter(
            course_id=self.course_id,
            state__iexact=self.state,
        ).exclude(uuid=self.uuid)

        for sibling in siblings:
            if sibling.is_state_wide and self.is_state_wide:
                raise ValidationError(
                    f'Course {self.course_id} already has a state-wide quota for {self.state}.'
                )
            if not self.is_state_wide and normalize_city_name(sibling.city) == normalize_city_name(self.city):
                raise ValidationError(
                    f'Course {self.course_id} already has a quota for {self.region_label}.'
                )

        return super().clean()

    def save(self, *args, **kwargs):
        self.normalize_region()
        self.full_clean()
        return super().save(*args, **kwargs)

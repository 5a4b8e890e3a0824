""" Admin configuration for courses models. """

from django.contrib import admin
from djangoql.admin import DjangoQLSearchMixin
from simple_history.admin import SimpleHistoryAdmin

from enrollment_manager.apps.courses import models


class CourseRegionQuotaInline(admin.TabularInline):
    """
    Inline admin for editing the region quotas of a course.
    """
    model = models.CourseRegionQuota

    fields = (
        'state',
        'city',
        'limit',
        'waitlist_limit',
        'current_count',
        'waitlist_count',
    )

    # Counters are owned by the enrollment transition engine.
    readonly_fields = (
        'current_count',
        'waitlist_count',
    )

    ordering = ['state', 'city']

    extra = 0


@admin.register(models.Course)
class CourseAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    """
    Admin configuration for Courses.
    """
    list_display = (
        'uuid',
        'title',
        'max_enrollments',
        'waitlist_enabled',
        'waitlist_limit',
        'region_restriction_enabled',
        'allow_all_regions',
        'modified',
    )
    search_fields = (
        'uuid',
        'title',
    )
    list_filter = (
        'waitlist_enabled',
        'region_restriction_enabled',
    )
    ordering = ['-modified']
    readonly_fields = (
        'created',
        'modified',
    )
    inlines = [CourseRegionQuotaInline]


@admin.register(models.CourseRegionQuota)
class CourseRegionQuotaAdmin(DjangoQLSearchMixin, admin.ModelAdmin):
    """
    Admin configuration for CourseRegionQuotas.
    """
    list_display = (
        'uuid',
        'course',
        'state',
        'city',
        'limit',
        'current_count',
        'waitlist_limit',
        'waitlist_count',
    )
    search_fields = (
        'uuid',
        'course__title',
        'state',
        'city',
    )
    list_filter = ('state',)
    readonly_fields = (
        'current_count',
        'waitlist_count',
        'created',
        'modified',
    )
    autocomplete_fields = [
        'course',
    ]

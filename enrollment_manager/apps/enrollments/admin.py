""" Admin configuration for enrollments models. """

from django.contrib import admin, messages
from djangoql.admin import DjangoQLSearchMixin
from simple_history.admin import SimpleHistoryAdmin

from enrollment_manager.apps.enrollments import api, models
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses
from enrollment_manager.apps.enrollments.exceptions import EnrollmentTransitionError


@admin.register(models.Enrollment)
class EnrollmentAdmin(DjangoQLSearchMixin, SimpleHistoryAdmin):
    """
    Admin configuration for Enrollments.

    Status, region quota and waitlist position are read-only here; they only
    change through the transition actions so that quota counters stay correct.
    """
    list_display = (
        'uuid',
        'user',
        'course',
        'status',
        'region_quota',
        'waitlist_position',
        'created',
    )

    ordering = ['-created']

    list_filter = (
        'status',
    )

    search_fields = (
        'uuid',
        'user__email',
        'course__title',
    )

    readonly_fields = (
        'uuid',
        'status',
        'region_quota',
        'waitlist_position',
        'eligibility_reason',
        'created',
        'modified',
    )

    fields = (
        'uuid',
        'user',
        'course',
        'state',
        'city',
        'status',
        'region_quota',
        'waitlist_position',
        'eligibility_reason',
        'created',
        'modified',
    )

    autocomplete_fields = [
        'user',
        'course',
    ]

    actions = [
        'confirm_enrollments',
        'waitlist_enrollments',
        'reject_enrollments',
    ]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'course', 'region_quota')

    def _transition_selected(self, request, queryset, target_status):
        """
        Transitions each selected enrollment on its own, reporting successes and failures.
        """
        moved = 0
        for enrollment in queryset.order_by('created'):
            try:
                result = api.transition_enrollment(enrollment.uuid, enrollment.course_id, target_status)
            except EnrollmentTransitionError as exc:
                self.message_user(request, f'{enrollment.uuid}: {exc.message}', messages.ERROR)
                continue
            if result.changed:
                moved += 1

        self.message_user(request, f'Moved {moved} enrollment(s) to {target_status}.', messages.SUCCESS)

    @admin.action(description='Confirm selected enrollments')
    def confirm_enrollments(self, request, queryset):
        self._transition_selected(request, queryset, EnrollmentStatuses.CONFIRMED)

    @admin.action(description='Move selected enrollments to the waitlist')
    def waitlist_enrollments(self, request, queryset):
        self._transition_selected(request, queryset, EnrollmentStatuses.WAITLIST)

    @admin.action(description='Reject selected enrollments')
    def reject_enrollments(self, request, queryset):
        self._transition_selected(request, queryset, EnrollmentStatuses.REJECTED)

"""
Serializers for the `Enrollment` model.
"""
from rest_framework import serializers

from enrollment_manager.apps.courses.models import CourseRegionQuota
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses, TransitionErrorKinds
from enrollment_manager.apps.enrollments.models import Enrollment


class EnrollmentRegionQuotaSerializer(serializers.ModelSerializer):
    """
    A read-only Serializer for the region quota an enrollment counts against.
    """

    class Meta:
        model = CourseRegionQuota
        fields = [
            'uuid',
            'state',
            'city',
            'limit',
            'waitlist_limit',
            'current_count',
            'waitlist_count',
        ]
        read_only_fields = fields


class EnrollmentResponseSerializer(serializers.ModelSerializer):
    """
    A read-only Serializer for responding to requests for ``Enrollment`` records.
    """
    user_email = serializers.EmailField(source='user.email', read_only=True)
    region_quota = EnrollmentRegionQuotaSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Enrollment
        fields = [
            'uuid',
            'user',
            'user_email',
            'course',
            'status',
            'region_quota',
            'waitlist_position',
            'eligibility_reason',
            'state',
            'city',
            'created',
            'modified',
        ]
        read_only_fields = fields


# pylint: disable=abstract-method
class EnrollmentTransitionRequestSerializer(serializers.Serializer):
    """
    Request Serializer to validate a requested enrollment status transition.
    """
    status = serializers.ChoiceField(
        choices=EnrollmentStatuses.CHOICES,
        help_text='The status to move the enrollment to.',
    )
    region_quota_id = serializers.UUIDField(
        required=False,
        allow_null=True,
        help_text=(
            'Region quota to assign explicitly. When omitted, the quota is resolved '
            "from the enrollee's declared state and city."
        ),
    )
    notify_user = serializers.BooleanField(
        required=False,
        default=True,
        help_text='Whether to notify the enrollee once the transition is committed.',
    )
    message = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        help_text='Optional message stored as the eligibility reason and used as the notification body.',
    )


# pylint: disable=abstract-method
class EnrollmentTransitionResponseSerializer(serializers.Serializer):
    """
    Response Serializer for a successful enrollment status transition.
    """
    enrollment = EnrollmentResponseSerializer()
    message = serializers.CharField(
        help_text='One of "no changes", "confirmed", "moved to waitlist" or "status updated".',
    )


# pylint: disable=abstract-method
class EnrollmentTransitionErrorSerializer(serializers.Serializer):
    """
    Response Serializer for a failed enrollment status transition.
    """
    error_reason = serializers.CharField(
        help_text='Why the transition failed. Capacity rejections name the limit that was hit.',
    )
    error_kind = serializers.ChoiceField(
        choices=[
            TransitionErrorKinds.NOT_FOUND,
            TransitionErrorKinds.REJECTED,
            TransitionErrorKinds.INTERNAL,
        ],
    )

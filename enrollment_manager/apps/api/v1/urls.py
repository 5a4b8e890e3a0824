""" API v1 URLs. """

from rest_framework.routers import DefaultRouter

from enrollment_manager.apps.api.v1 import views

app_name = 'v1'

router = DefaultRouter()

router.register(
    r'courses/(?P<course_uuid>[^/.]+)/enrollments',
    views.CourseEnrollmentAdminViewSet,
    'course-enrollments',
)

urlpatterns = router.urls

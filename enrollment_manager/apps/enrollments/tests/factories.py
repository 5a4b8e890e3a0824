"""
Factoryboy factories.
"""
from uuid import uuid4

import factory

from enrollment_manager.apps.core.tests.factories import UserFactory
from enrollment_manager.apps.courses.tests.factories import CourseFactory
from enrollment_manager.apps.enrollments.constants import EnrollmentStatuses
from enrollment_manager.apps.enrollments.models import Enrollment


class EnrollmentFactory(factory.django.DjangoModelFactory):
    """
    Test factory for the `Enrollment` model.

    Region quota counters are not maintained by this factory; tests that
    create CONFIRMED or WAITLIST enrollments against a quota set its counters.
    """
    uuid = factory.LazyFunction(uuid4)
    user = factory.SubFactory(UserFactory)
    course = factory.SubFactory(CourseFactory)
    status = EnrollmentStatuses.PENDING_REGION
    region_quota = None
    waitlist_position = None
    eligibility_reason = None
    state = None
    city = None

    class Meta:
        model = Enrollment

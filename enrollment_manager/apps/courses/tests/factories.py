"""
Factoryboy factories.
"""
from uuid import uuid4

import factory
from faker import Faker

from enrollment_manager.apps.courses.models import Course, CourseRegionQuota

FAKER = Faker()


class CourseFactory(factory.django.DjangoModelFactory):
    """
    Test factory for the `Course` model.
    """
    uuid = factory.LazyFunction(uuid4)
    title = factory.LazyAttribute(lambda _: FAKER.catch_phrase())
    max_enrollments = None
    waitlist_enabled = False
    waitlist_limit = 0
    region_restriction_enabled = False
    allow_all_regions = True

    class Meta:
        model = Course


class CourseRegionQuotaFactory(factory.django.DjangoModelFactory):
    """
    Test factory for the `CourseRegionQuota` model.
    """
    uuid = factory.LazyFunction(uuid4)
    course = factory.SubFactory(CourseFactory)
    state = 'SP'
    city = None
    limit = 10
    waitlist_limit = 0
    current_count = 0
    waitlist_count = 0

    class Meta:
        model = CourseRegionQuota

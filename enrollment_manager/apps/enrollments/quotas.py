"""
Resolution of the region quota that should govern an enrollment.
"""
from enrollment_manager.utils import normalize_city_name, normalize_state_code


def resolve_region_quota(candidate_quota_id, course_region_quotas, enrollee_state, enrollee_city):
    """
    Pick the region quota of a course that an enrollment should count against.

    Args:
        candidate_quota_id: An explicitly requested quota id (UUID or its string form), or None.
        course_region_quotas: The ``CourseRegionQuota`` records of the enrollment's course,
            in creation order.
        enrollee_state: The enrollee's declared state, or None.
        enrollee_city: The enrollee's declared city, or None.

    Returns:
        The uuid of the resolved quota, or None when no bucket applies.

    An explicit candidate that belongs to the course always wins. Otherwise an
    exact state and city match is preferred over the state-wide bucket.
    """
    course_region_quotas = list(course_region_quotas)

    if candidate_quota_id:
        for quota in course_region_quotas:
            if str(quota.uuid) == str(candidate_quota_id):
                return quota.uuid

    state = normalize_state_code(enrollee_state)
    if not state:
        return None
    city = normalize_city_name(enrollee_city)

    in_state = [
        quota for quota in course_region_quotas
        if normalize_state_code(quota.state) == state
    ]

    if city:
        for quota in in_state:
            if normalize_city_name(quota.city) == city:
                return quota.uuid

    for quota in in_state:
        if quota.is_state_wide:
            return quota.uuid

    return None

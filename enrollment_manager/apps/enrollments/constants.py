""" Constants for the enrollments app. """


class EnrollmentStatuses:
    """ Possible statuses of an enrollment. """

    PENDING_REGION = 'PENDING_REGION'
    CONFIRMED = 'CONFIRMED'
    WAITLIST = 'WAITLIST'
    REJECTED = 'REJECTED'

    CHOICES = (
        (PENDING_REGION, "Pending region"),
        (CONFIRMED, "Confirmed"),
        (WAITLIST, "Waitlist"),
        (REJECTED, "Rejected"),
    )

    ALL = (PENDING_REGION, CONFIRMED, WAITLIST, REJECTED)

    # Statuses that occupy a slot in a region quota's counters.
    COUNTED = (CONFIRMED, WAITLIST)


class TransitionMessages:
    """ Outcome messages returned by a successful transition. """

    NO_CHANGES = 'no changes'
    CONFIRMED = 'confirmed'
    MOVED_TO_WAITLIST = 'moved to waitlist'
    STATUS_UPDATED = 'status updated'


class TransitionErrorKinds:
    """ Kinds of transition failures, as surfaced to API consumers. """

    NOT_FOUND = 'NotFound'
    REJECTED = 'Rejected'
    INTERNAL = 'Internal'


class TransitionRejectionReasons:
    """ User-facing reasons a transition can be rejected with. """

    REGION_REQUIRED = 'The enrollment must be associated with a valid region.'
    COURSE_CAPACITY_REACHED = 'Course capacity reached.'
    REGION_CAPACITY_REACHED = 'Region capacity reached for the selected region.'
    WAITLIST_DISABLED = 'Waitlist is not enabled for this course.'
    WAITLIST_LIMIT_REACHED = 'Waitlist limit reached.'
    REGION_WAITLIST_LIMIT_REACHED = 'Waitlist limit reached for the selected region.'
    TRANSITION_NOT_ALLOWED = 'Transition from {from_status} to {to_status} is not allowed.'


DEFAULT_ELIGIBILITY_REASONS = {
    EnrollmentStatuses.WAITLIST: 'Awaiting administrator review on the waitlist.',
    EnrollmentStatuses.PENDING_REGION: 'Enrollment pending administrator review.',
    EnrollmentStatuses.REJECTED: 'Enrollment not approved by the administrator.',
}

ENROLLMENT_NOT_FOUND_MESSAGE = 'Enrollment {enrollment_uuid} not found for course {course_uuid}.'

""" Constants for the notifications app. """


class NotificationKinds:
    """ Kinds of in-app notifications. """

    ENROLLED = 'ENROLLED'
    UPDATED = 'UPDATED'

    CHOICES = (
        (ENROLLED, "Enrolled"),
        (UPDATED, "Updated"),
    )


ENROLLMENT_APPROVED_TITLE = 'Enrollment approved!'
ENROLLMENT_UPDATED_TITLE = 'Enrollment status updated'

ENROLLMENT_CONFIRMED_BODY = 'Congratulations! Your enrollment in "{course_title}" has been confirmed.'
ENROLLMENT_WAITLISTED_BODY = 'Your enrollment in "{course_title}" is on the waitlist. Please wait for new openings.'
ENROLLMENT_UPDATED_BODY = 'Your enrollment in "{course_title}" was updated: {status}.'

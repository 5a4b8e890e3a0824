"""
Enrollment manager application constants.
"""

# Used by the admin API when a transition fails for reasons the caller cannot act on.
GENERIC_TRANSITION_ERROR_MESSAGE = 'Error updating enrollment.'

"""
Utils for any app in the enrollment-manager project.
"""


def normalize_state_code(state):
    """
    Returns the upper-cased, trimmed form of a state (UF) code, or None when blank.
    """
    if not state or not state.strip():
        return None
    return state.strip().upper()


def normalize_city_name(city):
    """
    Returns the lower-cased, trimmed form of a city name, or None when blank.
    """
    if not city or not city.strip():
        return None
    return city.strip().lower()

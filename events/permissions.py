"""
Ownership / role gate for events and registrations.

Plain functions over user, event and registration objects so they can be
checked without a request. Views call them before any mutation and turn a
``False`` into a flash message plus redirect.
"""


def is_admin(user):
    """True for a signed-in user whose role is admin."""
    if user is None or not user.is_authenticated:
        return False
    return bool(getattr(user, 'is_admin', False))


def owns_event(user, event):
    if user is None or not user.is_authenticated or user.pk is None:
        return False
    return event.user_id == user.pk


def can_manage_event(user, event):
    return is_admin(user) or owns_event(user, event)


def can_manage_registration(user, registration):
    # Ownership of a registration goes through its event
    return can_manage_event(user, registration.event)

"""Shared test helpers."""

import typing as t

from django.contrib.messages import get_messages

PASSWORD = "a-Strong-password-123!"


def flash_messages(response: t.Any) -> list[str]:
    """Return the flash messages queued while handling ``response``."""
    return [str(message) for message in get_messages(response.wsgi_request)]

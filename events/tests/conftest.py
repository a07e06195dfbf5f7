import typing as t
from datetime import timedelta

import pytest
from django.test.client import Client
from django.utils import timezone

from events.models import Event, Registration, User
from events.tests.helpers import PASSWORD


@pytest.fixture(autouse=True)
def plain_static_storage(settings: t.Any) -> None:
    """Serve static files without the WhiteNoise manifest during tests."""
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }


@pytest.fixture
def owner(django_user_model: t.Type[User]) -> User:
    """A regular user who owns the ``event`` fixture."""
    return django_user_model.objects.create_user(email="owner@example.com", password=PASSWORD)


@pytest.fixture
def stranger(django_user_model: t.Type[User]) -> User:
    """A regular user with no relation to the ``event`` fixture."""
    return django_user_model.objects.create_user(email="stranger@example.com", password=PASSWORD)


@pytest.fixture
def site_admin(django_user_model: t.Type[User]) -> User:
    """A role-1 user (admin scope)."""
    return django_user_model.objects.create_admin(email="admin@example.com", password=PASSWORD)


@pytest.fixture
def event(owner: User) -> Event:
    return Event.objects.create(
        user=owner,
        name="Tech Conference",
        date=timezone.now() + timedelta(days=30),
        location="Convention Center, New York",
        description="Talks and workshops.",
    )


@pytest.fixture
def registration(event: Event) -> Registration:
    return Registration.objects.create(event=event, attendee_name="Jane Smith", attendee_email="jane@example.com")


def _client_for(user: User) -> Client:
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def owner_client(owner: User) -> Client:
    return _client_for(owner)


@pytest.fixture
def stranger_client(stranger: User) -> Client:
    return _client_for(stranger)


@pytest.fixture
def site_admin_client(site_admin: User) -> Client:
    return _client_for(site_admin)

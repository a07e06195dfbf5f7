"""test_views.py: Event and registration pages for signed-in users."""

import io

import openpyxl
import pytest
from django.test.client import Client
from django.urls import reverse

from events.models import Event, Registration, User
from events.tests.helpers import flash_messages

pytestmark = pytest.mark.django_db


# --- Home and health ---


def test_home_shows_landing_page_to_guests(client: Client) -> None:
    response = client.get(reverse("home"))
    assert response.status_code == 200
    assert b"Create an account" in response.content


def test_home_redirects_regular_user_to_events(owner_client: Client) -> None:
    response = owner_client.get(reverse("home"))
    assert response.status_code == 302
    assert response.url == reverse("event_list")


def test_home_redirects_admin_to_dashboard(site_admin_client: Client) -> None:
    response = site_admin_client.get(reverse("home"))
    assert response.status_code == 302
    assert response.url == reverse("admin_dashboard")


def test_health_check(client: Client) -> None:
    response = client.get(reverse("health_check"))
    assert response.status_code == 200
    assert response.content == b"OK"


# --- Event list / detail ---


def test_anonymous_user_is_sent_to_sign_in(client: Client, event: Event) -> None:
    response = client.get(reverse("event_detail", args=[event.pk]))
    assert response.status_code == 302
    assert response.url.startswith(reverse("account_login"))


def test_event_list_only_shows_own_events(owner_client: Client, stranger: User, event: Event) -> None:
    Event.objects.create(
        user=stranger, name="Secret Party", date=event.date, location="Somewhere", description="Hidden."
    )
    response = owner_client.get(reverse("event_list"))
    assert response.status_code == 200
    assert list(response.context["events"]) == [event]
    assert b"Secret Party" not in response.content


def test_event_list_shows_all_events_to_admin(site_admin_client: Client, stranger: User, event: Event) -> None:
    other = Event.objects.create(
        user=stranger, name="Secret Party", date=event.date, location="Somewhere", description="Hidden."
    )
    response = site_admin_client.get(reverse("event_list"))
    assert set(response.context["events"]) == {event, other}


def test_owner_can_view_event(owner_client: Client, event: Event, registration: Registration) -> None:
    response = owner_client.get(reverse("event_detail", args=[event.pk]))
    assert response.status_code == 200
    assert list(response.context["registrations"]) == [registration]
    assert b"Jane Smith" in response.content


def test_other_user_cannot_view_event(stranger_client: Client, event: Event) -> None:
    response = stranger_client.get(reverse("event_detail", args=[event.pk]))
    assert response.status_code == 302
    assert response.url == reverse("event_list")
    assert flash_messages(response) == ["Access denied. You can only manage your own events."]


def test_admin_can_view_any_event(site_admin_client: Client, event: Event) -> None:
    response = site_admin_client.get(reverse("event_detail", args=[event.pk]))
    assert response.status_code == 200


def test_missing_event_redirects_with_message(owner_client: Client) -> None:
    response = owner_client.get(reverse("event_detail", args=[9999]))
    assert response.status_code == 302
    assert response.url == reverse("event_list")
    assert flash_messages(response) == ["Event not found."]


# --- Event create / update / delete ---


def test_create_event_assigns_current_user(owner_client: Client, owner: User) -> None:
    response = owner_client.post(
        reverse("event_create"),
        {
            "name": "Startup Pitch Night",
            "date": "2030-05-01T18:00",
            "location": "Innovation Hub",
            "description": "Pitches.",
        },
    )
    event = Event.objects.get(name="Startup Pitch Night")
    assert response.status_code == 302
    assert response.url == reverse("event_detail", args=[event.pk])
    assert event.user == owner
    assert flash_messages(response) == ["Event was successfully created."]


def test_create_event_with_missing_fields_rerenders_form(owner_client: Client) -> None:
    response = owner_client.post(reverse("event_create"), {"name": "No date"})
    assert response.status_code == 200
    form = response.context["form"]
    assert {"date", "location", "description"} <= set(form.errors)
    assert Event.objects.count() == 0


def test_owner_can_update_event(owner_client: Client, event: Event) -> None:
    response = owner_client.post(
        reverse("event_update", args=[event.pk]),
        {"name": "Renamed", "date": "2030-05-01T18:00", "location": event.location, "description": "New."},
    )
    assert response.status_code == 302
    event.refresh_from_db()
    assert event.name == "Renamed"


def test_other_user_cannot_edit_event(stranger_client: Client, event: Event) -> None:
    response = stranger_client.post(
        reverse("event_update", args=[event.pk]),
        {"name": "Hijacked", "date": "2030-05-01T18:00", "location": "x", "description": "x"},
    )
    assert response.status_code == 302
    assert response.url == reverse("event_list")
    event.refresh_from_db()
    assert event.name == "Tech Conference"


def test_other_user_cannot_delete_event(stranger_client: Client, event: Event) -> None:
    response = stranger_client.post(reverse("event_delete", args=[event.pk]))
    assert response.status_code == 302
    assert Event.objects.filter(pk=event.pk).exists()


def test_owner_delete_cascades_to_registrations(
    owner_client: Client, event: Event, registration: Registration
) -> None:
    response = owner_client.post(reverse("event_delete", args=[event.pk]))
    assert response.status_code == 302
    assert response.url == reverse("event_list")
    assert not Event.objects.filter(pk=event.pk).exists()
    assert not Registration.objects.filter(pk=registration.pk).exists()


def test_admin_can_delete_any_event(site_admin_client: Client, event: Event) -> None:
    site_admin_client.post(reverse("event_delete", args=[event.pk]))
    assert not Event.objects.filter(pk=event.pk).exists()


def test_delete_requires_post(owner_client: Client, event: Event) -> None:
    response = owner_client.get(reverse("event_delete", args=[event.pk]))
    assert response.status_code == 405
    assert Event.objects.filter(pk=event.pk).exists()


# --- Registrations ---


def test_owner_can_register_attendee(owner_client: Client, event: Event) -> None:
    response = owner_client.post(
        reverse("registration_create", args=[event.pk]),
        {"attendee_name": "John Doe", "attendee_email": "john@example.com"},
    )
    assert response.status_code == 302
    assert response.url == reverse("event_detail", args=[event.pk])
    assert event.registrations.get().attendee_email == "john@example.com"


def test_malformed_attendee_email_rerenders_event_page(owner_client: Client, event: Event) -> None:
    response = owner_client.post(
        reverse("registration_create", args=[event.pk]),
        {"attendee_name": "John Doe", "attendee_email": "john-at-example"},
    )
    assert response.status_code == 200
    assert "attendee_email" in response.context["form"].errors
    assert event.registrations.count() == 0


def test_other_user_cannot_register_on_foreign_event(stranger_client: Client, event: Event) -> None:
    response = stranger_client.post(
        reverse("registration_create", args=[event.pk]),
        {"attendee_name": "John Doe", "attendee_email": "john@example.com"},
    )
    assert response.status_code == 302
    assert event.registrations.count() == 0


def test_owner_can_update_registration(owner_client: Client, registration: Registration) -> None:
    response = owner_client.post(
        reverse("registration_update", args=[registration.pk]),
        {"attendee_name": "Jane Doe", "attendee_email": "jane.doe@example.com"},
    )
    assert response.status_code == 302
    registration.refresh_from_db()
    assert registration.attendee_name == "Jane Doe"


def test_other_user_cannot_edit_registration(stranger_client: Client, registration: Registration) -> None:
    response = stranger_client.get(reverse("registration_update", args=[registration.pk]))
    assert response.status_code == 302
    assert response.url == reverse("event_list")
    assert flash_messages(response) == ["Access denied. You can only manage registrations for your own events."]


def test_other_user_cannot_delete_registration(stranger_client: Client, registration: Registration) -> None:
    stranger_client.post(reverse("registration_delete", args=[registration.pk]))
    assert Registration.objects.filter(pk=registration.pk).exists()


def test_owner_can_delete_registration(owner_client: Client, registration: Registration) -> None:
    response = owner_client.post(reverse("registration_delete", args=[registration.pk]))
    assert response.status_code == 302
    assert response.url == reverse("event_detail", args=[registration.event_id])
    assert not Registration.objects.filter(pk=registration.pk).exists()


def test_admin_can_delete_any_registration(site_admin_client: Client, registration: Registration) -> None:
    site_admin_client.post(reverse("registration_delete", args=[registration.pk]))
    assert not Registration.objects.filter(pk=registration.pk).exists()


def test_missing_registration_redirects_with_message(owner_client: Client) -> None:
    response = owner_client.get(reverse("registration_update", args=[9999]))
    assert response.status_code == 302
    assert flash_messages(response) == ["Registration not found."]


# --- Attendee workbook ---


def test_owner_downloads_attendee_workbook(owner_client: Client, event: Event, registration: Registration) -> None:
    response = owner_client.get(reverse("event_attendees_export", args=[event.pk]))
    assert response.status_code == 200
    assert response["Content-Disposition"] == f'attachment; filename="attendees-{event.pk}.xlsx"'

    wb = openpyxl.load_workbook(io.BytesIO(response.content))
    rows = list(wb.active.iter_rows(values_only=True))
    assert rows[1][:2] == ("Jane Smith", "jane@example.com")


def test_other_user_cannot_download_attendee_workbook(stranger_client: Client, event: Event) -> None:
    response = stranger_client.get(reverse("event_attendees_export", args=[event.pk]))
    assert response.status_code == 302

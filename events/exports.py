"""
Registration exports.

CSV is assembled by hand so the quoting rules stay exactly these: a field is
quoted only when it holds a comma, a double quote, a newline or a carriage
return, and inner quotes are doubled. Rows are joined with ``\\n`` and there is no trailing
newline, so N registrations always give N + 1 lines.
"""
from django.utils import timezone
import openpyxl

CSV_HEADER = (
    'Event Name',
    'Event Date',
    'Event Location',
    'Attendee Name',
    'Attendee Email',
    'Registration Date',
    'Event Organizer',
)

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'


def format_timestamp(value):
    if value is None:
        return ''
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime(TIMESTAMP_FORMAT)


def escape_csv_field(value):
    field = '' if value is None else str(value)
    if any(char in field for char in (',', '"', '\n', '\r')):
        return '"' + field.replace('"', '""') + '"'
    return field


def registration_row(registration):
    event = registration.event
    return [
        event.name,
        format_timestamp(event.date),
        event.location,
        registration.attendee_name,
        registration.attendee_email,
        format_timestamp(registration.created_at),
        event.user.email,
    ]


def registrations_to_csv(registrations):
    lines = [','.join(CSV_HEADER)]
    for registration in registrations:
        lines.append(','.join(escape_csv_field(field) for field in registration_row(registration)))
    return '\n'.join(lines)


def export_filename(prefix, day=None):
    day = day or timezone.localdate()
    return f"{prefix}_{day.strftime('%Y%m%d')}.csv"


# --- Attendee workbook for a single event (organizer download) ---

ATTENDEE_HEADERS = ['Attendee Name', 'Attendee Email', 'Registered At']


def attendees_workbook(registrations):
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Attendees"

    ws.append(ATTENDEE_HEADERS)
    for registration in registrations:
        # openpyxl rejects tz-aware datetimes
        registered_at = timezone.localtime(registration.created_at).replace(tzinfo=None)
        ws.append([registration.attendee_name, registration.attendee_email, registered_at])

    return wb

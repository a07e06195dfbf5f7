"""
Admin scope: sign-up / sign-in for admins and the admin panel
(dashboard, event and registration management, CSV export).
"""
from functools import wraps

import structlog
from django.contrib import messages
from django.contrib.auth import login, logout
from django.db import transaction
from django.db.models import Q
from django.http import HttpResponse
from django.shortcuts import render, redirect
from django.views.decorators.http import require_POST

from .exports import export_filename, registrations_to_csv
from .forms import AdminLoginForm, AdminSignupForm
from .models import Event, Registration, User
from .permissions import is_admin

logger = structlog.get_logger(__name__)

EVENT_LIST_LIMIT = 50
REGISTRATION_LIST_LIMIT = 100
RECENT_EVENTS = 5


def admin_required(view_func):
    """Anonymous visitors go to the admin login, regular users back home."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect('admin_login')
        if not is_admin(request.user):
            messages.error(request, 'Admin access required.')
            return redirect('home')
        return view_func(request, *args, **kwargs)

    return _wrapped


def _selected_ids(request, key):
    values = (value.strip() for value in request.POST.getlist(key))
    return [value for value in values if value.isdecimal()]


# --- Admin authentication ---

def admin_register(request):
    if request.method == 'POST':
        form = AdminSignupForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend='django.contrib.auth.backends.ModelBackend')
            logger.info("admin_signed_up", user_id=user.pk)
            messages.success(request, 'Admin account created successfully!')
            return redirect('admin_dashboard')
        if form.has_error('secret_code'):
            logger.warning("admin_signup_rejected", reason="invalid_secret_code")
    else:
        form = AdminSignupForm()

    return render(request, 'events/admin/register.html', {'form': form})


def admin_login(request):
    if is_admin(request.user):
        return redirect('admin_dashboard')

    if request.method == 'POST':
        form = AdminLoginForm(request, data=request.POST)
        if form.is_valid():
            user = form.get_user()
            login(request, user)
            logger.info("admin_signed_in", user_id=user.pk)
            messages.success(request, 'Signed in successfully.')
            return redirect('admin_dashboard')
    else:
        form = AdminLoginForm(request)

    return render(request, 'events/admin/login.html', {'form': form})


@require_POST
def admin_logout(request):
    logout(request)
    messages.success(request, 'Signed out successfully.')
    return redirect('home')


# --- Dashboard ---

@admin_required
def dashboard(request):
    recent_events = (
        Event.objects.select_related('user')
        .with_registration_count()
        .order_by('-created_at')[:RECENT_EVENTS]
    )
    context = {
        'current_admin': request.user,
        'total_events': Event.objects.count(),
        'total_users': User.objects.regular().count(),
        'total_admins': User.objects.admins().count(),
        'total_registrations': Registration.objects.count(),
        'recent_events': recent_events,
    }
    return render(request, 'events/admin/dashboard.html', context)


# --- Events ---

def filter_events(params):
    events = Event.objects.select_related('user').with_registration_count()

    search = params.get('search', '').strip()
    if search:
        events = events.filter(
            Q(name__icontains=search) | Q(location__icontains=search) | Q(description__icontains=search)
        )

    user_id = params.get('user_id', '').strip()
    if user_id.isdecimal():
        events = events.filter(user_id=user_id)

    events = events.order_by('-created_at')
    if not search:
        events = events[:EVENT_LIST_LIMIT]
    return events


@admin_required
def event_list(request):
    context = {
        'events': filter_events(request.GET),
        'search': request.GET.get('search', ''),
        'user_id': request.GET.get('user_id', ''),
        'total_events': Event.objects.count(),
        'total_registrations': Registration.objects.count(),
        'users_with_events': User.objects.filter(events__isnull=False).distinct().count(),
        'all_users': User.objects.order_by('email'),
    }
    return render(request, 'events/admin/event_list.html', context)


@admin_required
@require_POST
def event_delete(request, event_id):
    event = Event.objects.filter(pk=event_id).first()
    if event is None:
        messages.error(request, 'Event not found.')
        return redirect('admin_event_list')

    event.delete()
    logger.info("admin_event_deleted", event_id=event_id, admin_id=request.user.pk)
    messages.success(request, 'Event deleted successfully.')
    return redirect('admin_event_list')


@admin_required
@require_POST
def event_bulk_delete(request):
    event_ids = _selected_ids(request, 'event_ids')
    if not event_ids:
        messages.error(request, 'No events selected.')
        return redirect('admin_event_list')

    with transaction.atomic():
        Event.objects.filter(pk__in=event_ids).delete()
    logger.info("admin_events_bulk_deleted", count=len(event_ids), admin_id=request.user.pk)
    messages.success(request, f"{len(event_ids)} events deleted successfully.")
    return redirect('admin_event_list')


# --- Registrations ---

def filter_registrations(params, limit=True):
    registrations = Registration.objects.select_related('event', 'event__user')

    search = params.get('search', '').strip()
    if search:
        registrations = registrations.filter(
            Q(attendee_name__icontains=search)
            | Q(attendee_email__icontains=search)
            | Q(event__name__icontains=search)
        )

    event_id = params.get('event_id', '').strip()
    if event_id.isdecimal():
        registrations = registrations.filter(event_id=event_id)

    registrations = registrations.order_by('-created_at')
    if limit and not search:
        registrations = registrations[:REGISTRATION_LIST_LIMIT]
    return registrations


@admin_required
def registration_list(request):
    context = {
        'registrations': filter_registrations(request.GET),
        'search': request.GET.get('search', ''),
        'event_id': request.GET.get('event_id', ''),
        'total_registrations': Registration.objects.count(),
        'unique_attendees': Registration.objects.values('attendee_email').distinct().count(),
        'events_with_registrations': Event.objects.filter(registrations__isnull=False).distinct().count(),
        'all_events': Event.objects.with_registration_count().order_by('name'),
    }
    return render(request, 'events/admin/registration_list.html', context)


@admin_required
@require_POST
def registration_delete(request, registration_id):
    registration = Registration.objects.filter(pk=registration_id).first()
    if registration is None:
        messages.error(request, 'Registration not found.')
        return redirect('admin_registration_list')

    registration.delete()
    logger.info("admin_registration_deleted", registration_id=registration_id, admin_id=request.user.pk)
    messages.success(request, 'Registration deleted successfully.')
    return redirect('admin_registration_list')


@admin_required
@require_POST
def registration_bulk_delete(request):
    registration_ids = _selected_ids(request, 'registration_ids')
    if not registration_ids:
        messages.error(request, 'No registrations selected.')
        return redirect('admin_registration_list')

    with transaction.atomic():
        Registration.objects.filter(pk__in=registration_ids).delete()
    logger.info("admin_registrations_bulk_deleted", count=len(registration_ids), admin_id=request.user.pk)
    messages.success(request, f"{len(registration_ids)} registrations deleted successfully.")
    return redirect('admin_registration_list')


def csv_response(registrations, filename):
    content = registrations_to_csv(registrations)
    response = HttpResponse(content, content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    logger.info("registrations_exported", filename=filename, size=len(content))
    return response


@admin_required
def registration_export(request):
    try:
        registrations = filter_registrations(request.GET, limit=False)
        return csv_response(registrations, export_filename('registrations_export'))
    except Exception:
        logger.exception("registration_export_failed")
        messages.error(request, 'An error occurred while exporting the CSV file.')
        return redirect('admin_registration_list')


@admin_required
@require_POST
def registration_export_selected(request):
    registration_ids = _selected_ids(request, 'registration_ids')
    if not registration_ids:
        messages.error(request, 'No registrations selected for export.')
        return redirect('admin_registration_list')

    try:
        registrations = list(
            Registration.objects.select_related('event', 'event__user')
            .filter(pk__in=registration_ids)
            .order_by('-created_at')
        )
        if not registrations:
            messages.error(request, 'No valid registrations found for export.')
            return redirect('admin_registration_list')
        return csv_response(registrations, export_filename('selected_registrations_export'))
    except Exception:
        logger.exception("registration_export_failed", requested=len(registration_ids))
        messages.error(request, 'An error occurred while exporting the CSV file.')
        return redirect('admin_registration_list')

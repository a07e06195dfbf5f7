import structlog
from django.shortcuts import render, redirect
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.http import HttpResponse
from django.views.decorators.http import require_POST

from .models import Event, Registration
from .forms import EventForm, RegistrationForm
from .permissions import can_manage_event, can_manage_registration, is_admin
from .exports import attendees_workbook

logger = structlog.get_logger(__name__)

EVENT_NOT_FOUND = 'Event not found.'
EVENT_DENIED = 'Access denied. You can only manage your own events.'
REGISTRATION_NOT_FOUND = 'Registration not found.'
REGISTRATION_DENIED = 'Access denied. You can only manage registrations for your own events.'


def home(request):
    # Guests get the landing page, signed-in users go to their area
    if request.user.is_authenticated:
        if is_admin(request.user):
            return redirect('admin_dashboard')
        return redirect('event_list')
    return render(request, 'events/home.html')


def health_check(request):
    return HttpResponse("OK", content_type='text/plain')


# --- Lookup helpers: None means a flash message was queued, caller redirects ---

def _managed_event(request, event_id):
    event = Event.objects.select_related('user').filter(pk=event_id).first()
    if event is None:
        messages.error(request, EVENT_NOT_FOUND)
        return None
    if not can_manage_event(request.user, event):
        logger.warning("event_access_denied", event_id=event.pk, user_id=request.user.pk)
        messages.error(request, EVENT_DENIED)
        return None
    return event


def _managed_registration(request, registration_id):
    registration = Registration.objects.select_related('event__user').filter(pk=registration_id).first()
    if registration is None:
        messages.error(request, REGISTRATION_NOT_FOUND)
        return None
    if not can_manage_registration(request.user, registration):
        logger.warning("registration_access_denied", registration_id=registration.pk, user_id=request.user.pk)
        messages.error(request, REGISTRATION_DENIED)
        return None
    return registration


def _render_event_detail(request, event, form, status=200):
    registrations = event.registrations.order_by('-created_at')
    return render(request, 'events/event_detail.html', {
        'event': event,
        'registrations': registrations,
        'form': form,
    }, status=status)


# 1. Event list: admins see every event, users only their own
@login_required
def event_list(request):
    events = (
        Event.objects.for_user(request.user)
        .select_related('user')
        .with_registration_count()
        .order_by('date')
    )
    return render(request, 'events/event_list.html', {'events': events})


@login_required
def event_detail(request, event_id):
    event = _managed_event(request, event_id)
    if event is None:
        return redirect('event_list')
    return _render_event_detail(request, event, RegistrationForm())


@login_required
def event_create(request):
    if request.method == 'POST':
        form = EventForm(request.POST)
        if form.is_valid():
            event = form.save(commit=False)
            event.user = request.user
            event.save()
            logger.info("event_created", event_id=event.pk, user_id=request.user.pk)
            messages.success(request, 'Event was successfully created.')
            return redirect('event_detail', event_id=event.pk)
    else:
        form = EventForm()

    return render(request, 'events/event_form.html', {'form': form})


@login_required
def event_update(request, event_id):
    event = _managed_event(request, event_id)
    if event is None:
        return redirect('event_list')

    if request.method == 'POST':
        form = EventForm(request.POST, instance=event)
        if form.is_valid():
            form.save()
            logger.info("event_updated", event_id=event.pk, user_id=request.user.pk)
            messages.success(request, 'Event was successfully updated.')
            return redirect('event_detail', event_id=event.pk)
    else:
        form = EventForm(instance=event)

    return render(request, 'events/event_form.html', {'form': form, 'event': event})


@login_required
@require_POST
def event_delete(request, event_id):
    event = _managed_event(request, event_id)
    if event is None:
        return redirect('event_list')

    event_pk = event.pk
    event.delete()  # registrations go with it (CASCADE)
    logger.info("event_deleted", event_id=event_pk, user_id=request.user.pk)
    messages.success(request, 'Event was successfully deleted.')
    return redirect('event_list')


# 2. Registrations of an event (owner or admin)
@login_required
@require_POST
def registration_create(request, event_id):
    event = _managed_event(request, event_id)
    if event is None:
        return redirect('event_list')

    form = RegistrationForm(request.POST)
    if form.is_valid():
        registration = form.save(commit=False)
        registration.event = event
        registration.save()
        logger.info("registration_created", registration_id=registration.pk, event_id=event.pk)
        messages.success(request, 'Registration was successfully created.')
        return redirect('event_detail', event_id=event.pk)

    return _render_event_detail(request, event, form)


@login_required
def registration_update(request, registration_id):
    registration = _managed_registration(request, registration_id)
    if registration is None:
        return redirect('event_list')

    if request.method == 'POST':
        form = RegistrationForm(request.POST, instance=registration)
        if form.is_valid():
            form.save()
            logger.info("registration_updated", registration_id=registration.pk)
            messages.success(request, 'Registration was successfully updated.')
            return redirect('event_detail', event_id=registration.event_id)
    else:
        form = RegistrationForm(instance=registration)

    return render(request, 'events/registration_form.html', {
        'form': form,
        'registration': registration,
        'event': registration.event,
    })


@login_required
@require_POST
def registration_delete(request, registration_id):
    registration = _managed_registration(request, registration_id)
    if registration is None:
        return redirect('event_list')

    event_id = registration.event_id
    registration.delete()
    logger.info("registration_deleted", registration_id=registration_id, event_id=event_id)
    messages.success(request, 'Registration was successfully deleted.')
    return redirect('event_detail', event_id=event_id)


@login_required
def export_attendees_xlsx(request, event_id):
    event = _managed_event(request, event_id)
    if event is None:
        return redirect('event_list')

    response = HttpResponse(content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    response['Content-Disposition'] = f'attachment; filename="attendees-{event.pk}.xlsx"'

    wb = attendees_workbook(event.registrations.order_by('created_at'))
    wb.save(response)
    return response

from django.contrib import admin
from .models import User, Event, Registration


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'role', 'is_staff', 'date_joined')
    list_filter = ('role', 'is_staff')
    search_fields = ('email',)
    # Role is only changed here or from management tooling
    fields = ('email', 'role', 'first_name', 'last_name', 'is_active', 'is_staff', 'is_superuser')


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('name', 'user', 'date', 'location')
    search_fields = ('name', 'location')
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ('attendee_name', 'attendee_email', 'event', 'created_at')
    list_filter = ('event',)
    search_fields = ('attendee_name', 'attendee_email')

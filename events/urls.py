from django.urls import path
from events import views, admin_views

urlpatterns = [
    path('', views.home, name='home'),
    path('up/', views.health_check, name='health_check'),

    # Events (owner or admin)
    path('events/', views.event_list, name='event_list'),
    path('events/new/', views.event_create, name='event_create'),
    path('events/<int:event_id>/', views.event_detail, name='event_detail'),
    path('events/<int:event_id>/edit/', views.event_update, name='event_update'),
    path('events/<int:event_id>/delete/', views.event_delete, name='event_delete'),
    path('events/<int:event_id>/attendees.xlsx', views.export_attendees_xlsx, name='event_attendees_export'),

    # Registrations nested under their event
    path('events/<int:event_id>/registrations/', views.registration_create, name='registration_create'),
    path('registrations/<int:registration_id>/edit/', views.registration_update, name='registration_update'),
    path('registrations/<int:registration_id>/delete/', views.registration_delete, name='registration_delete'),

    # Admin scope auth
    path('admin/register/', admin_views.admin_register, name='admin_register'),
    path('admin/login/', admin_views.admin_login, name='admin_login'),
    path('admin/logout/', admin_views.admin_logout, name='admin_logout'),

    # Admin panel
    path('admin/', admin_views.dashboard, name='admin_dashboard'),
    path('admin/events/', admin_views.event_list, name='admin_event_list'),
    path('admin/events/bulk-delete/', admin_views.event_bulk_delete, name='admin_event_bulk_delete'),
    path('admin/events/<int:event_id>/delete/', admin_views.event_delete, name='admin_event_delete'),
    path('admin/registrations/', admin_views.registration_list, name='admin_registration_list'),
    path('admin/registrations/bulk-delete/', admin_views.registration_bulk_delete, name='admin_registration_bulk_delete'),
    path('admin/registrations/export/', admin_views.registration_export, name='admin_registration_export'),
    path('admin/registrations/export-selected/', admin_views.registration_export_selected, name='admin_registration_export_selected'),
    path('admin/registrations/<int:registration_id>/delete/', admin_views.registration_delete, name='admin_registration_delete'),
]

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django admin site (direct admin tooling, e.g. changing a user's role)
    path('django-admin/', admin.site.urls),

    # Regular user sign-up / sign-in (allauth)
    # /users/signup/, /users/login/, /users/logout/, ...
    path('users/', include('allauth.urls')),

    # Events, registrations and the admin panel
    path('', include('events.urls')),
]

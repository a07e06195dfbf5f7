import random
import re
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from events.models import User, Event, Registration

# --- Demo accounts ---
DEMO_USER_EMAIL = 'user@test.com'
DEMO_USER_PASSWORD = 'password123'
DEMO_ADMIN_EMAIL = 'admin@test.com'
DEMO_ADMIN_PASSWORD = 'admin123'

SAMPLE_EVENTS = [
    {
        'name': "Tech Conference 2025",
        'days_ahead': 30,
        'location': "Convention Center, New York",
        'description': "Join industry leaders for the latest in technology trends, networking opportunities, and hands-on workshops.",
    },
    {
        'name': "Music Festival",
        'days_ahead': 60,
        'location': "Central Park, New York",
        'description': "Three days of incredible music featuring local and international artists across multiple genres.",
    },
    {
        'name': "Startup Pitch Night",
        'days_ahead': 21,
        'location': "Innovation Hub, Silicon Valley",
        'description': "Watch promising startups pitch their ideas to a panel of investors and industry experts.",
    },
    {
        'name': "Art Exhibition Opening",
        'days_ahead': 10,
        'location': "Modern Art Gallery, Chicago",
        'description': "Discover contemporary works from emerging artists in this exclusive gallery opening.",
    },
    {
        'name': "Food & Wine Tasting",
        'days_ahead': 5,
        'location': "Downtown Restaurant, San Francisco",
        'description': "Sample exquisite wines paired with gourmet dishes prepared by renowned chefs.",
    },
]

FIRST_NAMES = ['John', 'Jane', 'Mike', 'Sarah', 'David', 'Lisa', 'Tom', 'Emma']
LAST_NAMES = ['Smith', 'Johnson', 'Brown', 'Davis', 'Wilson', 'Moore', 'Taylor', 'Anderson']


class Command(BaseCommand):
    help = "Seeds demo accounts, sample events and registrations. Safe to run more than once."

    def add_arguments(self, parser):
        parser.add_argument('--seed', type=int, default=None, help="Random seed for attendee names and counts.")

    def get_or_create_account(self, email, password, role):
        user, created = User.objects.get_or_create(email=email, defaults={'role': role})
        if created:
            user.set_password(password)
            user.save()
        return user

    @transaction.atomic
    def handle(self, *args, **options):
        rand = random.Random(options['seed'])
        self.stdout.write("Seeding database...")

        regular_user = self.get_or_create_account(DEMO_USER_EMAIL, DEMO_USER_PASSWORD, User.REGULAR)
        admin_user = self.get_or_create_account(DEMO_ADMIN_EMAIL, DEMO_ADMIN_PASSWORD, User.ADMIN)

        self.stdout.write(self.style.SUCCESS("Created test users:"))
        self.stdout.write(f"   Regular User: {DEMO_USER_EMAIL} (password: {DEMO_USER_PASSWORD})")
        self.stdout.write(f"   Admin User: {DEMO_ADMIN_EMAIL} (password: {DEMO_ADMIN_PASSWORD})")

        now = timezone.now()
        for index, data in enumerate(SAMPLE_EVENTS):
            # Alternate ownership so both accounts have events
            owner = regular_user if index % 2 == 0 else admin_user
            event, _ = Event.objects.get_or_create(
                user=owner,
                name=data['name'],
                defaults={
                    'date': now + timedelta(days=data['days_ahead']),
                    'location': data['location'],
                    'description': data['description'],
                },
            )

            domain = re.sub(r'[^a-z0-9]', '', event.name.lower())
            for i in range(1, rand.randint(3, 8) + 1):
                event.registrations.get_or_create(
                    attendee_email=f"attendee{i}@{domain}event.com",
                    defaults={'attendee_name': f"{rand.choice(FIRST_NAMES)} {rand.choice(LAST_NAMES)}"},
                )

        self.stdout.write(self.style.SUCCESS(
            f"Created {Event.objects.count()} events with "
            f"{Registration.objects.count()} total registrations"
        ))
        self.stdout.write("Summary:")
        self.stdout.write(f"   Total Users: {User.objects.count()}")
        self.stdout.write(f"   Events by Regular Users: {regular_user.events.count()}")
        self.stdout.write(f"   Events by Admin Users: {admin_user.events.count()}")

from django.core.management.base import BaseCommand
from django.db.models import Count

from events.models import User, Event, Registration


class Command(BaseCommand):
    help = "Prints every user grouped by role, plus event and registration totals."

    def write_users(self, title, users):
        self.stdout.write(f"\n{title}:")
        self.stdout.write("-" * 30)
        if not users:
            self.stdout.write("None found.")
            return
        for index, user in enumerate(users, start=1):
            role = user.role if user.role is not None else "none (default user)"
            self.stdout.write(f"{index}. {user.email} (ID: {user.pk}, Role: {role})")

    def handle(self, *args, **options):
        self.stdout.write("=" * 50)
        self.stdout.write("USERS IN THE DATABASE")
        self.stdout.write("=" * 50)

        if not User.objects.exists():
            self.stdout.write("No users found in the database.")
            return

        regular = list(User.objects.regular().order_by('pk'))
        admins = list(User.objects.admins().order_by('pk'))

        self.stdout.write(f"Total Users: {User.objects.count()}")
        self.stdout.write(f"Admin Users: {len(admins)}")
        self.stdout.write(f"Regular Users: {len(regular)}")

        self.write_users("REGULAR USERS", regular)
        self.write_users("ADMIN USERS", admins)

        self.stdout.write("\nEVENTS SUMMARY:")
        self.stdout.write("-" * 30)
        self.stdout.write(f"Total Events: {Event.objects.count()}")
        self.stdout.write(f"Total Registrations: {Registration.objects.count()}")

        owners = (
            User.objects.annotate(event_count=Count('events'))
            .filter(event_count__gt=0)
            .order_by('email')
        )
        if owners:
            self.stdout.write("\nEvents by user:")
            for owner in owners:
                self.stdout.write(f"  {owner.email}: {owner.event_count} event(s)")

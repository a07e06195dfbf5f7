from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager

from .permissions import is_admin


class UserManager(BaseUserManager):
    """Manager for the email-only user model."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError('The email address must be set')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', False)
        extra_fields.setdefault('is_superuser', False)
        extra_fields.setdefault('role', User.REGULAR)
        return self._create_user(email, password, **extra_fields)

    def create_admin(self, email, password=None, **extra_fields):
        extra_fields['role'] = User.ADMIN
        return self.create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', User.ADMIN)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        return self._create_user(email, password, **extra_fields)

    def regular(self):
        return self.filter(models.Q(role=User.REGULAR) | models.Q(role__isnull=True))

    def admins(self):
        return self.filter(role=User.ADMIN)


# 1. User (regular users and admins share one table, told apart by role)
class User(AbstractUser):
    REGULAR = 0
    ADMIN = 1
    ROLE_CHOICES = (
        (REGULAR, 'Regular user'),
        (ADMIN, 'Admin'),
    )

    username = None
    email = models.EmailField('email address', unique=True)
    # NULL counts as a regular user, same as 0
    role = models.PositiveSmallIntegerField(choices=ROLE_CHOICES, default=REGULAR, null=True, blank=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    def __str__(self):
        return self.email

    @property
    def is_admin(self):
        return self.role == self.ADMIN

    @property
    def is_regular(self):
        return self.role is None or self.role == self.REGULAR


class EventQuerySet(models.QuerySet):
    def for_user(self, user):
        """Everything for admins, only the user's own events for everyone else."""
        if is_admin(user):
            return self.all()
        if not user.is_authenticated:
            return self.none()
        return self.filter(user=user)

    def with_registration_count(self):
        return self.annotate(registration_count=models.Count('registrations'))


# 2. Event
class Event(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='events')
    name = models.CharField(max_length=200)
    date = models.DateTimeField()
    location = models.CharField(max_length=200)
    description = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventQuerySet.as_manager()

    def __str__(self):
        return self.name


# 3. Attendee registration for an event
class Registration(models.Model):
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='registrations')
    attendee_name = models.CharField(max_length=200)
    attendee_email = models.EmailField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.attendee_name} - {self.event.name}"

from django import forms
from django.conf import settings
from django.contrib.auth.forms import AuthenticationForm, BaseUserCreationForm
from .models import User, Event, Registration


class BootstrapFormMixin:
    def _style_fields(self):
        for field in self.fields:
            self.fields[field].widget.attrs.update({'class': 'form-control mb-3'})


class EventForm(BootstrapFormMixin, forms.ModelForm):
    class Meta:
        model = Event
        fields = ['name', 'date', 'location', 'description']
        widgets = {
            'date': forms.DateTimeInput(attrs={'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),  # browser calendar
            'description': forms.Textarea(attrs={'rows': 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._style_fields()


class RegistrationForm(BootstrapFormMixin, forms.ModelForm):
    class Meta:
        model = Registration
        fields = ['attendee_name', 'attendee_email']
        labels = {
            'attendee_name': 'Attendee name',
            'attendee_email': 'Attendee email',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._style_fields()


class AdminSignupForm(BootstrapFormMixin, BaseUserCreationForm):
    """Sign-up for the admin scope, gated by a shared secret code."""

    secret_code = forms.CharField(
        label="Admin secret code",
        widget=forms.PasswordInput(render_value=False),
    )

    class Meta(BaseUserCreationForm.Meta):
        model = User
        fields = ('email',)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._style_fields()

    def clean_secret_code(self):
        secret_code = self.cleaned_data.get('secret_code')
        if secret_code != settings.ADMIN_SECRET_CODE:
            raise forms.ValidationError("Invalid admin secret code", code='invalid_secret_code')
        return secret_code

    def save(self, commit=True):
        user = super().save(commit=False)
        user.role = User.ADMIN
        if commit:
            user.save()
        return user


class AdminLoginForm(BootstrapFormMixin, AuthenticationForm):
    error_messages = {
        **AuthenticationForm.error_messages,
        'not_admin': "This account does not have admin access.",
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._style_fields()

    def confirm_login_allowed(self, user):
        super().confirm_login_allowed(user)
        if not user.is_admin:
            raise forms.ValidationError(self.error_messages['not_admin'], code='not_admin')

import structlog
from django.dispatch import receiver
from allauth.account.signals import user_signed_up
from django.contrib.auth import get_user_model

User = get_user_model()

logger = structlog.get_logger(__name__)


@receiver(user_signed_up)
def user_signed_up_(request, user, **kwargs):
    # Anyone signing up through the public /users/ forms is a regular user.
    # Admin accounts only come from /admin/register/ or direct tooling.
    user.role = User.REGULAR
    user.save(update_fields=['role'])
    logger.info("user_signed_up", user_id=user.pk)

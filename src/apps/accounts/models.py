from django.conf import settings
from django.core.validators import RegexValidator
from django.db import models
from django.utils import timezone


CARD_LAST4_REGEX = RegexValidator(
    regex=r'^\d{4}$',
    message="Enter the last four digits of the card."
)


class Profile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')
    card_last4 = models.CharField(max_length=4, validators=[CARD_LAST4_REGEX], blank=True)
    card_expires_on = models.DateField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile of {self.user}"

    @classmethod
    def for_user(cls, user):
        profile, _ = cls.objects.get_or_create(user=user)
        return profile

    @property
    def has_valid_payment_method(self) -> bool:
        """A card is on file and has not expired yet."""
        if not self.card_last4 or self.card_expires_on is None:
            return False
        return self.card_expires_on >= timezone.localdate()


def user_has_valid_payment_method(user) -> bool:
    profile = Profile.objects.filter(user=user).first()
    return profile is not None and profile.has_valid_payment_method

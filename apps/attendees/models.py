from django.core.validators import RegexValidator
from django.db import models
import uuid


clabe_validator = RegexValidator(
    regex=r'^\d{18}$',
    message='CLABE must be exactly 18 digits'
)


class Attendee(models.Model):
    """Person attending an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='attendees'
    )
    name = models.CharField(max_length=100)

    # Left out of the equal split
    exclude_from_split = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'attendees'
        indexes = [
            models.Index(fields=['event', 'created_at'], name='attendees_event_i_3a9d41_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return self.name


class BankInfo(models.Model):
    """Transfer details an attendee shares so others can pay them back."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    attendee = models.OneToOneField(
        Attendee,
        on_delete=models.CASCADE,
        related_name='bank_info'
    )
    holder_name = models.CharField(max_length=100)
    bank_name = models.CharField(max_length=100)
    clabe = models.CharField(max_length=18, validators=[clabe_validator])
    account_number = models.CharField(max_length=20, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bank_info'
        verbose_name_plural = 'bank info'

    def __str__(self):
        return f"{self.holder_name} - {self.bank_name}"

    @property
    def masked_clabe(self):
        return f"{'*' * 14}{self.clabe[-4:]}"

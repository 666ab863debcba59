from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.core.money import format_currency


class PaymentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'


class Payment(models.Model):
    """
    Transfer recorded between two attendees of an event.

    At most one row per (event, from, to); recording again updates it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='payments'
    )
    from_attendee = models.ForeignKey(
        'attendees.Attendee',
        on_delete=models.CASCADE,
        related_name='payments_sent'
    )
    to_attendee = models.ForeignKey(
        'attendees.Attendee',
        on_delete=models.CASCADE,
        related_name='payments_received'
    )

    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.COMPLETED
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payments'
        ordering = ['created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['event', 'from_attendee', 'to_attendee'],
                name='unique_payment_per_pair',
            ),
            models.CheckConstraint(
                condition=~models.Q(from_attendee=models.F('to_attendee')),
                name='payment_not_to_self',
            ),
        ]

    def __str__(self):
        return f"{self.from_attendee_id} → {self.to_attendee_id}: {format_currency(self.amount)} ({self.status})"

    @property
    def is_completed(self):
        return self.status == PaymentStatus.COMPLETED

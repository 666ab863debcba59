from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Expense(models.Model):
    """Money spent for an event, optionally attributed to the payer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='expenses'
    )

    # Payer (nullable: unattributed expenses still count toward the total)
    attendee = models.ForeignKey(
        'attendees.Attendee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='expenses_paid'
    )

    description = models.CharField(max_length=255)
    amount = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'expenses'
        indexes = [
            models.Index(fields=['event', 'created_at'], name='expenses_event_i_7d20c4_idx'),
            models.Index(fields=['attendee'], name='expenses_attende_51be8f_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        payer = self.attendee.name if self.attendee else "Unassigned"
        return f"{self.description} - {self.amount} MXN ({payer})"


class ExpenseReceipt(models.Model):
    """One receipt photo attached to an expense."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    expense = models.ForeignKey(
        Expense,
        on_delete=models.CASCADE,
        related_name='receipts'
    )

    # Public URL; relative (/media/...) for files stored by us
    url = models.CharField(max_length=500)

    # Storage name for files we uploaded, blank for external URLs
    storage_path = models.CharField(max_length=500, blank=True)
    content_type = models.CharField(max_length=50, blank=True)
    size_bytes = models.PositiveIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'expense_receipts'
        ordering = ['created_at']

    def __str__(self):
        return self.url


class ExpenseExclusion(models.Model):
    """Attendee marked as not sharing a specific expense."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    expense = models.ForeignKey(
        Expense,
        on_delete=models.CASCADE,
        related_name='exclusions'
    )
    attendee = models.ForeignKey(
        'attendees.Attendee',
        on_delete=models.CASCADE,
        related_name='expense_exclusions'
    )

    class Meta:
        db_table = 'expense_exclusions'
        unique_together = [['expense', 'attendee']]

    def __str__(self):
        return f"{self.attendee_id} excluded from {self.expense_id}"

from django.db import models
from django.utils import timezone
import uuid

from apps.core.identifiers import PUBLIC_ID_LENGTH, generate_public_id


class Event(models.Model):
    """A carne asada gathering, shared by its public id."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nano_id = models.CharField(
        max_length=PUBLIC_ID_LENGTH,
        unique=True,
        db_index=True,
        editable=False
    )

    title = models.CharField(max_length=255)
    event_date = models.DateTimeField()
    location = models.CharField(max_length=255, null=True, blank=True)
    maps_url = models.URLField(max_length=500, null=True, blank=True)
    description = models.TextField(blank=True)

    # Planning headcount, informational only
    people_count = models.PositiveIntegerField(default=0)

    # Soft delete
    cancelled_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'events'
        indexes = [
            models.Index(fields=['event_date'], name='events_event_d_5c1f3a_idx'),
            models.Index(fields=['cancelled_at'], name='events_cancell_8e2b7d_idx'),
        ]
        ordering = ['-event_date']

    def __str__(self):
        return f"{self.title} ({self.nano_id})"

    def save(self, *args, **kwargs):
        if not self.nano_id:
            self.nano_id = generate_public_id()
        super().save(*args, **kwargs)

    @property
    def is_cancelled(self):
        return self.cancelled_at is not None

    def cancel(self):
        """Mark the event cancelled; the first cancellation time is kept."""
        if self.cancelled_at is None:
            self.cancelled_at = timezone.now()
            self.save(update_fields=['cancelled_at', 'updated_at'])

    def restore(self):
        if self.cancelled_at is not None:
            self.cancelled_at = None
            self.save(update_fields=['cancelled_at', 'updated_at'])

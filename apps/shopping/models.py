from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


DEFAULT_UNIT = 'piezas'


class Category(models.Model):
    """Shopping category (Carnes, Verduras, ...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50, unique=True)
    icon = models.CharField(max_length=16, null=True, blank=True)
    sort_order = models.IntegerField(default=0)
    is_default = models.BooleanField(default=False)

    class Meta:
        db_table = 'categories'
        ordering = ['sort_order', 'name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return f"{self.icon} {self.name}" if self.icon else self.name


class SuggestedItem(models.Model):
    """Item offered as a quick pick under a category."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    category = models.ForeignKey(
        Category,
        on_delete=models.CASCADE,
        related_name='suggested_items'
    )
    name = models.CharField(max_length=100)
    default_unit = models.CharField(max_length=20, default=DEFAULT_UNIT)

    class Meta:
        db_table = 'suggested_items'
        ordering = ['name']
        unique_together = [['category', 'name']]

    def __str__(self):
        return f"{self.name} ({self.default_unit})"


class ShoppingItem(models.Model):
    """Line on an event's shopping list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        'events.Event',
        on_delete=models.CASCADE,
        related_name='shopping_items'
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shopping_items'
    )

    name = models.CharField(max_length=100)
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('1'),
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    unit = models.CharField(max_length=20, default=DEFAULT_UNIT)
    is_purchased = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'shopping_items'
        indexes = [
            models.Index(fields=['event', 'created_at'], name='shopping_it_event_i_2c81e0_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        mark = '✓' if self.is_purchased else ' '
        return f"[{mark}] {self.name} {self.quantity} {self.unit}"

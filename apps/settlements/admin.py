# ==========================================
# apps/settlements/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html

from apps.core.money import format_currency
from .models import Payment, PaymentStatus


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    """Admin interface for Payments."""

    list_display = ['event', 'from_attendee', 'to_attendee', 'amount_display', 'status_badge', 'updated_at']
    list_filter = ['status', 'created_at']
    search_fields = ['event__title', 'event__nano_id', 'from_attendee__name', 'to_attendee__name']
    readonly_fields = ['created_at', 'updated_at']

    def amount_display(self, obj):
        return format_currency(obj.amount)
    amount_display.short_description = 'Amount'
    amount_display.admin_order_field = 'amount'

    def status_badge(self, obj):
        """Display payment status as colored badge."""
        colors = {
            PaymentStatus.PENDING: ('#D4A574', 'white'),
            PaymentStatus.COMPLETED: ('#6B8E5E', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', 'black'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'

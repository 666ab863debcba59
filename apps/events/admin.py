# ==========================================
# apps/events/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    """
    Admin interface for Events.

    Cancelled events stay listed with a badge; nothing is hidden.
    """

    list_display = [
        'title',
        'nano_id',
        'event_date',
        'location',
        'status_badge',
        'created_at',
    ]
    list_filter = ['event_date', 'cancelled_at']
    search_fields = ['title', 'nano_id', 'location']
    readonly_fields = ['nano_id', 'created_at', 'updated_at']
    date_hierarchy = 'event_date'

    def status_badge(self, obj):
        """Display cancellation status as colored badge."""
        if obj.is_cancelled:
            bg, fg, label = '#B85C5C', 'white', 'Cancelled'
        else:
            bg, fg, label = '#6B8E5E', 'white', 'Active'
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, label
        )
    status_badge.short_description = 'Status'

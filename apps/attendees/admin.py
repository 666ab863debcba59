# ==========================================
# apps/attendees/admin.py
# ==========================================

from django.contrib import admin
from .models import Attendee, BankInfo


class BankInfoInline(admin.StackedInline):
    """Inline bank info within an attendee."""
    model = BankInfo
    extra = 0
    fields = ['holder_name', 'bank_name', 'clabe', 'account_number']


@admin.register(Attendee)
class AttendeeAdmin(admin.ModelAdmin):
    list_display = ['name', 'event', 'exclude_from_split', 'created_at']
    list_filter = ['exclude_from_split', 'created_at']
    search_fields = ['name', 'event__title', 'event__nano_id']
    raw_id_fields = ['event']
    inlines = [BankInfoInline]


@admin.register(BankInfo)
class BankInfoAdmin(admin.ModelAdmin):
    list_display = ['holder_name', 'bank_name', 'masked_clabe', 'attendee', 'updated_at']
    search_fields = ['holder_name', 'bank_name', 'attendee__name']
    raw_id_fields = ['attendee']
    readonly_fields = ['created_at', 'updated_at']

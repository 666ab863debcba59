# ==========================================
# apps/expenses/admin.py
# ==========================================

from django.contrib import admin
from .models import Expense, ExpenseReceipt, ExpenseExclusion


class ExpenseReceiptInline(admin.TabularInline):
    model = ExpenseReceipt
    extra = 0
    fields = ['url', 'content_type', 'size_bytes', 'created_at']
    readonly_fields = ['created_at']


class ExpenseExclusionInline(admin.TabularInline):
    model = ExpenseExclusion
    extra = 0


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """Admin interface for Expenses."""

    list_display = [
        'description',
        'event',
        'attendee',
        'amount',
        'receipt_count',
        'created_at',
    ]
    list_filter = ['created_at']
    search_fields = ['description', 'event__title', 'event__nano_id', 'attendee__name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ExpenseReceiptInline, ExpenseExclusionInline]

    def receipt_count(self, obj):
        return obj.receipts.count()
    receipt_count.short_description = 'Receipts'

# ==========================================
# apps/shopping/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Category, SuggestedItem, ShoppingItem


class SuggestedItemInline(admin.TabularInline):
    model = SuggestedItem
    extra = 1


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'icon', 'sort_order', 'is_default']
    list_editable = ['sort_order']
    search_fields = ['name']
    inlines = [SuggestedItemInline]


@admin.register(ShoppingItem)
class ShoppingItemAdmin(admin.ModelAdmin):
    """Admin interface for Shopping Items."""

    list_display = ['name', 'event', 'category', 'quantity', 'unit', 'purchased_badge', 'created_at']
    list_filter = ['is_purchased', 'category']
    search_fields = ['name', 'event__title', 'event__nano_id']
    readonly_fields = ['created_at']

    def purchased_badge(self, obj):
        """Display purchase status as colored badge."""
        if obj.is_purchased:
            bg, label = '#6B8E5E', 'Bought'
        else:
            bg, label = '#D4A574', 'Pending'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, label
        )
    purchased_badge.short_description = 'Status'

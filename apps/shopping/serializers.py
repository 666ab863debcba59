from decimal import Decimal

from rest_framework import serializers

from apps.core.serializers import LeadingFieldsMixin, PublicIdField
from .models import Category, SuggestedItem, ShoppingItem, DEFAULT_UNIT


def _name_field(**kwargs):
    return serializers.CharField(
        max_length=100,
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
            'null': 'Name is required',
            'max_length': 'Name is too long',
        },
        **kwargs
    )


def _quantity_field(**kwargs):
    return serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        error_messages={
            'invalid': 'Quantity must be a number',
            'max_digits': 'Quantity is too large',
            'max_whole_digits': 'Quantity is too large',
            'max_decimal_places': 'Quantity can have at most 2 decimal places',
        },
        **kwargs
    )


def _unit_field(**kwargs):
    return serializers.CharField(
        max_length=20,
        error_messages={'max_length': 'Unit is too long'},
        **kwargs
    )


# =============================================================================
# Input Serializers
# =============================================================================

class ShoppingItemInputSerializer(serializers.Serializer):
    """Validate a partial shopping item update."""

    name = _name_field(required=False)
    quantity = _quantity_field(required=False)
    unit = _unit_field(required=False, allow_blank=True)
    isPurchased = serializers.BooleanField(required=False)
    categoryId = serializers.UUIDField(
        required=False,
        allow_null=True,
        error_messages={'invalid': 'Invalid category ID'}
    )

    def validate_quantity(self, value):
        if value <= Decimal('0'):
            raise serializers.ValidationError('Quantity must be positive')
        return value

    def to_service_kwargs(self):
        """Map validated camelCase input to service keyword arguments."""
        mapping = {
            'name': 'name',
            'quantity': 'quantity',
            'unit': 'unit',
            'isPurchased': 'is_purchased',
            'categoryId': 'category_id',
        }
        return {
            mapping[key]: value
            for key, value in self.validated_data.items()
            if key in mapping
        }


class ShoppingItemCreateSerializer(LeadingFieldsMixin, ShoppingItemInputSerializer):
    """
    Validate input for adding a shopping item.

    Fields:
        eventId (str): Public event id
        name (str): 1-100 characters
        categoryId (uuid): Optional
        quantity (decimal): Positive, defaults to 1
        unit (str): Up to 20 characters, defaults to 'piezas'
    """

    eventId = PublicIdField()
    name = _name_field()
    quantity = _quantity_field(required=False, default=Decimal('1'))
    unit = _unit_field(required=False, allow_blank=True, default=DEFAULT_UNIT)


class ApplyTemplateSerializer(serializers.Serializer):
    """Event the template is copied onto."""

    eventId = PublicIdField()


# =============================================================================
# Output Serializers
# =============================================================================

class SuggestedItemSerializer(serializers.ModelSerializer):
    categoryId = serializers.UUIDField(source='category_id', read_only=True)
    defaultUnit = serializers.CharField(source='default_unit', read_only=True)

    class Meta:
        model = SuggestedItem
        fields = ['id', 'categoryId', 'name', 'defaultUnit']
        read_only_fields = fields


class CategorySerializer(serializers.ModelSerializer):
    """Category without its suggestions (nested in shopping items)."""

    sortOrder = serializers.IntegerField(source='sort_order', read_only=True)
    isDefault = serializers.BooleanField(source='is_default', read_only=True)

    class Meta:
        model = Category
        fields = ['id', 'name', 'icon', 'sortOrder', 'isDefault']
        read_only_fields = fields


class CategoryWithSuggestionsSerializer(CategorySerializer):
    suggestedItems = SuggestedItemSerializer(source='suggested_items', many=True, read_only=True)

    class Meta(CategorySerializer.Meta):
        fields = CategorySerializer.Meta.fields + ['suggestedItems']
        read_only_fields = fields


class ShoppingItemSerializer(serializers.ModelSerializer):
    """Serializer for shopping items."""

    categoryId = serializers.UUIDField(source='category_id', read_only=True)
    category = CategorySerializer(read_only=True)
    isPurchased = serializers.BooleanField(source='is_purchased', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = ShoppingItem
        fields = [
            'id',
            'categoryId',
            'category',
            'name',
            'quantity',
            'unit',
            'isPurchased',
            'createdAt',
        ]
        read_only_fields = fields


class TemplateItemSerializer(serializers.Serializer):
    name = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    unit = serializers.CharField()
    categoryName = serializers.CharField(source='category_name')


class ShoppingTemplateSerializer(serializers.Serializer):
    """Built-in template (not a database row)."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    icon = serializers.CharField()
    items = TemplateItemSerializer(many=True)

from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from .serializers import (
    CategoryWithSuggestionsSerializer,
    ShoppingItemSerializer,
    ShoppingItemCreateSerializer,
    ShoppingItemInputSerializer,
    ShoppingTemplateSerializer,
    ApplyTemplateSerializer,
)
from apps.core.serializers import EventQuerySerializer
from apps.shopping.services import (
    list_categories,
    list_items,
    get_item,
    create_item,
    update_item,
    delete_item,
    list_templates,
    apply_template,
)

UUID_LOOKUP_REGEX = '[0-9a-fA-F-]{36}'


class CategoryViewSet(viewsets.ViewSet):
    """Read-only shopping categories with suggested items."""

    @extend_schema(responses={200: CategoryWithSuggestionsSerializer(many=True)})
    def list(self, request):
        categories = list_categories()
        return Response(CategoryWithSuggestionsSerializer(categories, many=True).data)


class ShoppingItemViewSet(viewsets.ViewSet):
    """
    Shopping list of an event.

    list: Items of ?eventId=
    create: Add an item
    retrieve: Get one item
    partial_update: Edit or tick off an item
    destroy: Remove an item
    templates: Built-in lists
    apply_template: Copy a built-in list onto an event
    """

    lookup_value_regex = UUID_LOOKUP_REGEX

    @extend_schema(
        parameters=[OpenApiParameter('eventId', str, required=True)],
        responses={200: ShoppingItemSerializer(many=True)},
    )
    def list(self, request):
        query = EventQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        items = list_items(event_id=query.validated_data['eventId'])
        return Response(ShoppingItemSerializer(items, many=True).data)

    @extend_schema(request=ShoppingItemCreateSerializer, responses={201: ShoppingItemSerializer})
    def create(self, request):
        serializer = ShoppingItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = create_item(
            event_id=serializer.validated_data['eventId'],
            **serializer.to_service_kwargs()
        )
        return Response(ShoppingItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ShoppingItemSerializer})
    def retrieve(self, request, pk=None):
        item = get_item(item_id=pk)
        return Response(ShoppingItemSerializer(item).data)

    @extend_schema(request=ShoppingItemInputSerializer, responses={200: ShoppingItemSerializer})
    def partial_update(self, request, pk=None):
        serializer = ShoppingItemInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        item = update_item(item_id=pk, **serializer.to_service_kwargs())
        return Response(ShoppingItemSerializer(item).data)

    def destroy(self, request, pk=None):
        delete_item(item_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: ShoppingTemplateSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def templates(self, request):
        """GET /api/shopping/templates/"""
        return Response(ShoppingTemplateSerializer(list_templates(), many=True).data)

    @extend_schema(request=ApplyTemplateSerializer, responses={201: ShoppingItemSerializer(many=True)})
    @action(
        detail=False,
        methods=['post'],
        url_path=r'templates/(?P<template_id>[a-z0-9-]+)/apply',
        url_name='apply-template',
    )
    def apply_template(self, request, template_id=None):
        """POST /api/shopping/templates/{templateId}/apply/"""
        serializer = ApplyTemplateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        items = apply_template(
            template_id=template_id,
            event_id=serializer.validated_data['eventId'],
        )
        return Response(
            ShoppingItemSerializer(items, many=True).data,
            status=status.HTTP_201_CREATED
        )

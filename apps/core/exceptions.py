"""
Project-wide API error handling.

Every error leaves the API as ``{"error": "<message>"}``:

    - validation errors: 400 with the first violated rule's message
    - domain "not found" errors: 404
    - anything unhandled: logged with traceback, 500 with a generic message

Domain exceptions live in each app's ``services/exceptions.py`` and derive
from the classes below.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Internal server error'


class NotFoundError(APIException):
    """Base class for unknown event/resource errors."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'not_found'


class DomainValidationError(APIException):
    """Base class for business rule violations detected in services."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request.'
    default_code = 'invalid'


def first_error_message(data) -> str:
    """
    Pull the first human-readable message out of a DRF error payload.

    DRF errors nest as dicts of lists (``{'name': ['Name is required']}``);
    field order follows serializer declaration order.
    """
    if isinstance(data, dict):
        if 'detail' in data:
            return first_error_message(data['detail'])
        for value in data.values():
            return first_error_message(value)
        return ''
    if isinstance(data, (list, tuple)):
        for value in data:
            return first_error_message(value)
        return ''
    return str(data)


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` producing the ``{"error": ...}`` shape."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else 'unknown view',
        )
        return Response(
            {'error': GENERIC_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response.data = {'error': first_error_message(response.data)}
    return response

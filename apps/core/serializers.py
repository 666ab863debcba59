from rest_framework import serializers

from .identifiers import PUBLIC_ID_PATTERN


class PublicIdField(serializers.RegexField):
    """10-character public event identifier (``eventId`` in the API)."""

    def __init__(self, **kwargs):
        kwargs.setdefault('error_messages', {
            'required': 'eventId is required',
            'blank': 'eventId is required',
            'null': 'eventId is required',
            'invalid': 'Invalid event ID',
        })
        super().__init__(PUBLIC_ID_PATTERN, **kwargs)


class LeadingFieldsMixin:
    """
    Validate ``leading_fields`` before the fields inherited from a base
    serializer, so a missing parent id is the first error reported.
    """

    leading_fields = ('eventId',)

    def get_fields(self):
        fields = super().get_fields()
        leading = {name: fields.pop(name) for name in self.leading_fields}
        return {**leading, **fields}


class EventQuerySerializer(serializers.Serializer):
    """Validate the ``?eventId=`` query parameter of list endpoints."""

    eventId = PublicIdField()


class ErrorSerializer(serializers.Serializer):
    """Error body returned by every endpoint (API docs only)."""

    error = serializers.CharField()

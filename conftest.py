import pytest
from datetime import timedelta
from django.utils import timezone
from rest_framework.test import APIClient

from apps.attendees.models import Attendee
from apps.events.models import Event


@pytest.fixture
def api_client():
    """Return an API client (the API has no authentication)."""
    return APIClient()


@pytest.fixture
def future_date():
    """A date one week from now."""
    return timezone.now() + timedelta(days=7)


@pytest.fixture
def event(db, future_date):
    """Create and return an upcoming event."""
    return Event.objects.create(
        title='Carnita de cumpleaños',
        event_date=future_date,
        location='Casa de Ana',
        description='Traigan hielo',
    )


@pytest.fixture
def other_event(db, future_date):
    """Create and return a second, unrelated event."""
    return Event.objects.create(title='Otra carnita', event_date=future_date)


@pytest.fixture
def make_attendee(db):
    """Factory for attendees of an event."""
    def _make(event, name, exclude_from_split=False):
        return Attendee.objects.create(
            event=event,
            name=name,
            exclude_from_split=exclude_from_split,
        )
    return _make


@pytest.fixture
def ana(event, make_attendee):
    return make_attendee(event, 'Ana')


@pytest.fixture
def beto(event, make_attendee):
    return make_attendee(event, 'Beto')


@pytest.fixture
def caro(event, make_attendee):
    """Attendee excluded from the split."""
    return make_attendee(event, 'Caro', exclude_from_split=True)


@pytest.fixture
def media_root(settings, tmp_path):
    """Store uploaded files under a temporary directory."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path

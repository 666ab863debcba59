import pytest
from django.urls import reverse
from rest_framework import status

from apps.attendees.models import Attendee, BankInfo


# =============================================================================
# Attendee Tests
# =============================================================================

@pytest.mark.django_db
class TestAttendeeList:
    """Tests for GET /api/attendees/?eventId="""

    def test_list_in_creation_order(self, api_client, event, ana, beto, caro):
        url = reverse('attendees:attendee-list')
        response = api_client.get(url, {'eventId': event.nano_id})

        assert response.status_code == status.HTTP_200_OK
        assert [a['name'] for a in response.data] == ['Ana', 'Beto', 'Caro']
        assert response.data[2]['excludeFromSplit'] is True

    def test_list_requires_event_id(self, api_client):
        url = reverse('attendees:attendee-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'eventId is required'}

    def test_list_unknown_event(self, api_client, db):
        url = reverse('attendees:attendee-list')
        response = api_client.get(url, {'eventId': 'ABCDEFGHIJ'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_only_this_event(self, api_client, event, other_event, ana, make_attendee):
        make_attendee(other_event, 'Intruso')

        url = reverse('attendees:attendee-list')
        response = api_client.get(url, {'eventId': event.nano_id})

        assert [a['name'] for a in response.data] == ['Ana']


@pytest.mark.django_db
class TestAttendeeCreate:
    """Tests for POST /api/attendees/"""

    def test_create_attendee(self, api_client, event):
        url = reverse('attendees:attendee-list')
        response = api_client.post(url, {'eventId': event.nano_id, 'name': 'Dani'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Dani'
        assert response.data['excludeFromSplit'] is False
        assert Attendee.objects.filter(event=event, name='Dani').exists()

    def test_create_excluded(self, api_client, event):
        url = reverse('attendees:attendee-list')
        response = api_client.post(url, {
            'eventId': event.nano_id,
            'name': 'Abuela',
            'excludeFromSplit': True,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['excludeFromSplit'] is True

    def test_name_required(self, api_client, event):
        url = reverse('attendees:attendee-list')
        response = api_client.post(url, {'eventId': event.nano_id, 'name': ''}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Name is required'}

    def test_name_too_long(self, api_client, event):
        url = reverse('attendees:attendee-list')
        response = api_client.post(url, {'eventId': event.nano_id, 'name': 'x' * 101}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Name is too long'}

    def test_invalid_event_id(self, api_client, db):
        url = reverse('attendees:attendee-list')
        response = api_client.post(url, {'eventId': 'nope', 'name': 'Dani'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Invalid event ID'}


@pytest.mark.django_db
class TestAttendeeDetail:
    """Tests for GET/PATCH/DELETE /api/attendees/{id}/"""

    def test_toggle_exclusion(self, api_client, ana):
        url = reverse('attendees:attendee-detail', kwargs={'pk': ana.id})
        response = api_client.patch(url, {'excludeFromSplit': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        ana.refresh_from_db()
        assert ana.exclude_from_split is True

    def test_rename(self, api_client, ana):
        url = reverse('attendees:attendee-detail', kwargs={'pk': ana.id})
        response = api_client.patch(url, {'name': 'Ana María'}, format='json')

        assert response.data['name'] == 'Ana María'

    def test_delete(self, api_client, ana):
        url = reverse('attendees:attendee-detail', kwargs={'pk': ana.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Attendee.objects.filter(id=ana.id).exists()

    def test_unknown_attendee(self, api_client, db):
        url = reverse('attendees:attendee-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Attendee not found.'}


# =============================================================================
# Bank Info Tests
# =============================================================================

@pytest.mark.django_db
class TestBankInfo:
    """Tests for /api/bank-info/"""

    def test_get_none(self, api_client, ana):
        """No bank info on file returns a null body."""
        url = reverse('attendees:bank-info-list')
        response = api_client.get(url, {'attendeeId': str(ana.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None

    def test_create_and_get(self, api_client, ana, bank_info_payload):
        url = reverse('attendees:bank-info-list')
        response = api_client.post(url, {'attendeeId': str(ana.id), **bank_info_payload}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['clabe'] == '012180001234567891'

        fetched = api_client.get(url, {'attendeeId': str(ana.id)})
        assert fetched.data['holderName'] == 'Ana López'

    def test_empty_body_reports_attendee_id_first(self, api_client, db):
        url = reverse('attendees:bank-info-list')
        response = api_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'attendeeId is required'}

    def test_clabe_must_be_18_digits(self, api_client, ana, bank_info_payload):
        url = reverse('attendees:bank-info-list')
        bank_info_payload['clabe'] = '12345'
        response = api_client.post(url, {'attendeeId': str(ana.id), **bank_info_payload}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'CLABE must be exactly 18 digits'}

    def test_second_record_rejected(self, api_client, ana, ana_bank_info, bank_info_payload):
        url = reverse('attendees:bank-info-list')
        response = api_client.post(url, {'attendeeId': str(ana.id), **bank_info_payload}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'This attendee already has bank info.'}
        assert BankInfo.objects.filter(attendee=ana).count() == 1

    def test_patch(self, api_client, ana_bank_info):
        url = reverse('attendees:bank-info-detail', kwargs={'pk': ana_bank_info.id})
        response = api_client.patch(url, {'bankName': 'Banorte'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['bankName'] == 'Banorte'
        assert response.data['holderName'] == 'Ana López'

    def test_put_requires_all_fields(self, api_client, ana_bank_info):
        url = reverse('attendees:bank-info-detail', kwargs={'pk': ana_bank_info.id})
        response = api_client.put(url, {'bankName': 'Banorte'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Holder name is required'}

    def test_delete(self, api_client, ana_bank_info):
        url = reverse('attendees:bank-info-detail', kwargs={'pk': ana_bank_info.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not BankInfo.objects.filter(id=ana_bank_info.id).exists()

import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.expenses.models import Expense
from apps.settlements.models import Payment, PaymentStatus
from apps.shopping.models import ShoppingItem


# =============================================================================
# Payment Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentCreate:
    """Tests for POST /api/payments/"""

    def test_create_then_update_same_pair(self, api_client, event, ana, beto):
        """Recording A->B twice leaves one row with the latest amount."""
        url = reverse('settlements:payment-list')
        body = {
            'eventId': event.nano_id,
            'fromAttendeeId': str(ana.id),
            'toAttendeeId': str(beto.id),
            'amount': 100,
        }

        first = api_client.post(url, body, format='json')
        second = api_client.post(url, {**body, 'amount': 150}, format='json')

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_200_OK
        assert first.data['id'] == second.data['id']

        payments = Payment.objects.filter(event=event, from_attendee=ana, to_attendee=beto)
        assert payments.count() == 1
        assert payments.get().amount == Decimal('150.00')
        assert payments.get().status == PaymentStatus.COMPLETED

    def test_pending_status(self, api_client, event, ana, beto):
        url = reverse('settlements:payment-list')
        response = api_client.post(url, {
            'eventId': event.nano_id,
            'fromAttendeeId': str(ana.id),
            'toAttendeeId': str(beto.id),
            'amount': '20.50',
            'status': 'pending',
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'pending'
        assert response.data['eventId'] == event.nano_id

    def test_self_payment_rejected(self, api_client, event, ana):
        url = reverse('settlements:payment-list')
        response = api_client.post(url, {
            'eventId': event.nano_id,
            'fromAttendeeId': str(ana.id),
            'toAttendeeId': str(ana.id),
            'amount': 10,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'An attendee cannot pay themselves.'}

    def test_attendee_from_other_event(self, api_client, event, other_event, ana, make_attendee):
        stranger = make_attendee(other_event, 'Extraño')

        url = reverse('settlements:payment-list')
        response = api_client.post(url, {
            'eventId': event.nano_id,
            'fromAttendeeId': str(stranger.id),
            'toAttendeeId': str(ana.id),
            'amount': 10,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Attendee does not belong to this event.'}

    def test_missing_amount(self, api_client, event, ana, beto):
        url = reverse('settlements:payment-list')
        response = api_client.post(url, {
            'eventId': event.nano_id,
            'fromAttendeeId': str(ana.id),
            'toAttendeeId': str(beto.id),
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Amount is required'}


@pytest.mark.django_db
class TestPaymentListDelete:
    """Tests for GET /api/payments/ and DELETE /api/payments/{id}/"""

    def test_list(self, api_client, event, beto_paid_ana):
        url = reverse('settlements:payment-list')
        response = api_client.get(url, {'eventId': event.nano_id})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['amount'] == Decimal('150.00')

    def test_delete(self, api_client, beto_paid_ana):
        url = reverse('settlements:payment-detail', kwargs={'pk': beto_paid_ana.id})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Payment.objects.exists()

    def test_delete_unknown(self, api_client, db):
        url = reverse('settlements:payment-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Payment not found.'}


# =============================================================================
# Summary / Report Tests
# =============================================================================

@pytest.mark.django_db
class TestEventSummary:
    """Tests for GET /api/events/{eventId}/summary/"""

    def test_summary(self, api_client, event, ana, beto, caro, ana_paid_300):
        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.data
        assert data['strategy'] == 'pairwise'
        assert data['totalExpenses'] == Decimal('300.00')
        assert data['perPerson'] == Decimal('150.00')
        assert data['activeCount'] == 2
        assert [a['name'] for a in data['excludedAttendees']] == ['Caro']

        balances = {b['attendee']['name']: b['balance'] for b in data['balances']}
        assert balances == {'Ana': Decimal('150.00'), 'Beto': Decimal('-150.00')}

        [group] = data['transfers']
        assert group['debtor']['name'] == 'Beto'
        assert group['transfers'][0]['creditor']['name'] == 'Ana'
        assert group['transfers'][0]['amount'] == Decimal('150.00')
        assert group['transfers'][0]['isPaid'] is False
        assert group['transfers'][0]['paymentId'] is None
        assert group['transfers'][0]['transferId'] == f'{beto.id}-{ana.id}'

    def test_summary_marks_paid(self, api_client, event, ana_paid_300, beto_paid_ana):
        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        response = api_client.get(url)

        transfer = response.data['transfers'][0]['transfers'][0]
        assert transfer['isPaid'] is True
        assert transfer['paymentId'] == str(beto_paid_ana.id)

    def test_deleting_expense_updates_summary(self, api_client, event, ana, beto, ana_paid_300):
        Expense.objects.create(event=event, attendee=ana, description='Hielo', amount=Decimal('100'))
        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        assert api_client.get(url).data['totalExpenses'] == Decimal('400.00')

        api_client.delete(reverse('expenses:expense-detail', kwargs={'pk': ana_paid_300.id}))

        data = api_client.get(url).data
        assert data['totalExpenses'] == Decimal('100.00')
        paid = {b['attendee']['name']: b['amountPaid'] for b in data['balances']}
        assert paid['Ana'] == Decimal('100.00')

    def test_no_active_attendees(self, api_client, event, caro):
        Expense.objects.create(event=event, attendee=caro, description='Carne', amount=Decimal('100'))

        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        data = api_client.get(url).data

        assert data['perPerson'] == Decimal('0.00')
        assert data['balances'] == []

    def test_minimal_strategy(self, api_client, event, ana_paid_300):
        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        response = api_client.get(url, {'strategy': 'minimal'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['strategy'] == 'minimal'

    def test_unknown_strategy(self, api_client, event):
        url = reverse('settlements:event-summary', kwargs={'event_id': event.nano_id})
        response = api_client.get(url, {'strategy': 'fair'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Unknown strategy. Use pairwise or minimal'}

    def test_unknown_event(self, api_client, db):
        url = reverse('settlements:event-summary', kwargs={'event_id': 'ABCDEFGHIJ'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'error': 'Event not found.'}


@pytest.mark.django_db
class TestEventReport:
    """Tests for GET /api/events/{eventId}/report/"""

    def test_report(self, api_client, event, ana, beto, caro, ana_paid_300):
        ShoppingItem.objects.create(event=event, name='Carbón', is_purchased=True)
        ShoppingItem.objects.create(event=event, name='Hielo')
        Expense.objects.create(event=event, description='Propina', amount=Decimal('20'))

        url = reverse('settlements:event-report', kwargs={'event_id': event.nano_id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.data
        assert [(p['name'], p['total']) for p in data['expensesByPerson']] == [('Ana', Decimal('300.00'))]

        statuses = {p['name']: p['status'] for p in data['paymentStatus']}
        assert statuses == {'Ana': 'paid', 'Beto': 'pending'}

        assert data['shopping'] == {'total': 2, 'purchased': 1}
        assert data['totals']['totalExpenses'] == Decimal('320.00')
        assert data['totals']['perPerson'] == Decimal('160.00')
        assert data['totals']['unassignedTotal'] == Decimal('20.00')
        assert data['totals']['attendeeCount'] == 3

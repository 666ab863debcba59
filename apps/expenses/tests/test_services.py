"""
Service layer unit tests for expenses app.
"""

import pytest
from decimal import Decimal

from apps.expenses.models import Expense, ExpenseReceipt
from apps.expenses.services import (
    parse_receipt_urls,
    create_expense,
    update_expense,
    delete_expense,
    add_receipt,
    upload_receipt,
)
from apps.expenses.services.exceptions import (
    AttendeeNotInEventError,
    InvalidReceiptFileError,
)


class TestParseReceiptUrls:
    """Tests for decoding the single-string receipt value."""

    def test_json_array(self):
        assert parse_receipt_urls('["https://a/1.jpg", "https://a/2.jpg"]') == [
            'https://a/1.jpg',
            'https://a/2.jpg',
        ]

    def test_bare_url(self):
        assert parse_receipt_urls('https://a/1.jpg') == ['https://a/1.jpg']

    def test_empty_values(self):
        assert parse_receipt_urls(None) == []
        assert parse_receipt_urls('') == []
        assert parse_receipt_urls('[]') == []

    def test_array_skips_blanks(self):
        assert parse_receipt_urls('["https://a/1.jpg", "", null]') == ['https://a/1.jpg']


@pytest.mark.django_db
class TestExpenseManagement:
    """Tests for expense_management.py service functions."""

    def test_create_with_receipts_and_exclusions(self, event, ana, beto):
        expense = create_expense(
            event_id=event.nano_id,
            description='Carne',
            amount=Decimal('300'),
            attendee_id=ana.id,
            receipt_urls=['https://a/1.jpg', 'https://a/1.jpg', 'https://a/2.jpg'],
            excluded_attendee_ids=[beto.id],
        )

        assert [r.url for r in expense.receipts.all()] == ['https://a/1.jpg', 'https://a/2.jpg']
        assert [x.attendee_id for x in expense.exclusions.all()] == [beto.id]

    def test_exclusion_from_other_event_rolls_back(self, event, other_event, ana, make_attendee):
        stranger = make_attendee(other_event, 'Extraño')

        with pytest.raises(AttendeeNotInEventError):
            create_expense(
                event_id=event.nano_id,
                description='Carne',
                amount=Decimal('300'),
                attendee_id=ana.id,
                excluded_attendee_ids=[stranger.id],
            )

        assert not Expense.objects.exists()

    def test_update_keeps_existing_receipt_rows(self, expense):
        kept = ExpenseReceipt.objects.create(expense=expense, url='https://a/keep.jpg')
        ExpenseReceipt.objects.create(expense=expense, url='https://a/drop.jpg')

        updated = update_expense(expense_id=expense.id, receipt_urls=['https://a/keep.jpg', 'https://a/new.jpg'])

        urls = [r.url for r in updated.receipts.all()]
        assert sorted(urls) == ['https://a/keep.jpg', 'https://a/new.jpg']
        assert ExpenseReceipt.objects.filter(id=kept.id).exists()

    def test_delete_removes_stored_files(self, expense, make_image, media_root, django_capture_on_commit_callbacks):
        receipt = add_receipt(expense_id=expense.id, file=make_image())
        path = media_root / receipt.storage_path
        assert path.exists()

        with django_capture_on_commit_callbacks(execute=True):
            delete_expense(expense_id=expense.id)

        assert not path.exists()
        assert not ExpenseReceipt.objects.exists()

    def test_failed_update_keeps_receipt_file(
        self, expense, other_event, make_attendee, make_image, media_root, django_capture_on_commit_callbacks
    ):
        """A rolled back update leaves both the receipt row and its file."""
        receipt = add_receipt(expense_id=expense.id, file=make_image())
        stranger = make_attendee(other_event, 'Extraño')

        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            with pytest.raises(AttendeeNotInEventError):
                update_expense(
                    expense_id=expense.id,
                    receipt_urls=[],
                    excluded_attendee_ids=[stranger.id],
                )

        assert callbacks == []
        assert ExpenseReceipt.objects.filter(id=receipt.id).exists()
        assert (media_root / receipt.storage_path).exists()

    def test_uploaded_url_is_tied_to_stored_file(self, event, make_image, media_root):
        url = upload_receipt(event_id=event.nano_id, file=make_image('a.png', 'image/png'))

        expense = create_expense(
            event_id=event.nano_id,
            description='Tortillas',
            amount=Decimal('60'),
            receipt_urls=[f'https://carnita.example.com{url}'],
        )

        receipt = expense.receipts.get()
        assert receipt.url == url
        assert receipt.storage_path == url.removeprefix('/media/')
        assert receipt.content_type == 'image/png'
        assert receipt.size_bytes == 1024

    def test_absolute_url_keeps_existing_receipt(self, expense, make_image, media_root):
        receipt = add_receipt(expense_id=expense.id, file=make_image())

        updated = update_expense(
            expense_id=expense.id,
            receipt_urls=[f'http://testserver{receipt.url}'],
        )

        assert [r.id for r in updated.receipts.all()] == [receipt.id]
        assert (media_root / receipt.storage_path).exists()

    def test_other_event_upload_stays_external(self, expense, other_event, make_image, media_root):
        url = upload_receipt(event_id=other_event.nano_id, file=make_image())

        updated = update_expense(expense_id=expense.id, receipt_urls=[url])

        receipt = updated.receipts.get()
        assert receipt.url == url
        assert receipt.storage_path == ''


@pytest.mark.django_db
class TestReceiptStorage:
    """Tests for receipt upload services."""

    def test_upload_path_uses_event_id(self, event, make_image, media_root):
        url = upload_receipt(event_id=event.nano_id, file=make_image('foto.webp', 'image/webp'))

        assert url.startswith(f'/media/receipts/{event.nano_id}/')
        assert url.endswith('.webp')

    def test_heic_allowed(self, expense, make_image, media_root):
        receipt = add_receipt(expense_id=expense.id, file=make_image('IMG_0001.HEIC', 'image/heic'))

        assert receipt.content_type == 'image/heic'
        assert receipt.storage_path.endswith('.heic')

    def test_extension_follows_content_type(self, expense, make_image, media_root):
        receipt = add_receipt(expense_id=expense.id, file=make_image('x.html', 'image/png'))

        assert receipt.storage_path.endswith('.png')
        assert receipt.url.endswith('.png')

    def test_gif_rejected(self, expense, make_image, media_root):
        with pytest.raises(InvalidReceiptFileError):
            add_receipt(expense_id=expense.id, file=make_image('a.gif', 'image/gif'))

        assert not ExpenseReceipt.objects.exists()

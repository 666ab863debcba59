"""
Receipt files and receipt URL values.

Uploads go through Django's default storage under
``<RECEIPT_UPLOAD_DIR>/<eventId>/<timestamp>.<ext>``.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlsplit

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import transaction

from .exceptions import InvalidReceiptFileError

logger = logging.getLogger(__name__)

EXTENSIONS_BY_CONTENT_TYPE = {
    'image/jpeg': 'jpg',
    'image/png': 'png',
    'image/webp': 'webp',
    'image/heic': 'heic',
}
CONTENT_TYPES_BY_EXTENSION = {ext: ct for ct, ext in EXTENSIONS_BY_CONTENT_TYPE.items()}


@dataclass(frozen=True)
class StoredReceipt:
    storage_path: str
    url: str
    content_type: str
    size_bytes: int


def parse_receipt_urls(raw: Optional[str]) -> list[str]:
    """
    Decode a single-string receipt value into a list of URLs.

    The value is either a JSON-encoded array of URLs or one bare URL.
    Anything that doesn't decode to a list is treated as one URL.

    >>> parse_receipt_urls('["https://a/1.jpg", "https://a/2.jpg"]')
    ['https://a/1.jpg', 'https://a/2.jpg']
    >>> parse_receipt_urls('https://a/1.jpg')
    ['https://a/1.jpg']
    """
    if raw is None:
        return []
    raw = raw.strip()
    if not raw:
        return []

    try:
        decoded = json.loads(raw)
    except ValueError:
        return [raw]

    if isinstance(decoded, list):
        return [str(url).strip() for url in decoded if url and str(url).strip()]
    if isinstance(decoded, str):
        return [decoded] if decoded.strip() else []
    return [raw]


def validate_receipt_file(file) -> None:
    """
    Check content type and size of an uploaded receipt.

    Raises:
        InvalidReceiptFileError: Unsupported type or larger than the limit
    """
    content_type = getattr(file, 'content_type', None)
    if content_type not in settings.RECEIPT_ALLOWED_CONTENT_TYPES or content_type not in EXTENSIONS_BY_CONTENT_TYPE:
        raise InvalidReceiptFileError('File type not allowed. Use JPG, PNG, WebP or HEIC')

    max_bytes = settings.RECEIPT_MAX_UPLOAD_BYTES
    if file.size > max_bytes:
        max_mb = max_bytes // (1024 * 1024)
        raise InvalidReceiptFileError(f'File is too large. Maximum {max_mb}MB')


def store_receipt_file(*, event_id: str, file) -> StoredReceipt:
    """
    Validate and save an uploaded receipt, returning where it went.

    The extension comes from the validated content type; the client's file
    name is ignored.
    """
    validate_receipt_file(file)

    extension = EXTENSIONS_BY_CONTENT_TYPE[file.content_type]
    timestamp = int(time.time() * 1000)
    name = f"{settings.RECEIPT_UPLOAD_DIR}/{event_id}/{timestamp}.{extension}"

    storage_path = default_storage.save(name, file)
    logger.info("Stored receipt %s (%d bytes)", storage_path, file.size)

    return StoredReceipt(
        storage_path=storage_path,
        url=default_storage.url(storage_path),
        content_type=file.content_type,
        size_bytes=file.size,
    )


def find_stored_receipt(url: str, *, event_id: str) -> Optional[StoredReceipt]:
    """
    Map a receipt URL handed out by this server back to its stored file.

    Both the absolute form returned by the API and the bare ``/media/...``
    path are recognised. Only files under the event's own receipt
    directory match; anything else is an external URL and returns None.
    """
    media_prefix = urlsplit(settings.MEDIA_URL).path
    path = unquote(urlsplit(url).path)
    if not path.startswith(media_prefix):
        return None

    name = path[len(media_prefix):]
    if not name.startswith(f"{settings.RECEIPT_UPLOAD_DIR}/{event_id}/") or '..' in name.split('/'):
        return None
    if not default_storage.exists(name):
        return None

    extension = name.rsplit('.', 1)[-1].lower()
    return StoredReceipt(
        storage_path=name,
        url=default_storage.url(name),
        content_type=CONTENT_TYPES_BY_EXTENSION.get(extension, ''),
        size_bytes=default_storage.size(name),
    )


def delete_receipt_file(storage_path: str) -> None:
    if storage_path and default_storage.exists(storage_path):
        default_storage.delete(storage_path)


def delete_receipt_file_on_commit(storage_path: str) -> None:
    """Delete a stored file once the surrounding transaction commits."""
    if storage_path:
        transaction.on_commit(lambda: delete_receipt_file(storage_path))

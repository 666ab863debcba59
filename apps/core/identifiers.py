"""Short public identifiers used in event URLs (``/{eventId}/...``)."""

import re
import secrets

PUBLIC_ID_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
PUBLIC_ID_LENGTH = 10
PUBLIC_ID_PATTERN = re.compile(rf'^[0-9A-Za-z]{{{PUBLIC_ID_LENGTH}}}$')


def generate_public_id(length: int = PUBLIC_ID_LENGTH) -> str:
    """Return a URL-safe random id drawn from the 62-symbol alphabet."""
    return ''.join(secrets.choice(PUBLIC_ID_ALPHABET) for _ in range(length))


def is_valid_public_id(value) -> bool:
    return isinstance(value, str) and bool(PUBLIC_ID_PATTERN.match(value))

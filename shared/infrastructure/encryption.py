"""
Encryption utilities

Provides encryption/decryption for secrets stored at rest, such as the
hand-over tokens (QR codes) of rental requests.
Uses Fernet symmetric encryption keyed from settings.ENCRYPTION_KEY.
"""

import base64
import hashlib
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


def get_encryption_key() -> bytes:
    """
    Get encryption key from settings

    Any string is accepted and stretched with SHA-256 into the 32-byte
    URL-safe base64 key Fernet expects.
    """
    key = getattr(settings, 'ENCRYPTION_KEY', None)

    if not key:
        raise ImproperlyConfigured("ENCRYPTION_KEY is not configured")

    if isinstance(key, str):
        key = base64.urlsafe_b64encode(hashlib.sha256(key.encode()).digest())

    return key


@lru_cache(maxsize=4)
def _fernet(key: bytes) -> Fernet:
    return Fernet(key)


def encrypt_string(plaintext: str) -> str:
    """Encrypt a string, returning the Fernet token as text"""
    if not plaintext:
        return ''
    return _fernet(get_encryption_key()).encrypt(plaintext.encode()).decode()


def decrypt_string(encrypted: str) -> str:
    """
    Decrypt a string produced by encrypt_string

    Raises cryptography.fernet.InvalidToken if the value was not
    encrypted with the configured key.
    """
    if not encrypted:
        return ''
    return _fernet(get_encryption_key()).decrypt(encrypted.encode()).decode()


__all__ = ['InvalidToken', 'decrypt_string', 'encrypt_string', 'get_encryption_key']

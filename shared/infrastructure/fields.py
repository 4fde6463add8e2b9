"""
Custom Django model fields for sensitive data.

Provides EncryptedCharField that transparently encrypts data
before saving to database and decrypts when loading.
"""

import logging

from django.db import models

from .encryption import InvalidToken, decrypt_string, encrypt_string

logger = logging.getLogger(__name__)


class EncryptedCharField(models.TextField):
    """
    Text field that encrypts its value before saving and decrypts it
    when loading. An empty value is stored as an empty string.

    Ciphertexts are not deterministic, so the column cannot be used in
    lookups; compare after loading instead.
    """

    description = "Encrypted text field"

    def __init__(self, *args, **kwargs):
        # Store max_length for validation but use TextField storage
        self.max_length_validation = kwargs.pop('max_length', None)
        super().__init__(*args, **kwargs)

    def from_db_value(self, value, expression, connection):
        if value is None or value == '':
            return value
        try:
            return decrypt_string(value)
        except InvalidToken:
            logger.error(f"Cannot decrypt value of {self.model.__name__}.{self.name}")
            raise

    def get_prep_value(self, value):
        if value is None or value == '':
            return ''
        return encrypt_string(str(value))

    def to_python(self, value):
        if value is None:
            return value
        return str(value)

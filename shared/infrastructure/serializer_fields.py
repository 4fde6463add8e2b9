"""Serializer fields shared by the REST endpoints."""

from datetime import datetime

from django.utils.dateparse import parse_datetime
from rest_framework import serializers


class DayField(serializers.DateField):
    """
    Date field that also accepts datetimes and keeps only the calendar day.

    Clients send either ``2025-06-01`` or ``2025-06-01T14:30:00Z``; both
    parse to ``date(2025, 6, 1)``.
    """

    def to_internal_value(self, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and 'T' in value:
            parsed = parse_datetime(value.strip())
            if parsed is None:
                self.fail('invalid', format='YYYY-MM-DD')
            return parsed.date()
        return super().to_internal_value(value)

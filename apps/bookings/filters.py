"""FilterSet for listing a user's requests."""

from __future__ import annotations

import django_filters  # type: ignore

from apps.bookings.domain import ActorRole, RequestFilters, RequestStatus

from .models import OfferRequest

ROLE_CHOICES = [
    (ActorRole.LESSOR.value, "Lessor"),
    (ActorRole.LESSEE.value, "Lessee"),
]


class RequestFilterSet(django_filters.FilterSet):
    """
    ``?status=<id>&role=lessor|lessee&offer=<uuid>``

    ``role`` needs the caller, so the FilterSet is built with ``user_id``.
    """

    status = django_filters.TypedChoiceFilter(choices=OfferRequest.Status.choices, coerce=int)
    role = django_filters.ChoiceFilter(choices=ROLE_CHOICES, method="filter_role")
    offer = django_filters.UUIDFilter(field_name="offer_id")

    class Meta:
        model = OfferRequest
        fields = ["status", "offer"]

    def __init__(self, data=None, queryset=None, *, user_id=None, **kwargs):  # type: ignore
        super().__init__(data, queryset=queryset, **kwargs)
        self.user_id = user_id

    def filter_role(self, queryset, name, value):  # type: ignore
        if value == ActorRole.LESSOR.value:
            return queryset.filter(offer__lessor_id=self.user_id)
        if value == ActorRole.LESSEE.value:
            return queryset.filter(lessee_id=self.user_id)
        return queryset

    def to_filters(self) -> RequestFilters:
        """Translate validated query parameters into domain filters."""
        data = self.form.cleaned_data
        status = data.get("status")
        role = data.get("role")
        return RequestFilters(
            status=RequestStatus(status) if status not in (None, "") else None,
            role=ActorRole(role) if role else None,
            offer_id=data.get("offer"),
        )


def params_for(filters: RequestFilters) -> dict[str, str]:
    """Inverse of RequestFilterSet.to_filters, for building querysets."""
    params = {}
    if filters.status is not None:
        params["status"] = str(int(filters.status))
    if filters.role is not None:
        params["role"] = filters.role.value
    if filters.offer_id is not None:
        params["offer"] = str(filters.offer_id)
    return params

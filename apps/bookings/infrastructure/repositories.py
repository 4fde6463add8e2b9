"""Django ORM implementation of the request store."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from django.db.models import Q  # type: ignore

from apps.bookings.domain import OfferRequest, RequestFilters, RequestRepository, RequestStatus
from apps.bookings.filters import RequestFilterSet, params_for
from apps.bookings.models import OfferRequest as OfferRequestModel
from shared.domain.value_objects import DateRange
from shared.infrastructure.locking import lock_queryset_if_possible


def to_request(model: OfferRequestModel) -> OfferRequest:
    return OfferRequest(
        id=model.id,
        lessee_id=model.lessee_id,
        offer_id=model.offer_id,
        lessor_id=model.offer.lessor_id,
        dates=DateRange(model.from_date, model.to_date),
        status=RequestStatus(model.status),
        message=model.message,
        qr_code=model.qr_code or None,
        lessor_has_update=model.lessor_has_update,
        lessee_has_update=model.lessee_has_update,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class DjangoRequestRepository(RequestRepository):
    def _queryset(self):
        return OfferRequestModel.objects.select_related("offer")

    def get(self, request_id: UUID, lock: bool = False) -> OfferRequest | None:
        queryset = self._queryset().filter(id=request_id)
        if lock:
            queryset = lock_queryset_if_possible(queryset)
        model = queryset.first()
        return to_request(model) if model else None

    def save(self, request: OfferRequest) -> OfferRequest:
        OfferRequestModel.objects.update_or_create(
            id=request.id,
            defaults={
                "lessee_id": request.lessee_id,
                "offer_id": request.offer_id,
                "status": int(request.status),
                "from_date": request.dates.from_date,
                "to_date": request.dates.to_date,
                "message": request.message,
                "qr_code": request.qr_code or "",
                "lessor_has_update": request.lessor_has_update,
                "lessee_has_update": request.lessee_has_update,
                "created_at": request.created_at,
                "updated_at": request.updated_at,
            },
        )
        return request

    def list_by_user(self, user_id: UUID, filters: RequestFilters) -> list[OfferRequest]:
        parties = self._queryset().filter(Q(lessee_id=user_id) | Q(offer__lessor_id=user_id))
        filterset = RequestFilterSet(params_for(filters), queryset=parties, user_id=user_id)
        return [to_request(model) for model in filterset.qs.order_by("-created_at")]

    def list_open_created_before(self, cutoff: datetime) -> list[OfferRequest]:
        queryset = self._queryset().filter(
            status=int(RequestStatus.OPEN),
            created_at__lt=cutoff,
        )
        return [to_request(model) for model in queryset.order_by("created_at")]

    def exists_for_offer(self, lessee_id: UUID, offer_id: UUID) -> bool:
        return OfferRequestModel.objects.filter(lessee_id=lessee_id, offer_id=offer_id).exists()

    def exists_between(self, lessee_id: UUID, lessor_id: UUID) -> bool:
        return OfferRequestModel.objects.filter(lessee_id=lessee_id, offer__lessor_id=lessor_id).exists()

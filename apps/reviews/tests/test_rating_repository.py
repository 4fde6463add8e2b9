"""ORM tests for the rating store."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

from django.test import TestCase

from apps.offers.models import Offer
from apps.reviews.domain import Rating, RatingTarget
from apps.reviews.infrastructure.repositories import DjangoRatingRepository
from apps.reviews.models import OfferRating, UserRating
from apps.users.domain import RatingRole
from apps.users.models import CustomUser
from shared.domain.errors import ForbiddenError


class RatingRepositoryTests(TestCase):
    def setUp(self) -> None:
        self.repository = DjangoRatingRepository()
        self.lessor = CustomUser.objects.create_user(email="lessor@example.com", password="pass12345")
        self.lessee = CustomUser.objects.create_user(email="lessee@example.com", password="pass12345")
        self.offer = Offer.objects.create(lessor=self.lessor, title="Kayak", price=Decimal("25.00"))

    def test_duplicate_offer_rating_insert_is_forbidden(self) -> None:
        target = RatingTarget.offer(self.offer.id)
        self.repository.save(Rating(owner_id=self.lessee.id, target=target, value=4))

        with self.assertRaises(ForbiddenError):
            self.repository.save(Rating(id=uuid4(), owner_id=self.lessee.id, target=target, value=2))

        self.assertEqual(OfferRating.objects.count(), 1)
        self.assertEqual(OfferRating.objects.get().rating, 4)

    def test_duplicate_user_rating_insert_is_forbidden(self) -> None:
        target = RatingTarget.user(self.lessor.id, RatingRole.LESSOR)
        self.repository.save(Rating(owner_id=self.lessee.id, target=target, value=5))

        with self.assertRaises(ForbiddenError):
            self.repository.save(Rating(owner_id=self.lessee.id, target=target, value=1))

        self.assertEqual(UserRating.objects.count(), 1)

    def test_other_role_of_same_user_is_a_separate_rating(self) -> None:
        as_lessor = RatingTarget.user(self.lessor.id, RatingRole.LESSOR)
        as_lessee = RatingTarget.user(self.lessor.id, RatingRole.LESSEE)
        self.repository.save(Rating(owner_id=self.lessee.id, target=as_lessor, value=5))
        self.repository.save(Rating(owner_id=self.lessee.id, target=as_lessee, value=3))

        self.assertEqual(UserRating.objects.filter(owner=self.lessee).count(), 2)

"""Transaction boundaries of the Django unit of work."""

from django.db import DatabaseError
from django.test import TestCase

from apps.users.models import CustomUser
from shared.application.uow import DjangoUnitOfWork
from shared.domain.errors import InternalError, NotFoundError


class DjangoUnitOfWorkTests(TestCase):
    def test_commits_on_success(self):
        with DjangoUnitOfWork():
            CustomUser.objects.create_user(email="kept@example.com", password="Secret123!")

        self.assertTrue(CustomUser.objects.filter(email="kept@example.com").exists())

    def test_database_error_rolls_back_and_becomes_internal_error(self):
        with self.assertRaises(InternalError) as raised:
            with DjangoUnitOfWork():
                CustomUser.objects.create_user(email="lost@example.com", password="Secret123!")
                raise DatabaseError("connection reset")

        self.assertIsInstance(raised.exception.__cause__, DatabaseError)
        self.assertEqual(CustomUser.objects.count(), 0)

    def test_domain_error_rolls_back_and_propagates_unchanged(self):
        with self.assertRaises(NotFoundError):
            with DjangoUnitOfWork():
                CustomUser.objects.create_user(email="lost@example.com", password="Secret123!")
                raise NotFoundError("Offer")

        self.assertEqual(CustomUser.objects.count(), 0)

import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("offers", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="OfferRating",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("headline", models.CharField(blank=True, max_length=400)),
                ("rating_text", models.CharField(blank=True, max_length=400)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "offer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ratings",
                        to="offers.offer",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offer_ratings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Offer rating",
                "verbose_name_plural": "Offer ratings",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(fields=("owner", "offer"), name="unique_offer_rating_per_owner"),
                ],
                "indexes": [
                    models.Index(fields=["offer", "-created_at"], name="offer_rating_offer_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="UserRating",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                ("headline", models.CharField(blank=True, max_length=400)),
                ("rating_text", models.CharField(blank=True, max_length=400)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "rating_type",
                    models.CharField(choices=[("lessor", "As lessor"), ("lessee", "As lessee")], max_length=6),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="given_user_ratings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "rated_user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="received_user_ratings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "User rating",
                "verbose_name_plural": "User ratings",
                "ordering": ["-created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("owner", "rated_user", "rating_type"),
                        name="unique_user_rating_per_owner_and_type",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("owner", models.F("rated_user")), _negated=True),
                        name="user_rating_not_self",
                    ),
                ],
                "indexes": [
                    models.Index(
                        fields=["rated_user", "rating_type", "-created_at"],
                        name="user_rating_target_idx",
                    ),
                ],
            },
        ),
    ]

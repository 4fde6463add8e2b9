import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import shared.infrastructure.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("offers", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="OfferRequest",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "status",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (1, "Open"),
                            (2, "Accepted by lessor"),
                            (3, "Rejected by lessor"),
                            (4, "Item lent to lessee"),
                            (5, "Item returned to lessor"),
                            (6, "Canceled by lessor"),
                            (7, "Canceled by lessee"),
                            (8, "Timed out"),
                        ],
                        default=1,
                    ),
                ),
                ("from_date", models.DateField()),
                ("to_date", models.DateField()),
                ("message", models.TextField(blank=True)),
                ("qr_code", shared.infrastructure.fields.EncryptedCharField(blank=True, default="")),
                ("lessor_has_update", models.BooleanField(default=True)),
                ("lessee_has_update", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "lessee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offer_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "offer",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="requests",
                        to="offers.offer",
                    ),
                ),
            ],
            options={
                "verbose_name": "Offer request",
                "verbose_name_plural": "Offer requests",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(to_date__gte=models.F("from_date")),
                        name="offer_request_valid_dates",
                    ),
                ],
                "indexes": [
                    models.Index(fields=["offer", "status"], name="request_offer_status_idx"),
                    models.Index(fields=["lessee", "-created_at"], name="request_lessee_created_idx"),
                    models.Index(fields=["status", "created_at"], name="request_status_created_idx"),
                ],
            },
        ),
    ]

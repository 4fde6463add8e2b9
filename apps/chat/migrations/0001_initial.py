import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ChatMessage",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("chat_id", models.CharField(db_index=True, max_length=80)),
                ("message_content", models.TextField()),
                (
                    "message_type",
                    models.PositiveSmallIntegerField(choices=[(1, "Text"), (2, "Offer request")], default=1),
                ),
                ("status", models.PositiveSmallIntegerField(choices=[(1, "Sent"), (2, "Read")], default=1)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "from_user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sent_messages",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "to_user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="received_messages",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Message",
                "verbose_name_plural": "Messages",
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["chat_id", "created_at"], name="chat_message_chat_idx"),
                    models.Index(fields=["to_user", "status"], name="chat_message_inbox_idx"),
                ],
            },
        ),
    ]

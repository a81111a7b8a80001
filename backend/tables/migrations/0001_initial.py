import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Table",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("table_number", models.CharField(db_index=True, max_length=20)),
                (
                    "seats",
                    models.PositiveIntegerField(
                        default=4,
                        help_text="Number of seats, at least one",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("EMPTY", "Empty"),
                            ("OCCUPIED", "Occupied"),
                            ("AWAITING_PAYMENT", "Awaiting Payment"),
                        ],
                        db_index=True,
                        default="EMPTY",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Table",
                "verbose_name_plural": "Tables",
                "ordering": ["table_number"],
            },
        ),
    ]

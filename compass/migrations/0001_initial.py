from django.db import migrations, models
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UserResult",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("uuid", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("name", models.CharField(max_length=50)),
                ("economic_score", models.DecimalField(decimal_places=1, max_digits=3)),
                ("social_score", models.DecimalField(decimal_places=1, max_digits=3)),
                (
                    "quadrant",
                    models.CharField(
                        choices=[
                            ("libertarian-left", "Libertarian Left"),
                            ("libertarian-right", "Libertarian Right"),
                            ("authoritarian-left", "Authoritarian Left"),
                            ("authoritarian-right", "Authoritarian Right"),
                            ("centrist", "Centrist"),
                        ],
                        max_length=24,
                    ),
                ),
                ("avatar", models.CharField(default="anura.jpg", max_length=120)),
            ],
            options={
                "ordering": ("-created_at",),
                "indexes": [
                    models.Index(fields=["created_at"], name="compass_use_created_0b1f2c_idx"),
                    models.Index(fields=["quadrant"], name="compass_use_quadran_5d8e41_idx"),
                ],
            },
        ),
    ]

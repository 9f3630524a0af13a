from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PoliticianSuggestion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=120)),
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
                ("x_coordinate", models.SmallIntegerField()),
                ("y_coordinate", models.SmallIntegerField()),
                ("grid_id", models.PositiveSmallIntegerField(db_index=True)),
                ("votes", models.PositiveIntegerField(default=1)),
                ("suggested_by", models.CharField(max_length=40)),
            ],
            options={"ordering": ("-votes", "-created_at")},
        ),
        migrations.CreateModel(
            name="SuggestionVote",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user_identifier", models.CharField(max_length=120)),
                (
                    "suggestion",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="vote_records",
                        to="suggestions.politiciansuggestion",
                    ),
                ),
            ],
            options={
                "ordering": ("-created_at",),
                "unique_together": {("suggestion", "user_identifier")},
            },
        ),
    ]

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UCSBArticles",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("url", models.CharField(max_length=2048)),
                ("explanation", models.TextField()),
                ("email", models.CharField(max_length=254)),
                ("date_added", models.DateTimeField()),
            ],
            options={
                "db_table": "ucsbarticles",
            },
        ),
    ]

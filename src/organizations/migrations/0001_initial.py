from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UCSBOrganizations",
            fields=[
                ("org_code", models.CharField(max_length=50, primary_key=True, serialize=False)),
                ("org_translation", models.CharField(max_length=255)),
                ("org_translation_short", models.CharField(max_length=255)),
                ("inactive", models.BooleanField(default=False)),
            ],
            options={
                "db_table": "ucsborganizations",
            },
        ),
    ]

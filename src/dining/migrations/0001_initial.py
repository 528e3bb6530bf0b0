from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="UCSBDiningCommonsMenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("dining_commons_code", models.CharField(max_length=50)),
                ("name", models.CharField(max_length=255)),
                ("station", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "ucsbdiningcommonsmenuitem",
            },
        ),
    ]

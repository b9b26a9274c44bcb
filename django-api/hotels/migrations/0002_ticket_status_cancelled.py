from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("hotels", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="ticket",
            name="status",
            field=models.CharField(
                choices=[("RESERVED", "Reserved"), ("PAID", "Paid"), ("CANCELLED", "Cancelled")],
                max_length=10,
            ),
        ),
    ]

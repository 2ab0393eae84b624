# Product and Transaction reference each other; the sale link is added once
# the payment_system table exists.

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("marketplace", "0001_initial"),
        ("payment_system", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="product",
            name="transaction",
            field=models.ForeignKey(
                blank=True,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to="payment_system.transaction",
            ),
        ),
    ]

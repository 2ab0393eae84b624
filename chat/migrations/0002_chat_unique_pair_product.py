from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("chat", "0001_initial"),
    ]

    operations = [
        migrations.RemoveIndex(
            model_name="chat",
            name="chat_pair_product_idx",
        ),
        migrations.AddConstraint(
            model_name="chat",
            constraint=models.UniqueConstraint(fields=["user1", "user2", "product"], name="chat_unique_pair_product"),
        ),
    ]

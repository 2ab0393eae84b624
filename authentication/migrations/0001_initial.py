import uuid

import django.contrib.auth.validators
import django.utils.timezone
from django.db import migrations, models

import authentication.domain.models.user
import authentication.domain.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="CustomUser",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                (
                    "is_superuser",
                    models.BooleanField(
                        default=False,
                        help_text="Designates that this user has all permissions without explicitly assigning them.",
                        verbose_name="superuser status",
                    ),
                ),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                (
                    "is_staff",
                    models.BooleanField(
                        default=False,
                        help_text="Designates whether the user can log into this admin site.",
                        verbose_name="staff status",
                    ),
                ),
                (
                    "is_active",
                    models.BooleanField(
                        default=True,
                        help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.",
                        verbose_name="active",
                    ),
                ),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                (
                    "email",
                    models.EmailField(
                        max_length=254,
                        unique=True,
                        validators=[authentication.domain.validators.college_email_validator],
                    ),
                ),
                ("department", models.CharField(max_length=100)),
                ("year", models.CharField(max_length=50)),
                ("division", models.CharField(blank=True, default="", max_length=50)),
                ("location", models.CharField(max_length=255)),
                (
                    "role",
                    models.CharField(choices=[("user", "User"), ("admin", "Admin")], default="user", max_length=20),
                ),
                ("is_blacklisted", models.BooleanField(default=False)),
                ("blacklist_reason", models.TextField(blank=True, default="")),
                ("is_blockchain_verified", models.BooleanField(default=False)),
                (
                    "blockchain_verification_status",
                    models.CharField(
                        choices=[
                            ("not_applied", "Not applied"),
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                        ],
                        default="not_applied",
                        max_length=20,
                    ),
                ),
                (
                    "metamask_id",
                    models.CharField(
                        blank=True,
                        max_length=15,
                        null=True,
                        validators=[authentication.domain.validators.wallet_id_validator],
                    ),
                ),
                ("profile_image", models.CharField(default="default-profile.jpg", max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "groups",
                    models.ManyToManyField(
                        blank=True,
                        help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.group",
                        verbose_name="groups",
                    ),
                ),
                (
                    "user_permissions",
                    models.ManyToManyField(
                        blank=True,
                        help_text="Specific permissions for this user.",
                        related_name="user_set",
                        related_query_name="user",
                        to="auth.permission",
                        verbose_name="user permissions",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
            managers=[
                ("objects", authentication.domain.models.user.CustomUserManager()),
            ],
        ),
    ]

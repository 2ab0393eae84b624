import uuid

from django.contrib.auth.base_user import BaseUserManager
from django.contrib.auth.models import AbstractUser
from django.db import models

from authentication.domain.validators import college_email_validator, wallet_id_validator


class CustomUserManager(BaseUserManager):
    """Manager for email-identified users (there is no username)."""

    use_in_migrations = True

    def _create_user(self, email, password, **extra_fields):
        if not email:
            raise ValueError("The email must be set")
        email = self.normalize_email(email).lower()
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.ROLE_ADMIN)
        return self._create_user(email, password, **extra_fields)


class CustomUser(AbstractUser):
    ROLE_USER = "user"
    ROLE_ADMIN = "admin"
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    ]

    VERIFICATION_NOT_APPLIED = "not_applied"
    VERIFICATION_PENDING = "pending"
    VERIFICATION_APPROVED = "approved"
    VERIFICATION_REJECTED = "rejected"
    VERIFICATION_STATUS_CHOICES = [
        (VERIFICATION_NOT_APPLIED, "Not applied"),
        (VERIFICATION_PENDING, "Pending"),
        (VERIFICATION_APPROVED, "Approved"),
        (VERIFICATION_REJECTED, "Rejected"),
    ]
    # States from which a user may (re)apply for blockchain verification
    REAPPLICATION_STATES = (VERIFICATION_NOT_APPLIED, VERIFICATION_REJECTED)

    DEFAULT_PROFILE_IMAGE = "default-profile.jpg"

    username = None

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True, validators=[college_email_validator])

    # Academic details
    department = models.CharField(max_length=100)
    year = models.CharField(max_length=50)
    division = models.CharField(max_length=50, blank=True, default="")
    location = models.CharField(max_length=255)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)

    # Moderation
    is_blacklisted = models.BooleanField(default=False)
    blacklist_reason = models.TextField(blank=True, default="")

    # Blockchain verification
    is_blockchain_verified = models.BooleanField(default=False)
    blockchain_verification_status = models.CharField(
        max_length=20, choices=VERIFICATION_STATUS_CHOICES, default=VERIFICATION_NOT_APPLIED
    )
    metamask_id = models.CharField(max_length=15, blank=True, null=True, validators=[wallet_id_validator])

    profile_image = models.CharField(max_length=500, default=DEFAULT_PROFILE_IMAGE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        app_label = "authentication"
        ordering = ["-created_at"]

    def is_admin(self):
        """Check if user is an admin"""
        return self.role == self.ROLE_ADMIN or self.is_superuser

    def can_apply_for_verification(self):
        return self.blockchain_verification_status in self.REAPPLICATION_STATES

    def __str__(self):
        return self.email

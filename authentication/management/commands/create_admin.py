"""
Django management command to create the marketplace administrator.

Usage:
    python manage.py create_admin
    python manage.py create_admin --email "admin@pccegoa.edu.in" --password "s3cret" --name "Admin User"
"""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from authentication.domain.validators import college_domain, validate_college_email
from authentication.models import CustomUser


class Command(BaseCommand):
    help = "Create an admin account (role admin, Django superuser)"

    def add_arguments(self, parser):
        parser.add_argument("--email", type=str, default=None, help="Admin email (default: admin@<college domain>)")
        parser.add_argument("--password", type=str, default="admin123", help="Admin password (default: admin123)")
        parser.add_argument("--name", type=str, default="Admin User", help="Display name")
        parser.add_argument("--department", type=str, default="Administration")
        parser.add_argument("--location", type=str, default="Admin Office")

    def handle(self, *args, **options):
        email = (options["email"] or f"admin@{college_domain()}").lower()

        validation = validate_college_email(email)
        if not validation.ok:
            raise CommandError(validation.message)

        if len(options["password"]) < 6:
            raise CommandError("Password must be at least 6 characters long")

        if CustomUser.objects.filter(email=email).exists():
            raise CommandError(f'User "{email}" already exists')

        with transaction.atomic():
            user = CustomUser.objects.create_superuser(
                email=email,
                password=options["password"],
                name=options["name"],
                department=options["department"],
                year="N/A",
                division="N/A",
                location=options["location"],
            )

        self.stdout.write(
            self.style.SUCCESS(
                f"Admin user created successfully:\n"
                f"   Email: {user.email}\n"
                f"   Name: {user.name}\n"
                f"   User ID: {user.id}"
            )
        )

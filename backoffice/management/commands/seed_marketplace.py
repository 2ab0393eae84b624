"""
Django management command to load demo data.

Wipes every non-admin user together with products, chats, transactions,
reviews and wishlists, then creates three students, seven listings, two
conversations, two completed sales with reviews and two wishlists.

Usage:
    python manage.py create_admin
    python manage.py seed_marketplace
"""

import uuid
from decimal import Decimal

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from authentication.domain.validators import college_domain
from authentication.models import CustomUser
from chat.models import Chat, Message
from marketplace.models import Product, Review, Wishlist
from payment_system.models import Transaction


DEFAULT_PASSWORD = "password123"
DEFAULT_PRODUCT_IMAGE = "uploads/default-product.jpg"

USERS = {
    "john": {
        "name": "John Doe",
        "department": "Computer Science",
        "year": "Third Year",
        "division": "A",
        "location": "Hostel Block A",
    },
    "emily": {
        "name": "Emily Smith",
        "department": "Electronics",
        "year": "Second Year",
        "division": "B",
        "location": "Campus Library",
        "is_blockchain_verified": True,
        "blockchain_verification_status": CustomUser.VERIFICATION_APPROVED,
        "metamask_id": "123456789012345",
    },
    "michael": {
        "name": "Michael Brown",
        "department": "Mechanical",
        "year": "Fourth Year",
        "division": "C",
        "location": "Off Campus",
        "is_blacklisted": True,
        "blacklist_reason": "Violation of terms of service",
    },
}

# (key, seller, name, category, description, price, condition)
PRODUCTS = [
    ("textbook", "john", "Data Structures Textbook", "Books",
     "Slightly used textbook for Data Structures course", "450", "Slightly Used"),
    ("calculator", "john", "Scientific Calculator", "Electronics",
     "Casio scientific calculator, barely used", "750", "Like New"),
    ("lab_coat", "john", "Lab Coat", "Others", "White lab coat, size M", "300", "New"),
    ("arduino", "emily", "Arduino Kit", "Electronics",
     "Complete Arduino starter kit with components", "1200", "New"),
    ("drawing_tools", "emily", "Engineering Drawing Tools", "Project Materials",
     "Complete set of drawing tools", "600", "Used"),
    ("physics_notes", "michael", "Physics Notes", "Books", "Handwritten notes for Physics I and II", "200", "Used"),
    ("tools_set", "michael", "Mechanical Tools Set", "Project Materials",
     "Basic mechanical tools for projects", "850", "Slightly Used"),
]

# (participants, product, [(sender, content, read)])
CHATS = [
    (
        ("john", "emily"),
        "arduino",
        [
            ("john", "Hi, is the Arduino Kit still available?", True),
            ("emily", "Yes, it is. Are you interested in buying it?", True),
            ("john", "Definitely! Can we meet tomorrow at the canteen?", True),
            ("emily", "Sure, let's meet at 2 PM", False),
        ],
    ),
    (
        ("emily", "michael"),
        "physics_notes",
        [
            ("emily", "Are these notes comprehensive?", True),
            ("michael", "Yes, they cover the entire syllabus", False),
        ],
    ),
]

# (buyer, product, rating, comment)
SALES = [
    ("john", "drawing_tools", 5, "Great quality tools and fast delivery!"),
    ("emily", "lab_coat", 4, "Good quality lab coat, as described"),
]

WISHLISTS = {
    "john": ["arduino", "physics_notes"],
    "emily": ["calculator"],
}


class Command(BaseCommand):
    help = "Replace all non-admin data with a small demo marketplace"

    def handle(self, *args, **options):
        if not CustomUser.objects.filter(Q(role=CustomUser.ROLE_ADMIN) | Q(is_superuser=True)).exists():
            raise CommandError("Admin user not found! Run `manage.py create_admin` first.")

        with transaction.atomic():
            self.clear()
            users = self.create_users()
            products = self.create_products(users)
            self.create_chats(users, products)
            self.create_sales(users, products)
            self.create_wishlists(users, products)

        self.stdout.write(self.style.SUCCESS("Database seeded successfully!"))
        self.stdout.write(f"   Users log in with password '{DEFAULT_PASSWORD}'")

    def clear(self):
        self.stdout.write("Clearing existing data...")
        Message.objects.all().delete()
        Chat.objects.all().delete()
        Review.objects.all().delete()
        Wishlist.objects.all().delete()
        # Products reference transactions and transactions protect products
        Product.objects.update(transaction=None)
        Transaction.objects.all().delete()
        Product.objects.all().delete()
        CustomUser.objects.exclude(Q(role=CustomUser.ROLE_ADMIN) | Q(is_superuser=True)).delete()

    def create_users(self):
        self.stdout.write("Creating test users...")
        domain = college_domain()
        return {
            key: CustomUser.objects.create_user(email=f"{key}@{domain}", password=DEFAULT_PASSWORD, **fields)
            for key, fields in USERS.items()
        }

    def create_products(self, users):
        self.stdout.write("Creating products...")
        products = {}
        for key, seller, name, category, description, price, condition in PRODUCTS:
            owner = users[seller]
            products[key] = Product.objects.create(
                seller=owner,
                name=name,
                category=category,
                description=description,
                price=Decimal(price),
                condition=condition,
                location=owner.location,
                images=[DEFAULT_PRODUCT_IMAGE],
                accepts_crypto=owner.is_blockchain_verified,
            )
        return products

    def create_chats(self, users, products):
        self.stdout.write("Creating chats and messages...")
        for participants, product, messages in CHATS:
            chat = Chat.create_between([users[key] for key in participants], product=products[product])
            for sender, content, read in messages:
                Message.objects.create(
                    chat=chat,
                    sender=users[sender],
                    content=content,
                    is_read=read,
                    read_at=timezone.now() if read else None,
                )

    def create_sales(self, users, products):
        self.stdout.write("Creating transactions and reviews...")
        for buyer, product_key, rating, comment in SALES:
            product = products[product_key]
            sale = Transaction.objects.create(
                buyer=users[buyer],
                seller=product.seller,
                product=product,
                amount=product.price,
                payment_method=Transaction.METHOD_RAZORPAY,
                payment_id=f"pay_{uuid.uuid4().hex[:14]}",
                status=Transaction.STATUS_COMPLETED,
            )
            product.mark_sold(users[buyer], sale)
            Review.objects.create(
                user=users[buyer],
                seller=product.seller,
                product=product,
                rating=rating,
                comment=comment,
            )

    def create_wishlists(self, users, products):
        self.stdout.write("Creating wishlists...")
        for owner, product_keys in WISHLISTS.items():
            wishlist = Wishlist.objects.create(user=users[owner])
            wishlist.products.add(*(products[key] for key in product_keys))

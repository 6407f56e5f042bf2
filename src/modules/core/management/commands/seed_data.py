from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product

SEED_CATALOG = {
    "Electronics": [
        ("Smartphone", "Latest model smartphone", 699.99, 50),
        ("Laptop", "14-inch ultrabook", 1199.00, 20),
        ("Headphones", "Noise-cancelling over-ear headphones", 249.90, 75),
    ],
    "Books": [
        ("Clean Code", "A handbook of agile software craftsmanship", 39.90, 120),
        ("Refactoring", "Improving the design of existing code", 44.50, 80),
    ],
    "Home": [
        ("Coffee Maker", "12-cup programmable coffee maker", 89.00, 35),
    ],
}

class Command(BaseCommand):
    help = "Seed database with development categories and products."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        categories_created = 0
        products_created = 0
        for category_name, products in SEED_CATALOG.items():
            category, created = Category.objects.get_or_create(name=category_name)
            categories_created += int(created)
            for name, description, price, quantity in products:
                _, created = Product.objects.get_or_create(
                    name=name,
                    defaults={
                        "description": description,
                        "price": price,
                        "quantity": quantity,
                        "category": category,
                    },
                )
                products_created += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={categories_created}, "
                f"products={products_created}"
            )
        )

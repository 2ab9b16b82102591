from decimal import Decimal as D

from django.core.management.base import BaseCommand
from django.db import transaction

from food_ordering.menu.models import MenuItem
from food_ordering.orders.models import Order, OrderLineItem

SAMPLE_ITEMS = [
    {
        "name": "Classic Cheeseburger",
        "price": D("12.99"),
        "category": "Burgers",
        "description": "Juicy beef patty, cheddar, lettuce, tomato, house sauce.",
        "image": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd",
    },
    {
        "name": "Spicy Pepperoni Pizza",
        "price": D("15.50"),
        "category": "Pizza",
        "description": "Crispy crust, spicy pepperoni, mozzarella, chili flakes.",
        "image": "https://images.unsplash.com/photo-1628840042765-356cda07504e",
    },
    {
        "name": "Truffle Mushroom Pasta",
        "price": D("18.00"),
        "category": "Pasta",
        "description": "Creamy truffle sauce, wild mushrooms, parmesan.",
        "image": "https://images.unsplash.com/photo-1626844131082-256783844137",
    },
    {
        "name": "Sushi Platter",
        "price": D("24.00"),
        "category": "Japanese",
        "description": "Assorted nigiri and maki rolls, fresh fish.",
        "image": "https://images.unsplash.com/photo-1579871494447-9811cf80d66c",
    },
    {
        "name": "Caesar Salad",
        "price": D("10.50"),
        "category": "Salads",
        "description": "Romaine hearts, croutons, parmesan, caesar dressing.",
        "image": "https://images.unsplash.com/photo-1550304943-4f24f54ddde9",
    },
    {
        "name": "Double Espresso",
        "price": D("3.50"),
        "category": "Drinks",
        "description": "Rich and strong double shot coffee.",
        "image": "https://images.unsplash.com/photo-1510591509098-f4fdc6d0ff04",
    },
]


class Command(BaseCommand):
    help = "Seed the menu with sample dishes. Idempotent, safe to run multiple times."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete all line items, orders and menu items before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **opts):
        if opts["reset"]:
            # Children first, then roots
            OrderLineItem.objects.all().delete()
            Order.objects.all().delete()
            MenuItem.objects.all().delete()
            self.stdout.write("Cleared orders and menu items.")

        created_names = []
        for item in SAMPLE_ITEMS:
            obj, created = MenuItem.objects.get_or_create(
                name=item["name"], defaults={**item, "is_available": True}
            )
            if created:
                created_names.append(obj.name)

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {len(created_names)} new menu items: {', '.join(created_names) or '-'}"
        ))

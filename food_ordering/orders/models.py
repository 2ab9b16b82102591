from decimal import Decimal

from django.conf import settings
from django.db import models


class Order(models.Model):
    """
    A user's cart while DRAFT, an order once COMPLETED.

    The partial unique index keeps at most one DRAFT per owner, whatever the
    number of concurrent requests creating it.
    """
    STATUS_DRAFT = "DRAFT"
    STATUS_COMPLETED = "COMPLETED"
    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_COMPLETED, "Completed"),
    ]

    # Largest value total_amount (max_digits=10, decimal_places=2) can hold
    MAX_TOTAL = Decimal("99999999.99")

    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="food_orders")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT, db_index=True)
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    # Stamped at checkout, not when the draft is created
    created_at = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        ordering = ("-created_at", "-id")
        constraints = [
            models.UniqueConstraint(
                fields=["owner"],
                condition=models.Q(status="DRAFT"),
                name="one_draft_order_per_owner",
            ),
        ]

    @property
    def is_draft(self) -> bool:
        return self.status == self.STATUS_DRAFT

    def __str__(self):
        return f"Order #{self.id} - {self.owner_id} - {self.status}"


class OrderLineItem(models.Model):
    MAX_QUANTITY = 999

    order = models.ForeignKey("orders.Order", on_delete=models.CASCADE, related_name="items")
    menu_item = models.ForeignKey("menu.MenuItem", on_delete=models.PROTECT, related_name="line_items")
    quantity = models.PositiveIntegerField(default=1)
    # Catalog price captured when the line was first added
    unit_price = models.DecimalField(max_digits=8, decimal_places=2)

    class Meta:
        ordering = ("id",)
        constraints = [
            models.UniqueConstraint(fields=["order", "menu_item"], name="one_line_per_menu_item"),
            models.CheckConstraint(condition=models.Q(quantity__gt=0), name="line_quantity_positive"),
        ]

    @property
    def line_total(self):
        return self.unit_price * self.quantity

    def __str__(self):
        return f"{self.quantity} x {self.menu_item_id} @ {self.unit_price}"

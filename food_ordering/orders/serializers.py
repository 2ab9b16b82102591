from rest_framework import serializers

from food_ordering.menu.serializers import MenuItemSerializer
from food_ordering.orders.models import Order, OrderLineItem
from food_ordering.orders.services import cart_total

QUANTITY_RANGE_MESSAGE = f"quantity must be between 1 and {OrderLineItem.MAX_QUANTITY}"


class OrderLineItemSerializer(serializers.ModelSerializer):
    orderId = serializers.IntegerField(source="order_id", read_only=True)
    menuItemId = serializers.IntegerField(source="menu_item_id", read_only=True)
    # Captured unit price, not the current catalog price
    price = serializers.DecimalField(source="unit_price", max_digits=8, decimal_places=2, read_only=True)
    menuItem = MenuItemSerializer(source="menu_item", read_only=True)

    class Meta:
        model = OrderLineItem
        fields = ("id", "orderId", "menuItemId", "quantity", "price", "menuItem")


class OrderSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="owner_id", read_only=True)
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=10, decimal_places=2, read_only=True, allow_null=True
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True, allow_null=True)
    orderItems = OrderLineItemSerializer(source="items", many=True, read_only=True)
    subtotal = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = ("id", "userId", "status", "totalAmount", "createdAt", "subtotal", "orderItems")

    def get_subtotal(self, obj):
        """Sum of captured price × quantity; equals totalAmount once completed."""
        return cart_total(obj.items.all())


class AddCartItemSerializer(serializers.Serializer):
    # Non-positive ids are left to the catalog lookup, which answers 404
    menuItemId = serializers.IntegerField(
        error_messages={"required": "Item ID required", "null": "Item ID required"},
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=OrderLineItem.MAX_QUANTITY,
        required=False,
        allow_null=True,
        error_messages={
            "min_value": QUANTITY_RANGE_MESSAGE,
            "max_value": QUANTITY_RANGE_MESSAGE,
        },
    )

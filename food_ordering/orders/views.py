from rest_framework.response import Response
from rest_framework.views import APIView

from food_ordering.accounts.authentication import IsSessionAuthenticated
from food_ordering.orders import services
from food_ordering.orders.serializers import AddCartItemSerializer, OrderSerializer


class CartView(APIView):
    """GET /api/cart → the caller's draft order, created on first access."""
    permission_classes = [IsSessionAuthenticated]

    def get(self, request, *args, **kwargs):
        cart = services.get_or_create_draft(request.user)
        return Response(OrderSerializer(cart).data)


class CartItemsView(APIView):
    """POST /api/cart/items  {menuItemId, quantity?}"""
    permission_classes = [IsSessionAuthenticated]

    def post(self, request, *args, **kwargs):
        ser = AddCartItemSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        services.add_item(
            request.user,
            ser.validated_data["menuItemId"],
            ser.validated_data.get("quantity") or 1,
        )
        return Response({"message": "Added to cart"})


class CartItemDetailView(APIView):
    """DELETE /api/cart/items/<id>"""
    permission_classes = [IsSessionAuthenticated]

    def delete(self, request, pk, *args, **kwargs):
        services.remove_item(request.user, int(pk))
        return Response({"message": "Deleted"})


class CheckoutView(APIView):
    """POST /api/orders/checkout"""
    permission_classes = [IsSessionAuthenticated]

    def post(self, request, *args, **kwargs):
        order = services.checkout(request.user)
        return Response({"message": "Order placed", "order": OrderSerializer(order).data})


class OrderHistoryView(APIView):
    """GET /api/orders → completed orders, most recent first."""
    permission_classes = [IsSessionAuthenticated]

    def get(self, request, *args, **kwargs):
        orders = services.list_completed(request.user)
        return Response(OrderSerializer(orders, many=True).data)

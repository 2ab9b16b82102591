from rest_framework import generics, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from food_ordering.accounts.authentication import IsSessionAuthenticated
from food_ordering.menu import services
from food_ordering.menu.serializers import MenuItemCreateSerializer, MenuItemSerializer


class MenuItemListCreateView(generics.ListAPIView):
    """
    GET  /api/menu   → available items (anonymous)
    POST /api/menu   → create an item (session required)
    """
    serializer_class = MenuItemSerializer

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsSessionAuthenticated()]
        return [permissions.AllowAny()]

    def get_queryset(self):
        return services.list_available()

    def post(self, request, *args, **kwargs):
        ser = MenuItemCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        item = services.create_menu_item(**ser.validated_data)
        return Response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)


class MenuItemDeleteView(APIView):
    """DELETE /api/menu/<id> → soft delete (hide) the item."""
    permission_classes = [IsSessionAuthenticated]

    def delete(self, request, pk, *args, **kwargs):
        services.soft_delete(int(pk))
        return Response({"message": "Item hidden (soft deleted) successfully"})

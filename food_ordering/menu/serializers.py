from rest_framework import serializers

from food_ordering.menu.models import MenuItem


class MenuItemSerializer(serializers.ModelSerializer):
    isAvailable = serializers.BooleanField(source="is_available", read_only=True)

    class Meta:
        model = MenuItem
        fields = ("id", "name", "price", "description", "category", "image", "isAvailable")


class MenuItemCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    price = serializers.DecimalField(max_digits=8, decimal_places=2)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
    image = serializers.URLField(required=False, allow_blank=True, allow_null=True, max_length=500)

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be a positive number.")
        return value

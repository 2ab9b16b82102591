from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "food_ordering.orders"
    label = "orders"
    verbose_name = "Orders"  # This sets the section name in Admin

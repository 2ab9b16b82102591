from django.urls import re_path

from .views import CartItemDetailView, CartItemsView, CartView, CheckoutView, OrderHistoryView

urlpatterns = [
    re_path(r"^cart/?$", CartView.as_view(), name="cart"),
    re_path(r"^cart/items/?$", CartItemsView.as_view(), name="cart-items"),
    re_path(r"^cart/items/(?P<pk>\d+)/?$", CartItemDetailView.as_view(), name="cart-item-detail"),
    re_path(r"^orders/checkout/?$", CheckoutView.as_view(), name="orders-checkout"),
    re_path(r"^orders/?$", OrderHistoryView.as_view(), name="orders-list"),
]

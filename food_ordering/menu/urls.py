from django.urls import re_path

from .views import MenuItemDeleteView, MenuItemListCreateView

urlpatterns = [
    re_path(r"^$", MenuItemListCreateView.as_view(), name="menu-list"),
    re_path(r"^(?P<pk>\d+)/?$", MenuItemDeleteView.as_view(), name="menu-delete"),
]

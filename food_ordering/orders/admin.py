from django.contrib import admin
from .models import Order, OrderLineItem


class OrderLineItemInline(admin.TabularInline):
    model = OrderLineItem
    extra = 0
    readonly_fields = ('menu_item', 'quantity', 'unit_price')


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'owner', 'status', 'total_amount', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('owner__email', 'owner__first_name')
    readonly_fields = ('created_at', 'total_amount')
    inlines = [OrderLineItemInline]

from django.contrib import admin
from .models import MenuItem

@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'category', 'price', 'is_available')
    list_filter = ('is_available', 'category')
    search_fields = ('name', 'description', 'category')
    list_editable = ('is_available',)

from django.core.validators import MinValueValidator
from django.db import models


class MenuItem(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True, default="")
    category = models.CharField(max_length=50, blank=True, default="", db_index=True)
    price = models.DecimalField(max_digits=8, decimal_places=2, validators=[MinValueValidator(0)])
    image = models.URLField(max_length=500, blank=True, default="")
    # Soft delete flag: rows are never removed, only hidden
    is_available = models.BooleanField(default=True, db_index=True)

    class Meta:
        ordering = ("id",)

    def __str__(self):
        return f"{self.name} - ${self.price}"

"""
food_ordering.menu.services
Catalog store: listing, creation, soft delete and the availability lookup
used when items are put in a cart.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.conf import settings
from django.db.models import QuerySet

from food_ordering.errors import ItemNotFound, ValidationError
from food_ordering.menu.models import MenuItem

logger = logging.getLogger(__name__)

PRICE_QUANT = Decimal("0.01")


def _parse_price(value) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError("Invalid input")
    if not price.is_finite() or price <= 0:
        raise ValidationError("Invalid input")
    return price.quantize(PRICE_QUANT)


def list_available() -> QuerySet:
    return MenuItem.objects.filter(is_available=True)


def create_menu_item(
    name: str,
    price,
    description: Optional[str] = None,
    category: Optional[str] = None,
    image: Optional[str] = None,
) -> MenuItem:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Invalid input")

    item = MenuItem.objects.create(
        name=name,
        price=_parse_price(price),
        description=description or settings.MENU_DEFAULT_DESCRIPTION,
        category=category or settings.MENU_DEFAULT_CATEGORY,
        image=image or settings.MENU_DEFAULT_IMAGE,
        is_available=True,
    )
    logger.info("Menu item created id=%s name=%s price=%s", item.pk, item.name, item.price)
    return item


def soft_delete(item_id: int) -> None:
    # Unknown ids are not an error; see DESIGN.md.
    updated = MenuItem.objects.filter(pk=item_id).update(is_available=False)
    if updated:
        logger.info("Menu item id=%s hidden", item_id)
    else:
        logger.info("Soft delete of unknown menu item id=%s ignored", item_id)


def find_available(item_id: int) -> MenuItem:
    item = MenuItem.objects.filter(pk=item_id, is_available=True).first()
    if item is None:
        raise ItemNotFound()
    return item

"""
food_ordering.orders.services
Cart lifecycle on top of Order / OrderLineItem.

Each user has at most one DRAFT order (the cart). It is created lazily on
first access, mutated by add/remove, and turned into a COMPLETED order by
checkout; the next cart access creates a fresh, unrelated draft.

Concurrency relies on the database, never on in-process locks:
  * one_draft_order_per_owner (partial unique index) + get_or_create: the
    loser of a draft-creation race re-reads the winner's row.
  * one_line_per_menu_item + get_or_create + F() increment: concurrent adds
    of the same item merge into one line.
  * checkout runs in one transaction holding a row lock on the draft.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from django.db import transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from food_ordering.errors import EmptyCart, ItemNotFound, ValidationError
from food_ordering.menu import services as menu_services
from food_ordering.orders.models import Order, OrderLineItem

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def _with_lines(qs: QuerySet) -> QuerySet:
    return qs.prefetch_related("items__menu_item")


def _ensure_draft(user) -> Order:
    order, created = Order.objects.get_or_create(owner=user, status=Order.STATUS_DRAFT)
    if created:
        logger.info("Draft order id=%s created for user id=%s", order.pk, user.pk)
    return order


def _parse_int(value, *, field: str, default: Optional[int] = None) -> int:
    if value is None or value == "":
        if default is None:
            raise ValidationError(f"{field} required")
        return default
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")


def _parse_quantity(value) -> int:
    quantity = _parse_int(value, field="quantity", default=1)
    if quantity <= 0 or quantity > OrderLineItem.MAX_QUANTITY:
        raise ValidationError(f"quantity must be between 1 and {OrderLineItem.MAX_QUANTITY}")
    return quantity


def _ensure_total_fits(total: Decimal) -> None:
    if total > Order.MAX_TOTAL:
        raise ValidationError("Order total exceeds the maximum allowed")


def get_or_create_draft(user) -> Order:
    """The user's cart with its line items and menu items loaded."""
    draft = _ensure_draft(user)
    return _with_lines(Order.objects.filter(pk=draft.pk)).get()


def add_item(user, menu_item_id, quantity=1) -> OrderLineItem:
    """
    Put `quantity` of a menu item in the cart.

    A second add of the same item bumps the existing line; the unit price
    stays the one captured by the first add. A line never holds more than
    OrderLineItem.MAX_QUANTITY and the cart total never exceeds
    Order.MAX_TOTAL; either limit raises ValidationError and leaves the
    cart unchanged.
    """
    menu_item_id = _parse_int(menu_item_id, field="Item ID")
    quantity = _parse_quantity(quantity)
    if menu_item_id <= 0:
        raise ItemNotFound()
    menu_item = menu_services.find_available(menu_item_id)

    with transaction.atomic():
        draft = Order.objects.select_for_update().filter(owner=user, status=Order.STATUS_DRAFT).first()
        if draft is None:
            draft = _ensure_draft(user)

        line, created = OrderLineItem.objects.get_or_create(
            order=draft,
            menu_item=menu_item,
            defaults={"quantity": quantity, "unit_price": menu_item.price},
        )
        if not created:
            bumped = (
                OrderLineItem.objects
                .filter(pk=line.pk, quantity__lte=OrderLineItem.MAX_QUANTITY - quantity)
                .update(quantity=F("quantity") + quantity)
            )
            if not bumped:
                raise ValidationError(f"quantity must be between 1 and {OrderLineItem.MAX_QUANTITY}")
            line.refresh_from_db(fields=["quantity"])

        _ensure_total_fits(cart_total(draft.items.all()))

    logger.info(
        "Cart order id=%s: menu item id=%s qty+%s (now %s)",
        draft.pk, menu_item.pk, quantity, line.quantity,
    )
    return line


def remove_item(user, line_item_id) -> None:
    # TODO: restrict to lines of the caller's own draft once the client contract allows a 404 here.
    deleted, _ = OrderLineItem.objects.filter(pk=line_item_id).delete()
    logger.info("User id=%s removed line item id=%s (deleted=%s)", user.pk, line_item_id, bool(deleted))


def cart_total(lines: Iterable[OrderLineItem]) -> Decimal:
    return sum((line.unit_price * line.quantity for line in lines), ZERO)


def checkout(user) -> Order:
    """
    Finalize the cart: status COMPLETED, total persisted, timestamp stamped now.

    Raises EmptyCart, with nothing written, when there is no draft or it
    has no lines, and ValidationError when the total does not fit
    Order.MAX_TOTAL.
    """
    with transaction.atomic():
        draft = Order.objects.select_for_update().filter(owner=user, status=Order.STATUS_DRAFT).first()
        if draft is None:
            raise EmptyCart()
        lines = list(draft.items.all())
        if not lines:
            raise EmptyCart()

        total = cart_total(lines)
        _ensure_total_fits(total)

        draft.status = Order.STATUS_COMPLETED
        draft.total_amount = total
        draft.created_at = timezone.now()
        draft.save(update_fields=["status", "total_amount", "created_at"])

    logger.info(
        "Checkout: order id=%s user id=%s lines=%s total=%s",
        draft.pk, user.pk, len(lines), draft.total_amount,
    )
    return _with_lines(Order.objects.filter(pk=draft.pk)).get()


def list_completed(user) -> List[Order]:
    """Finalized orders, most recent first."""
    qs = (
        Order.objects
        .filter(owner=user)
        .exclude(status=Order.STATUS_DRAFT)
        .order_by("-created_at", "-id")
    )
    return list(_with_lines(qs))

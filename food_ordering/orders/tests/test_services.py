from datetime import timedelta
from decimal import Decimal

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from django.test import TestCase
from django.utils import timezone

from food_ordering.errors import EmptyCart, ItemNotFound, ValidationError
from food_ordering.menu import services as menu_services
from food_ordering.menu.models import MenuItem
from food_ordering.orders import services
from food_ordering.orders.models import Order, OrderLineItem


class OrderServiceTestBase(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="a@x.com", email="a@x.com", password="secret1")
        self.other = User.objects.create_user(username="b@x.com", email="b@x.com", password="secret1")
        self.burger = MenuItem.objects.create(name="Classic Cheeseburger", price=Decimal("12.99"))
        self.coffee = MenuItem.objects.create(name="Double Espresso", price=Decimal("3.50"))


class DraftLifecycleTests(OrderServiceTestBase):
    def test_draft_is_created_lazily_and_reused(self):
        self.assertFalse(Order.objects.exists())
        first = services.get_or_create_draft(self.user)
        second = services.get_or_create_draft(self.user)
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(first.status, Order.STATUS_DRAFT)
        self.assertIsNone(first.created_at)
        self.assertIsNone(first.total_amount)
        self.assertEqual(list(first.items.all()), [])

    def test_drafts_are_per_user(self):
        mine = services.get_or_create_draft(self.user)
        theirs = services.get_or_create_draft(self.other)
        self.assertNotEqual(mine.pk, theirs.pk)

    def test_database_rejects_a_second_draft(self):
        services.get_or_create_draft(self.user)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Order.objects.create(owner=self.user, status=Order.STATUS_DRAFT)
        self.assertEqual(Order.objects.filter(owner=self.user, status=Order.STATUS_DRAFT).count(), 1)

    def test_completed_orders_do_not_count_against_the_draft_limit(self):
        Order.objects.create(owner=self.user, status=Order.STATUS_COMPLETED, created_at=timezone.now())
        Order.objects.create(owner=self.user, status=Order.STATUS_COMPLETED, created_at=timezone.now())
        services.get_or_create_draft(self.user)
        self.assertEqual(Order.objects.filter(owner=self.user).count(), 3)


class AddRemoveItemTests(OrderServiceTestBase):
    def test_repeated_add_merges_quantities(self):
        services.add_item(self.user, self.burger.pk, 2)
        line = services.add_item(self.user, self.burger.pk, 1)
        self.assertEqual(line.quantity, 3)
        cart = services.get_or_create_draft(self.user)
        lines = list(cart.items.all())
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].quantity, 3)

    def test_quantity_defaults_to_one(self):
        line = services.add_item(self.user, self.coffee.pk, None)
        self.assertEqual(line.quantity, 1)
        line = services.add_item(self.user, self.coffee.pk)
        self.assertEqual(line.quantity, 2)

    def test_string_inputs_are_parsed(self):
        line = services.add_item(self.user, str(self.coffee.pk), "4")
        self.assertEqual(line.quantity, 4)

    def test_unit_price_is_captured_at_first_add(self):
        services.add_item(self.user, self.burger.pk, 1)
        MenuItem.objects.filter(pk=self.burger.pk).update(price=Decimal("99.00"))
        line = services.add_item(self.user, self.burger.pk, 1)
        self.assertEqual(line.unit_price, Decimal("12.99"))
        self.assertEqual(line.quantity, 2)

    def test_unavailable_or_unknown_item(self):
        menu_services.soft_delete(self.burger.pk)
        with self.assertRaises(ItemNotFound):
            services.add_item(self.user, self.burger.pk, 1)
        with self.assertRaises(ItemNotFound):
            services.add_item(self.user, 999999, 1)
        self.assertFalse(OrderLineItem.objects.exists())

    def test_invalid_input(self):
        for menu_item_id, qty in [(None, 1), ("", 1), ("abc", 1), (self.burger.pk, 0), (self.burger.pk, -2),
                                  (self.burger.pk, "x"), (self.burger.pk, True), (self.burger.pk, 1000)]:
            with self.subTest(menu_item_id=menu_item_id, qty=qty):
                with self.assertRaises(ValidationError):
                    services.add_item(self.user, menu_item_id, qty)
        self.assertFalse(OrderLineItem.objects.exists())

    def test_non_positive_item_id_is_not_found(self):
        for menu_item_id in (0, -1, "-7"):
            with self.subTest(menu_item_id=menu_item_id):
                with self.assertRaises(ItemNotFound):
                    services.add_item(self.user, menu_item_id, 1)
        self.assertFalse(OrderLineItem.objects.exists())

    def test_merged_line_is_capped_at_max_quantity(self):
        services.add_item(self.user, self.burger.pk, OrderLineItem.MAX_QUANTITY)
        with self.assertRaises(ValidationError):
            services.add_item(self.user, self.burger.pk, 1)
        line = services.get_or_create_draft(self.user).items.get()
        self.assertEqual(line.quantity, OrderLineItem.MAX_QUANTITY)

    def test_add_that_would_overflow_the_order_total_is_rejected(self):
        caviar = MenuItem.objects.create(name="Caviar Tower", price=Decimal("999999.99"))
        services.add_item(self.user, self.burger.pk, 1)
        with self.assertRaises(ValidationError):
            services.add_item(self.user, caviar.pk, OrderLineItem.MAX_QUANTITY)
        cart = services.get_or_create_draft(self.user)
        self.assertEqual([l.menu_item_id for l in cart.items.all()], [self.burger.pk])

    def test_database_rejects_duplicate_line(self):
        line = services.add_item(self.user, self.burger.pk, 1)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                OrderLineItem.objects.create(
                    order=line.order, menu_item=self.burger, quantity=1, unit_price=Decimal("12.99")
                )

    def test_database_rejects_zero_quantity(self):
        line = services.add_item(self.user, self.burger.pk, 1)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                OrderLineItem.objects.filter(pk=line.pk).update(quantity=0)
        line.refresh_from_db()
        self.assertEqual(line.quantity, 1)

    def test_soft_delete_keeps_existing_lines(self):
        services.add_item(self.user, self.burger.pk, 2)
        menu_services.soft_delete(self.burger.pk)
        self.assertNotIn(self.burger, list(menu_services.list_available()))
        line = services.get_or_create_draft(self.user).items.get()
        self.assertEqual(line.quantity, 2)
        self.assertEqual(line.unit_price, Decimal("12.99"))

    def test_remove_item(self):
        line = services.add_item(self.user, self.burger.pk, 2)
        services.add_item(self.user, self.coffee.pk, 1)
        services.remove_item(self.user, line.pk)
        cart = services.get_or_create_draft(self.user)
        self.assertEqual([l.menu_item_id for l in cart.items.all()], [self.coffee.pk])

    def test_remove_missing_item_is_a_no_op(self):
        services.remove_item(self.user, 999999)


class CheckoutTests(OrderServiceTestBase):
    def test_checkout_totals_and_completes(self):
        services.add_item(self.user, self.burger.pk, 2)
        services.add_item(self.user, self.burger.pk, 1)
        services.add_item(self.user, self.coffee.pk, 2)
        before = timezone.now()

        order = services.checkout(self.user)

        self.assertEqual(order.status, Order.STATUS_COMPLETED)
        self.assertEqual(order.total_amount, Decimal("45.97"))  # 3 × 12.99 + 2 × 3.50
        self.assertGreaterEqual(order.created_at, before)
        self.assertEqual(len(order.items.all()), 2)

    def test_total_uses_captured_prices(self):
        services.add_item(self.user, self.burger.pk, 2)
        MenuItem.objects.filter(pk=self.burger.pk).update(price=Decimal("1.00"))
        order = services.checkout(self.user)
        self.assertEqual(order.total_amount, Decimal("25.98"))

    def test_next_cart_is_a_fresh_draft(self):
        services.add_item(self.user, self.burger.pk, 1)
        completed = services.checkout(self.user)
        cart = services.get_or_create_draft(self.user)
        self.assertNotEqual(cart.pk, completed.pk)
        self.assertEqual(cart.status, Order.STATUS_DRAFT)
        self.assertEqual(list(cart.items.all()), [])

    def test_add_after_checkout_targets_the_new_draft(self):
        services.add_item(self.user, self.burger.pk, 1)
        completed = services.checkout(self.user)
        line = services.add_item(self.user, self.burger.pk, 5)
        self.assertNotEqual(line.order_id, completed.pk)
        completed.refresh_from_db()
        self.assertEqual(completed.items.get().quantity, 1)

    def test_checkout_at_max_quantity(self):
        services.add_item(self.user, self.burger.pk, OrderLineItem.MAX_QUANTITY)
        order = services.checkout(self.user)
        self.assertEqual(order.status, Order.STATUS_COMPLETED)
        self.assertEqual(order.total_amount, Decimal("12977.01"))  # 999 × 12.99
        self.assertEqual([o.pk for o in services.list_completed(self.user)], [order.pk])

    def test_total_too_large_for_storage_fails_without_mutation(self):
        caviar = MenuItem.objects.create(name="Caviar Tower", price=Decimal("999999.99"))
        draft = services.get_or_create_draft(self.user)
        OrderLineItem.objects.create(
            order=draft, menu_item=caviar, quantity=OrderLineItem.MAX_QUANTITY, unit_price=caviar.price
        )
        with self.assertRaises(ValidationError):
            services.checkout(self.user)
        draft.refresh_from_db()
        self.assertEqual(draft.status, Order.STATUS_DRAFT)
        self.assertIsNone(draft.total_amount)
        self.assertEqual(services.list_completed(self.user), [])

    def test_empty_cart_fails_without_mutation(self):
        with self.assertRaises(EmptyCart):
            services.checkout(self.user)
        self.assertFalse(Order.objects.exists())

        draft = services.get_or_create_draft(self.user)
        with self.assertRaises(EmptyCart):
            services.checkout(self.user)
        draft.refresh_from_db()
        self.assertEqual(draft.status, Order.STATUS_DRAFT)
        self.assertIsNone(draft.total_amount)
        self.assertIsNone(draft.created_at)

    def test_cart_total(self):
        services.add_item(self.user, self.burger.pk, 3)
        cart = services.get_or_create_draft(self.user)
        self.assertEqual(services.cart_total(cart.items.all()), Decimal("38.97"))
        self.assertEqual(services.cart_total([]), Decimal("0"))


class ListCompletedTests(OrderServiceTestBase):
    def test_most_recent_first_and_drafts_excluded(self):
        services.add_item(self.user, self.burger.pk, 1)
        first = services.checkout(self.user)
        services.add_item(self.user, self.coffee.pk, 1)
        second = services.checkout(self.user)
        Order.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(hours=1))
        services.add_item(self.user, self.coffee.pk, 1)  # open draft, not listed

        orders = services.list_completed(self.user)
        self.assertEqual([o.pk for o in orders], [second.pk, first.pk])
        self.assertTrue(all(o.status == Order.STATUS_COMPLETED for o in orders))
        self.assertEqual(orders[0].items.all()[0].menu_item.name, "Double Espresso")

    def test_other_users_orders_are_not_listed(self):
        services.add_item(self.other, self.burger.pk, 1)
        services.checkout(self.other)
        self.assertEqual(services.list_completed(self.user), [])

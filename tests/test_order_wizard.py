"""
Tests for the outbound order wizard draft.
"""
import random
import unittest
import uuid
from decimal import Decimal
from unittest.mock import MagicMock

from shared.utils.app_status_code import AppStatusCode
from warehouse_service.app.crud.orders.order_wizard import (
    OrderDraft, OrderWizardError, generate_order_number)
from warehouse_service.app.enum.orders_enum import WizardStage
from warehouse_service.app.models.inventory.inventory_items import InventoryItem


def mock_item(name="Widget", quantity=10, code="ITM-001"):
    item = MagicMock(spec=InventoryItem)
    item.id = uuid.uuid4()
    item.item_name = name
    item.item_code = code
    item.quantity = quantity
    return item


class TestOrderDraft(unittest.TestCase):
    def setUp(self):
        """Set up a draft with customer and warehouse chosen."""
        self.draft = OrderDraft(customer_id=uuid.uuid4(), warehouse_id=uuid.uuid4())

    def test_items_stage_needs_customer_and_warehouse(self):
        draft = OrderDraft(customer_id=uuid.uuid4())
        self.assertTrue(draft.can_enter(WizardStage.details))
        self.assertFalse(draft.can_enter(WizardStage.items))
        self.assertEqual(draft.stage, WizardStage.details)

        with self.assertRaises(OrderWizardError):
            draft.add_line(mock_item(), 1)

    def test_review_stage_needs_a_line(self):
        self.assertEqual(self.draft.stage, WizardStage.items)
        self.assertFalse(self.draft.can_enter(WizardStage.review))

        self.draft.add_line(mock_item(), 2)
        self.assertEqual(self.draft.stage, WizardStage.review)

    def test_validate_without_lines(self):
        with self.assertRaises(OrderWizardError) as ctx:
            self.draft.validate()
        self.assertEqual(ctx.exception.message, "Please add at least one item")
        self.assertEqual(ctx.exception.status_code, AppStatusCode.ORDER_ITEMS_REQUIRED)

    def test_validate_without_customer(self):
        draft = OrderDraft(warehouse_id=uuid.uuid4())
        with self.assertRaises(OrderWizardError) as ctx:
            draft.validate()
        self.assertEqual(ctx.exception.message, "Customer and warehouse are required")

    def test_snapshot_taken_from_item_when_not_given(self):
        line = self.draft.add_line(mock_item(quantity=4), 2)
        self.assertEqual(line.available_quantity, 4)

    def test_quantity_over_snapshot_is_rejected(self):
        self.draft.add_line(mock_item(name="Blue Chair", quantity=5), 6)
        with self.assertRaises(OrderWizardError) as ctx:
            self.draft.validate()
        self.assertEqual(ctx.exception.message, "Quantity exceeds available stock for Blue Chair")
        self.assertEqual(ctx.exception.status_code, AppStatusCode.ORDER_QUANTITY_EXCEEDS_AVAILABLE)

    def test_snapshot_is_checked_not_live_stock(self):
        item = mock_item(quantity=10)
        self.draft.add_line(item, 8)
        # stock drops after the line was picked; submission still passes
        item.quantity = 1
        self.draft.validate()

    def test_same_item_twice_keeps_both_lines(self):
        item = mock_item(quantity=10)
        self.draft.add_line(item, 3)
        self.draft.add_line(item, 2, notes="fragile")

        self.assertEqual([l.quantity for l in self.draft.lines], [3, 2])
        self.assertEqual(self.draft.lines[1].notes, "fragile")
        self.draft.validate()
        totals = self.draft.totals()
        self.assertEqual(totals.total_items, 2)
        self.assertEqual(totals.total_quantity, 5)

    def test_same_item_lines_share_the_snapshot(self):
        item = mock_item(name="Blue Chair", quantity=4)
        self.draft.add_line(item, 3)
        self.draft.add_line(item, 2)
        with self.assertRaises(OrderWizardError) as ctx:
            self.draft.validate()
        self.assertEqual(ctx.exception.message, "Quantity exceeds available stock for Blue Chair")

    def test_client_snapshot_capped_at_on_hand(self):
        line = self.draft.add_line(mock_item(quantity=10), 50, available_quantity=999)
        self.assertEqual(line.available_quantity, 10)
        with self.assertRaises(OrderWizardError) as ctx:
            self.draft.validate()
        self.assertEqual(ctx.exception.status_code, AppStatusCode.ORDER_QUANTITY_EXCEEDS_AVAILABLE)

    def test_lower_client_snapshot_is_kept(self):
        line = self.draft.add_line(mock_item(quantity=10), 2, available_quantity=3)
        self.assertEqual(line.available_quantity, 3)

    def test_remove_line(self):
        keep, drop = mock_item(code="A"), mock_item(code="B")
        self.draft.add_line(keep, 1)
        self.draft.add_line(drop, 1)
        self.draft.remove_line(drop.id)
        self.assertEqual([l.inventory_item_id for l in self.draft.lines], [keep.id])

    def test_totals(self):
        draft = OrderDraft(customer_id=uuid.uuid4(), warehouse_id=uuid.uuid4(),
                           handling_charges=10, delivery_charges=5)
        draft.add_line(mock_item(code="A"), 3)
        draft.add_line(mock_item(code="B"), 2)

        totals = draft.totals()
        self.assertEqual(totals.total_items, 2)
        self.assertEqual(totals.total_quantity, 5)
        self.assertEqual(totals.total_charges, Decimal("15.00"))
        self.assertEqual(float(totals.total_charges), 15.0)

    def test_charges_rounded_to_cents(self):
        draft = OrderDraft(handling_charges=0.1, delivery_charges=0.2)
        self.assertEqual(draft.totals().total_charges, Decimal("0.30"))


class TestOrderNumber(unittest.TestCase):
    def test_format(self):
        for _ in range(20):
            self.assertRegex(generate_order_number(), r"^OUT-\d{4}-\d{5}$")

    def test_year_and_padding(self):
        rng = MagicMock(spec=random.Random)
        rng.randint.return_value = 42
        self.assertEqual(generate_order_number(2025, rng), "OUT-2025-00042")
        rng.randint.assert_called_once_with(0, 99999)


if __name__ == "__main__":
    unittest.main()

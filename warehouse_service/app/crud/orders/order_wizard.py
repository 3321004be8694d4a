"""Draft state behind the three-step outbound order wizard.

The draft moves linearly from details to line items to review. Each line
keeps the on-hand quantity seen when the item was picked; submission checks
requested quantities against that snapshot only, live stock is checked when
the line items are written.
"""
import random
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
from uuid import UUID

from shared.utils.app_status_code import AppStatusCode
from ...enum.orders_enum import WizardStage

ORDER_NUMBER_PREFIX = "OUT"
CENTS = Decimal("0.01")


class OrderWizardError(ValueError):
    def __init__(self, message: str, status_code: str = AppStatusCode.INVALID_INPUT):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class DraftLine:
    inventory_item_id: UUID
    item_name: str
    quantity: int
    available_quantity: int
    item_code: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class OrderTotals:
    total_items: int
    total_quantity: int
    handling_charges: Decimal
    delivery_charges: Decimal
    total_charges: Decimal


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(CENTS, rounding=ROUND_HALF_UP)


def generate_order_number(year: Optional[int] = None, rng: random.Random = None) -> str:
    """OUT-<year>-<5 digit random>, e.g. OUT-2026-04217."""
    year = year or date.today().year
    rng = rng or random
    return f"{ORDER_NUMBER_PREFIX}-{year}-{rng.randint(0, 99999):05d}"


@dataclass
class OrderDraft:
    customer_id: Optional[UUID] = None
    warehouse_id: Optional[UUID] = None
    handling_charges: Decimal = Decimal("0")
    delivery_charges: Decimal = Decimal("0")
    lines: List[DraftLine] = field(default_factory=list)

    # ---------------- Stages ----------------

    def can_enter(self, stage: WizardStage) -> bool:
        if stage == WizardStage.details:
            return True
        if stage == WizardStage.items:
            return bool(self.customer_id and self.warehouse_id)
        return self.can_enter(WizardStage.items) and bool(self.lines)

    @property
    def stage(self) -> WizardStage:
        """Furthest stage the draft can currently reach."""
        for stage in (WizardStage.review, WizardStage.items):
            if self.can_enter(stage):
                return stage
        return WizardStage.details

    # ---------------- Lines ----------------

    def add_line(self, inventory_item, quantity: int,
                 available_quantity: Optional[int] = None, notes: Optional[str] = None) -> DraftLine:
        if not self.can_enter(WizardStage.items):
            raise OrderWizardError(
                "Select a customer and a warehouse before adding items",
                AppStatusCode.REQUIRED_VALIDATION_ERROR)

        # a client snapshot can only be lower than what is on hand now
        snapshot = inventory_item.quantity
        if available_quantity is not None:
            snapshot = min(available_quantity, snapshot)

        line = DraftLine(
            inventory_item_id=inventory_item.id,
            item_name=inventory_item.item_name,
            item_code=getattr(inventory_item, "item_code", None),
            quantity=quantity,
            available_quantity=snapshot,
            notes=notes,
        )
        self.lines.append(line)
        return line

    def remove_line(self, inventory_item_id: UUID) -> None:
        self.lines = [
            line for line in self.lines if line.inventory_item_id != inventory_item_id]

    # ---------------- Submit ----------------

    def validate(self) -> None:
        if not self.can_enter(WizardStage.items):
            raise OrderWizardError(
                "Customer and warehouse are required",
                AppStatusCode.REQUIRED_VALIDATION_ERROR)
        if not self.lines:
            raise OrderWizardError(
                "Please add at least one item", AppStatusCode.ORDER_ITEMS_REQUIRED)
        # rows for the same item draw on one snapshot
        requested = {}
        for line in self.lines:
            total, snapshot = requested.get(line.inventory_item_id, (0, line.available_quantity))
            total += line.quantity
            snapshot = min(snapshot, line.available_quantity)
            requested[line.inventory_item_id] = (total, snapshot)
            if total > snapshot:
                raise OrderWizardError(
                    f"Quantity exceeds available stock for {line.item_name}",
                    AppStatusCode.ORDER_QUANTITY_EXCEEDS_AVAILABLE)

    def totals(self) -> OrderTotals:
        handling = _money(self.handling_charges)
        delivery = _money(self.delivery_charges)
        return OrderTotals(
            total_items=len(self.lines),
            total_quantity=sum(line.quantity for line in self.lines),
            handling_charges=handling,
            delivery_charges=delivery,
            total_charges=handling + delivery,
        )

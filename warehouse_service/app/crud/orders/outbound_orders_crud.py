import logging
import uuid
from datetime import date
from typing import List
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from shared.core.auth import scope_filters
from shared.core.schemas import AccessScope, Lookup
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...models.customers.customers import Customer
from ...models.inventory.inventory_items import InventoryItem
from ...models.orders.outbound_order_items import OutboundOrderItem
from ...models.orders.outbound_orders import OutboundOrder
from ...models.warehouses.warehouses import Warehouse
from ...schemas.orders.outbound_orders_schemas import (
    AvailableInventoryOut, OrderLineOut, OrderReviewResponse, OrderStatusUpdate, OutboundOrderCreate,
    OutboundOrderDetailOut, OutboundOrderListResponse, OutboundOrderOut, OutboundOrderRequest, ReviewLineOut)
from ...enum.inventory_enum import InventoryStatus
from ...enum.orders_enum import OrderStatus
from .order_wizard import OrderDraft, OrderWizardError, generate_order_number

logger = logging.getLogger(__name__)

ORDER_NUMBER_ATTEMPTS = 5


class InsufficientStockError(ValueError):
    pass


# ----------------- Build Filters for Orders -----------------


def build_order_filters(params: OutboundOrderRequest, scope: AccessScope):
    filters = scope_filters(OutboundOrder.customer_id, scope)

    if params.status and params.status.lower() != "all":
        filters.append(OutboundOrder.status == params.status)

    if params.customer_id:
        filters.append(OutboundOrder.customer_id == params.customer_id)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                OutboundOrder.order_number.ilike(search_term),
                Customer.company_name.ilike(search_term)
            )
        )

    return filters


def order_out(order: OutboundOrder, schema=OutboundOrderOut):
    out = schema.model_validate(order)
    out.customer_name = order.customer.company_name if order.customer else None
    out.warehouse_name = order.warehouse.warehouse_name if order.warehouse else None
    return out


# ----------------- Get Orders -----------------


def get_orders(db: Session, params: OutboundOrderRequest, scope: AccessScope) -> OutboundOrderListResponse:
    base_query = (
        db.query(OutboundOrder)
        .join(Customer, OutboundOrder.customer_id == Customer.id)
        .filter(*build_order_filters(params, scope))
    )
    total = base_query.with_entities(func.count(OutboundOrder.id)).scalar()

    orders = (
        base_query
        .options(joinedload(OutboundOrder.customer), joinedload(OutboundOrder.warehouse))
        .order_by(OutboundOrder.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return OutboundOrderListResponse(orders=[order_out(o) for o in orders], total=total)


def get_order_or_404(db: Session, order_id: uuid.UUID, scope: AccessScope) -> OutboundOrder:
    order = (
        db.query(OutboundOrder)
        .filter(OutboundOrder.id == order_id, *scope_filters(OutboundOrder.customer_id, scope))
        .first()
    )
    if not order:
        return error_response(
            message="Order not found",
            status_code=str(AppStatusCode.RECORD_NOT_FOUND),
            http_status=404
        )
    return order


def get_order_details(db: Session, order_id: uuid.UUID, scope: AccessScope) -> OutboundOrderDetailOut:
    order = get_order_or_404(db, order_id, scope)
    details = order_out(order, OutboundOrderDetailOut)
    details.items = [
        OrderLineOut(
            id=line.id,
            inventory_item_id=line.inventory_item_id,
            order_item=line.order_item,
            item_code=line.inventory_item.item_code if line.inventory_item else None,
            quantity=line.quantity,
            notes=line.notes,
        )
        for line in order.items
    ]
    # contact details are only shown in the admin portal
    if scope.is_admin and order.customer:
        details.customer_contact = order.customer.contact_person
        details.customer_email = order.customer.email
        details.customer_phone = order.customer.phone
    return details


# ----------------- Wizard: pick items -----------------


def get_available_inventory(db: Session, customer_id: uuid.UUID, warehouse_id: uuid.UUID,
                            scope: AccessScope) -> List[AvailableInventoryOut]:
    items = (
        db.query(InventoryItem)
        .filter(
            InventoryItem.customer_id == customer_id,
            InventoryItem.warehouse_id == warehouse_id,
            InventoryItem.status == InventoryStatus.in_stock.value,
            InventoryItem.quantity > 0,
            *scope_filters(InventoryItem.customer_id, scope)
        )
        .order_by(InventoryItem.item_name.asc())
        .all()
    )
    return [AvailableInventoryOut.model_validate(i) for i in items]


def build_draft(db: Session, order: OutboundOrderCreate, scope: AccessScope) -> OrderDraft:
    customer_id = scope.customer_id if scope.is_customer else order.customer_id

    draft = OrderDraft(
        customer_id=customer_id,
        warehouse_id=order.warehouse_id,
        handling_charges=order.handling_charges,
        delivery_charges=order.delivery_charges,
    )
    if not order.items or not draft.customer_id or not draft.warehouse_id:
        return draft

    item_ids = [line.inventory_item_id for line in order.items]
    inventory = {
        item.id: item
        for item in db.query(InventoryItem).filter(InventoryItem.id.in_(item_ids)).all()
    }

    for line in order.items:
        item = inventory.get(line.inventory_item_id)
        if (not item or item.customer_id != draft.customer_id
                or item.warehouse_id != draft.warehouse_id):
            return error_response(
                message="Inventory item is not available for this customer and warehouse",
                status_code=str(AppStatusCode.INVALID_INPUT),
                http_status=400
            )
        try:
            draft.add_line(item, line.quantity, line.available_quantity, line.notes)
        except OrderWizardError as e:
            return error_response(message=e.message, status_code=str(e.status_code), http_status=400)

    return draft


def _validated_draft(db: Session, order: OutboundOrderCreate, scope: AccessScope) -> OrderDraft:
    draft = build_draft(db, order, scope)
    try:
        draft.validate()
    except OrderWizardError as e:
        return error_response(message=e.message, status_code=str(e.status_code), http_status=400)
    return draft


def review_order(db: Session, order: OutboundOrderCreate, scope: AccessScope) -> OrderReviewResponse:
    draft = _validated_draft(db, order, scope)
    totals = draft.totals()
    return OrderReviewResponse(
        stage=draft.stage.value,
        customer_id=draft.customer_id,
        warehouse_id=draft.warehouse_id,
        items=[
            ReviewLineOut(
                inventory_item_id=line.inventory_item_id,
                item_code=line.item_code,
                item_name=line.item_name,
                quantity=line.quantity,
                available_quantity=line.available_quantity,
            )
            for line in draft.lines
        ],
        total_items=totals.total_items,
        total_quantity=totals.total_quantity,
        handling_charges=float(totals.handling_charges),
        delivery_charges=float(totals.delivery_charges),
        total_charges=float(totals.total_charges),
    )


# ----------------- Create -----------------


def generate_unique_order_number(db: Session) -> str:
    for _ in range(ORDER_NUMBER_ATTEMPTS):
        order_number = generate_order_number()
        exists = db.query(OutboundOrder.id).filter(
            OutboundOrder.order_number == order_number).first()
        if not exists:
            return order_number
        logger.info("Order number %s already taken, regenerating", order_number)

    return error_response(
        message="Could not generate a unique order number, please retry",
        status_code=str(AppStatusCode.ORDER_NUMBER_GENERATION_FAILED),
        http_status=409
    )


def take_stock(db: Session, inventory_item_id: uuid.UUID, quantity: int) -> InventoryItem:
    """Decrement on-hand stock for one order line against live quantity."""
    item = (
        db.query(InventoryItem)
        .filter(InventoryItem.id == inventory_item_id)
        .with_for_update()
        .first()
    )
    if not item:
        raise InsufficientStockError("Inventory item no longer exists")
    if quantity <= 0:
        raise InsufficientStockError("Order quantity must be greater than 0")
    if item.quantity < quantity:
        raise InsufficientStockError(
            f"Insufficient stock: available {item.quantity}, requested {quantity}")

    item.quantity -= quantity
    return item


def return_stock(item: InventoryItem, quantity: int) -> None:
    restored = item.quantity + quantity
    if restored > item.total_quantity:
        logger.warning("Returning %s of %s would exceed total quantity %s, capping",
                       quantity, item.item_code, item.total_quantity)
        restored = item.total_quantity
    item.quantity = restored


def create_order(db: Session, order: OutboundOrderCreate, scope: AccessScope) -> OutboundOrderDetailOut:
    draft = _validated_draft(db, order, scope)
    totals = draft.totals()

    db_order = OutboundOrder(
        **order.model_dump(exclude={"items", "customer_id", "handling_charges", "delivery_charges"}),
        customer_id=draft.customer_id,
        order_number=generate_unique_order_number(db),
        status=OrderStatus.pending.value,
        total_items=totals.total_items,
        total_quantity=totals.total_quantity,
        handling_charges=totals.handling_charges,
        delivery_charges=totals.delivery_charges,
        total_charges=totals.total_charges,
    )
    db.add(db_order)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.exception("Outbound order insert failed")
        return error_response(
            message="Error creating order",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_order)
    order_number = db_order.order_number

    # second write: the order stays even if its lines fail
    try:
        for line in draft.lines:
            item = take_stock(db, line.inventory_item_id, line.quantity)
            db.add(OutboundOrderItem(
                order=db_order,
                inventory_item=item,
                quantity=line.quantity,
                order_item=line.item_name,
                notes=line.notes,
            ))
        db.commit()
    except (InsufficientStockError, SQLAlchemyError) as e:
        db.rollback()
        logger.error("Order %s saved without items: %s", order_number, e)
        return error_response(
            message=f"Order {order_number} was created but its items could not be saved: {e}",
            status_code=str(AppStatusCode.ORDER_ITEMS_WRITE_FAILED),
            http_status=400
        )

    logger.info("Created outbound order %s with %s lines", order_number, totals.total_items)
    return get_order_details(db, db_order.id, scope)


# ----------------- Status -----------------


def update_order_status(db: Session, order_id: uuid.UUID, status_update: OrderStatusUpdate,
                        scope: AccessScope) -> OutboundOrderOut:
    order = get_order_or_404(db, order_id, scope)
    order.status = status_update.status
    if status_update.status == OrderStatus.completed.value:
        order.completed_date = date.today()

    db.commit()
    db.refresh(order)
    return order_out(order)


# ----------------- Delete -----------------


def delete_order(db: Session, order_id: uuid.UUID, scope: AccessScope) -> dict:
    order = get_order_or_404(db, order_id, scope)
    for line in order.items:
        if line.inventory_item:
            return_stock(line.inventory_item, line.quantity)

    db.delete(order)
    db.commit()
    return {"id": str(order_id), "deleted": True}


def order_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").title())
        for status in OrderStatus
    ]

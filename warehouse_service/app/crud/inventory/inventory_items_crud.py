import logging
import uuid
from typing import List
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from shared.core.auth import scope_filters
from shared.core.schemas import AccessScope, Lookup
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from shared.utils.date_utils import received_window_start
from ...models.customers.customers import Customer
from ...models.inventory.inventory_items import InventoryItem
from ...models.warehouses.warehouses import Warehouse
from ...schemas.inventory.inventory_items_schemas import (
    QUANTITY_EXCEEDS_TOTAL, InventoryItemCreate, InventoryItemOut, InventoryItemUpdate, InventoryListResponse, InventoryRequest)
from ...enum.inventory_enum import InventoryStatus

logger = logging.getLogger(__name__)

# ----------------- Build Filters for Inventory -----------------


def build_inventory_filters(params: InventoryRequest, scope: AccessScope):
    filters = scope_filters(InventoryItem.customer_id, scope)

    if params.status and params.status.lower() != "all":
        filters.append(InventoryItem.status == params.status)

    if params.category and params.category.lower() != "all":
        filters.append(func.lower(InventoryItem.category) == params.category.lower())

    if params.customer_id:
        filters.append(InventoryItem.customer_id == params.customer_id)

    window_start = received_window_start(
        params.date_filter.value if params.date_filter else None)
    if window_start:
        filters.append(InventoryItem.received_date >= window_start)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                InventoryItem.item_code.ilike(search_term),
                InventoryItem.item_name.ilike(search_term),
                Customer.company_name.ilike(search_term)
            )
        )

    return filters


def inventory_item_out(item: InventoryItem) -> InventoryItemOut:
    out = InventoryItemOut.model_validate(item)
    out.customer_name = item.customer.company_name if item.customer else None
    out.warehouse_name = item.warehouse.warehouse_name if item.warehouse else None
    return out

# ----------------- Get All Inventory -----------------


def get_inventory_query(db: Session, params: InventoryRequest, scope: AccessScope):
    return (
        db.query(InventoryItem)
        .join(Customer, InventoryItem.customer_id == Customer.id)
        .filter(*build_inventory_filters(params, scope))
    )


def get_inventory_items(db: Session, params: InventoryRequest, scope: AccessScope) -> InventoryListResponse:
    base_query = get_inventory_query(db, params, scope)
    total = base_query.with_entities(func.count(InventoryItem.id)).scalar()

    items = (
        base_query
        .options(joinedload(InventoryItem.customer), joinedload(InventoryItem.warehouse))
        .order_by(InventoryItem.received_date.desc(), InventoryItem.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return InventoryListResponse(
        inventory_items=[inventory_item_out(i) for i in items], total=total)


def get_inventory_item_or_404(db: Session, item_id: uuid.UUID, scope: AccessScope) -> InventoryItem:
    item = (
        db.query(InventoryItem)
        .filter(InventoryItem.id == item_id, *scope_filters(InventoryItem.customer_id, scope))
        .first()
    )
    if not item:
        return error_response(
            message="Inventory item not found",
            status_code=str(AppStatusCode.RECORD_NOT_FOUND),
            http_status=404
        )
    return item


# ---------------- Create / Receive ----------------


def _check_unique(db: Session, item_code: str = None, barcode: str = None, qr_code: str = None,
                  exclude_id: uuid.UUID = None):
    for column, value, label in (
        (InventoryItem.item_code, item_code, "Item code"),
        (InventoryItem.barcode, barcode, "Barcode"),
        (InventoryItem.qr_code, qr_code, "QR code"),
    ):
        if not value:
            continue
        query = db.query(InventoryItem.id).filter(column == value)
        if exclude_id:
            query = query.filter(InventoryItem.id != exclude_id)
        if query.first():
            return error_response(
                message=f"{label} '{value}' already exists",
                status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
                http_status=400
            )


def _check_parents(db: Session, customer_id: uuid.UUID = None, warehouse_id: uuid.UUID = None):
    if customer_id and not db.query(Customer.id).filter(Customer.id == customer_id).first():
        return error_response(
            message="Customer not found",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=400
        )
    if warehouse_id and not db.query(Warehouse.id).filter(Warehouse.id == warehouse_id).first():
        return error_response(
            message="Warehouse not found",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=400
        )


def create_inventory_item(db: Session, item: InventoryItemCreate) -> InventoryItemOut:
    _check_unique(db, item.item_code, item.barcode, item.qr_code)
    _check_parents(db, item.customer_id, item.warehouse_id)

    db_item = InventoryItem(**item.model_dump())
    db.add(db_item)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.exception("Inventory insert failed for %s", item.item_code)
        return error_response(
            message="Error creating inventory item",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_item)
    return inventory_item_out(db_item)


def receive_inventory(db: Session, item: InventoryItemCreate) -> InventoryItemOut:
    """Goods-in: a new receipt always starts in stock."""
    received = item.model_copy(update={"status": InventoryStatus.in_stock.value})
    return create_inventory_item(db, received)


# ---------------- Update ----------------


def update_inventory_item(db: Session, item_id: uuid.UUID, item: InventoryItemUpdate,
                          scope: AccessScope) -> InventoryItemOut:
    db_item = get_inventory_item_or_404(db, item_id, scope)
    update_data = item.model_dump(exclude_unset=True)

    quantity = update_data.get("quantity", db_item.quantity)
    total_quantity = update_data.get("total_quantity", db_item.total_quantity)
    if quantity is not None and total_quantity is not None and quantity > total_quantity:
        return error_response(
            message=QUANTITY_EXCEEDS_TOTAL,
            status_code=str(AppStatusCode.INVENTORY_QUANTITY_EXCEEDS_TOTAL),
            http_status=422,
            data={"quantity": QUANTITY_EXCEEDS_TOTAL}
        )

    _check_unique(db, barcode=update_data.get("barcode"), qr_code=update_data.get("qr_code"),
                  exclude_id=db_item.id)
    _check_parents(db, warehouse_id=update_data.get("warehouse_id"))

    for key, value in update_data.items():
        setattr(db_item, key, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return error_response(
            message="Error updating inventory item",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_item)
    return inventory_item_out(db_item)


# ----------------- Delete -----------------


def delete_inventory_item(db: Session, item_id: uuid.UUID, scope: AccessScope) -> dict:
    db_item = get_inventory_item_or_404(db, item_id, scope)
    db.delete(db_item)
    db.commit()
    return {"id": str(item_id), "deleted": True}


# ----------------- Lookups -----------------


def inventory_category_lookup(db: Session, scope: AccessScope) -> List[Lookup]:
    rows = (
        db.query(InventoryItem.category)
        .filter(InventoryItem.category.isnot(None), InventoryItem.category != "",
                *scope_filters(InventoryItem.customer_id, scope))
        .distinct()
        .order_by(InventoryItem.category.asc())
        .all()
    )
    return [Lookup(id=row.category, name=row.category) for row in rows]


def inventory_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.replace("_", " ").title())
        for status in InventoryStatus
    ]

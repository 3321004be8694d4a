from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.auth import allow_customer, validate_current_token
from shared.core.schemas import AccessScope, Lookup
from ...crud.inventory import inventory_items_crud
from ...crud.orders import outbound_orders_crud
from ...crud.portal import customer_portal_crud
from ...schemas.inventory.inventory_items_schemas import InventoryItemOut, InventoryListResponse, InventoryRequest
from ...schemas.orders.outbound_orders_schemas import (
    AvailableInventoryOut, OrderReviewResponse, OutboundOrderCreate, OutboundOrderDetailOut,
    OutboundOrderListResponse, OutboundOrderRequest)
from ...schemas.portal.customer_portal_schemas import BillingSummaryResponse, CustomerDashboardResponse

router = APIRouter(prefix="/api/portal",
                   tags=["Customer Portal"], dependencies=[Depends(validate_current_token)])

# ---------------- Dashboard ----------------


@router.get("/dashboard", response_model=CustomerDashboardResponse)
def dashboard(
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return customer_portal_crud.get_customer_dashboard(db, scope)

# ---------------- Inventory ----------------


@router.get("/inventory", response_model=InventoryListResponse)
def inventory(
    params: InventoryRequest = Depends(),
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return inventory_items_crud.get_inventory_items(db, params, scope)


@router.get("/inventory/category-lookup", response_model=List[Lookup])
def category_lookup(
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return inventory_items_crud.inventory_category_lookup(db, scope)


@router.get("/inventory/{item_id}", response_model=InventoryItemOut)
def inventory_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return inventory_items_crud.inventory_item_out(
        inventory_items_crud.get_inventory_item_or_404(db, item_id, scope))

# ---------------- Orders ----------------


@router.get("/orders", response_model=OutboundOrderListResponse)
def orders(
    params: OutboundOrderRequest = Depends(),
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return outbound_orders_crud.get_orders(db, params, scope)


@router.get("/orders/available-inventory", response_model=List[AvailableInventoryOut])
def available_inventory(
    warehouse_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return outbound_orders_crud.get_available_inventory(db, scope.customer_id, warehouse_id, scope)


@router.post("/orders/review", response_model=OrderReviewResponse)
def review_order(
    order: OutboundOrderCreate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return outbound_orders_crud.review_order(db, order, scope)


@router.post("/orders", response_model=OutboundOrderDetailOut)
def create_order(
    order: OutboundOrderCreate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return outbound_orders_crud.create_order(db, order, scope)


@router.get("/orders/{order_id}", response_model=OutboundOrderDetailOut)
def order_details(
    order_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return outbound_orders_crud.get_order_details(db, order_id, scope)

# ---------------- Billing ----------------


@router.get("/billing", response_model=BillingSummaryResponse)
def billing(
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_customer)
):
    return customer_portal_crud.get_billing_summary(db, scope)

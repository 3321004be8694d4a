from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.schemas import AccessScope, Lookup
from shared.core.auth import allow_admin, validate_current_token
from ...schemas.orders.outbound_orders_schemas import (
    AvailableInventoryOut, AvailableInventoryRequest, OrderReviewResponse, OrderStatusUpdate, OutboundOrderCreate,
    OutboundOrderDetailOut, OutboundOrderListResponse, OutboundOrderOut, OutboundOrderRequest)
from ...crud.orders import outbound_orders_crud as crud

router = APIRouter(prefix="/api/outbound-orders",
                   tags=["outbound orders"], dependencies=[Depends(validate_current_token)])


@router.get("/all", response_model=OutboundOrderListResponse)
def get_orders(
    params: OutboundOrderRequest = Depends(),
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.get_orders(db, params, scope)


@router.get("/status-lookup", response_model=List[Lookup])
def status_lookup():
    return crud.order_status_lookup()

# ---------------- Wizard ----------------


@router.get("/available-inventory", response_model=List[AvailableInventoryOut])
def available_inventory(
    params: AvailableInventoryRequest = Depends(),
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.get_available_inventory(db, params.customer_id, params.warehouse_id, scope)


@router.post("/review", response_model=OrderReviewResponse)
def review_order(
    order: OutboundOrderCreate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.review_order(db, order, scope)


@router.post("/", response_model=OutboundOrderDetailOut)
def create_order(
    order: OutboundOrderCreate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.create_order(db, order, scope)

# ---------------- Details / Status / Delete ----------------


@router.get("/{order_id}", response_model=OutboundOrderDetailOut)
def get_order(
    order_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.get_order_details(db, order_id, scope)


@router.put("/{order_id}/status", response_model=OutboundOrderOut)
def update_order_status(
    order_id: UUID,
    status_update: OrderStatusUpdate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.update_order_status(db, order_id, status_update, scope)


@router.delete("/{order_id}")
def delete_order(
    order_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.delete_order(db, order_id, scope)

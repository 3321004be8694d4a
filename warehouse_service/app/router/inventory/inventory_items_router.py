from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.schemas import AccessScope, Lookup
from shared.core.auth import allow_admin, validate_current_token
from ...schemas.inventory.inventory_items_schemas import (
    InventoryItemCreate, InventoryItemOut, InventoryItemUpdate, InventoryListResponse, InventoryRequest)
from ...crud.inventory import inventory_items_crud as crud

router = APIRouter(prefix="/api/inventory-items",
                   tags=["inventory"], dependencies=[Depends(validate_current_token)])


@router.get("/all", response_model=InventoryListResponse)
def get_inventory_items(
    params: InventoryRequest = Depends(),
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.get_inventory_items(db, params, scope)


@router.get("/category-lookup", response_model=List[Lookup])
def category_lookup(
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.inventory_category_lookup(db, scope)


@router.get("/status-lookup", response_model=List[Lookup])
def status_lookup():
    return crud.inventory_status_lookup()


@router.get("/{item_id}", response_model=InventoryItemOut)
def get_inventory_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.inventory_item_out(crud.get_inventory_item_or_404(db, item_id, scope))


@router.post("/", response_model=InventoryItemOut)
def create_inventory_item(
    item: InventoryItemCreate,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.create_inventory_item(db, item)


@router.post("/receive", response_model=InventoryItemOut)
def receive_inventory(
    item: InventoryItemCreate,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.receive_inventory(db, item)


@router.put("/{item_id}", response_model=InventoryItemOut)
def update_inventory_item(
    item_id: UUID,
    item: InventoryItemUpdate,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.update_inventory_item(db, item_id, item, scope)


@router.delete("/{item_id}")
def delete_inventory_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    scope: AccessScope = Depends(allow_admin)
):
    return crud.delete_inventory_item(db, item_id, scope)

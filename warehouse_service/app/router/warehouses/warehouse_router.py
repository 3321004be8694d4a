from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.schemas import AccessScope, Lookup
from shared.core.auth import allow_admin, validate_current_token
from ...schemas.warehouses.warehouses_schemas import (
    WarehouseCreate, WarehouseListResponse, WarehouseOut, WarehouseRequest, WarehouseUpdate)
from ...crud.warehouses import warehouses_crud as crud

router = APIRouter(prefix="/api/warehouses",
                   tags=["warehouses"], dependencies=[Depends(validate_current_token)])


@router.get("/all", response_model=WarehouseListResponse)
def get_warehouses(
    params: WarehouseRequest = Depends(),
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.get_warehouses(db, params)


@router.get("/warehouse-lookup", response_model=List[Lookup])
def warehouse_lookup(
    db: Session = Depends(get_db),
    current_user=Depends(validate_current_token)
):
    return crud.warehouse_lookup(db)


@router.get("/{warehouse_id}", response_model=WarehouseOut)
def get_warehouse(
    warehouse_id: UUID,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.get_warehouse_or_404(db, warehouse_id)


@router.post("/", response_model=WarehouseOut)
def create_warehouse(
    warehouse: WarehouseCreate,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.create_warehouse(db, warehouse)


@router.put("/{warehouse_id}", response_model=WarehouseOut)
def update_warehouse(
    warehouse_id: UUID,
    warehouse: WarehouseUpdate,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.update_warehouse(db, warehouse_id, warehouse)


@router.delete("/{warehouse_id}")
def delete_warehouse(
    warehouse_id: UUID,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.delete_warehouse(db, warehouse_id)

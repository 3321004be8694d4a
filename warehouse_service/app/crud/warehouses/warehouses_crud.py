import uuid
from typing import List
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import Lookup
from ...models.warehouses.warehouses import Warehouse
from ...schemas.warehouses.warehouses_schemas import (
    WarehouseCreate, WarehouseListResponse, WarehouseOut, WarehouseRequest, WarehouseUpdate)
from ...enum.warehouses_enum import WarehouseStatus


def build_warehouse_filters(params: WarehouseRequest):
    filters = []

    if params.status and params.status.lower() != "all":
        filters.append(Warehouse.status == params.status)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Warehouse.warehouse_code.ilike(search_term),
                Warehouse.warehouse_name.ilike(search_term),
                Warehouse.city.ilike(search_term)
            )
        )

    return filters


def get_warehouses(db: Session, params: WarehouseRequest) -> WarehouseListResponse:
    base_query = db.query(Warehouse).filter(*build_warehouse_filters(params))
    total = base_query.with_entities(func.count(Warehouse.id)).scalar()

    warehouses = (
        base_query
        .order_by(Warehouse.warehouse_name.asc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    return WarehouseListResponse(
        warehouses=[WarehouseOut.model_validate(w) for w in warehouses], total=total)


def get_warehouse_or_404(db: Session, warehouse_id: uuid.UUID) -> Warehouse:
    db_warehouse = db.query(Warehouse).filter(Warehouse.id == warehouse_id).first()
    if not db_warehouse:
        return error_response(
            message="Warehouse not found",
            status_code=str(AppStatusCode.RECORD_NOT_FOUND),
            http_status=404
        )
    return db_warehouse


def create_warehouse(db: Session, warehouse: WarehouseCreate) -> Warehouse:
    if db.query(Warehouse).filter(Warehouse.warehouse_code == warehouse.warehouse_code).first():
        return error_response(
            message=f"Warehouse code '{warehouse.warehouse_code}' already exists",
            status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
            http_status=400
        )

    db_warehouse = Warehouse(**warehouse.model_dump())
    db.add(db_warehouse)
    db.commit()
    db.refresh(db_warehouse)
    return db_warehouse


def update_warehouse(db: Session, warehouse_id: uuid.UUID, warehouse: WarehouseUpdate) -> Warehouse:
    db_warehouse = get_warehouse_or_404(db, warehouse_id)

    for key, value in warehouse.model_dump(exclude_unset=True).items():
        setattr(db_warehouse, key, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return error_response(
            message="Error updating warehouse",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_warehouse)
    return db_warehouse


def delete_warehouse(db: Session, warehouse_id: uuid.UUID) -> dict:
    db_warehouse = get_warehouse_or_404(db, warehouse_id)
    db.delete(db_warehouse)
    db.commit()
    return {"id": str(warehouse_id), "deleted": True}


def warehouse_lookup(db: Session) -> List[Lookup]:
    warehouses = (
        db.query(Warehouse)
        .filter(Warehouse.status == WarehouseStatus.active.value)
        .order_by(Warehouse.warehouse_name.asc())
        .all()
    )
    return [Lookup(id=w.id, name=f"{w.warehouse_name} ({w.warehouse_code})") for w in warehouses]

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_auth_db, get_warehouse_db as get_db
from shared.core.schemas import AccessScope, Lookup
from shared.core.auth import allow_admin, validate_current_token
from ...schemas.customers.customers_schemas import (
    CustomerCreate, CustomerCreateResponse, CustomerListResponse, CustomerOut, CustomerOverviewResponse,
    CustomerRequest, CustomerUpdate)
from ...crud.customers import customers_crud as crud

router = APIRouter(prefix="/api/customers",
                   tags=["customers"], dependencies=[Depends(validate_current_token)])

# ---------------- List all customers ----------------


@router.get("/all", response_model=CustomerListResponse)
def get_customers(
    params: CustomerRequest = Depends(),
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.get_customers(db, params)


@router.get("/overview", response_model=CustomerOverviewResponse)
def overview(
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.get_customers_overview(db)


@router.get("/customer-lookup", response_model=List[Lookup])
def customer_lookup(
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.customer_lookup(db)


@router.get("/status-lookup", response_model=List[Lookup])
def customer_status_lookup():
    return crud.customer_status_lookup()


@router.get("/{customer_id}", response_model=CustomerOut)
def get_customer(
    customer_id: UUID,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.get_customer_or_404(db, customer_id)

# -------create-------------------------------


@router.post("/", response_model=CustomerCreateResponse)
def create_customer(
    customer: CustomerCreate,
    db: Session = Depends(get_db),
    auth_db: Session = Depends(get_auth_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.create_customer(db, auth_db, customer)

# ---------------- Update ----------------


@router.put("/{customer_id}", response_model=CustomerOut)
def update_customer(
    customer_id: UUID,
    customer: CustomerUpdate,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.update_customer(db, customer_id, customer)

# ---------------- Delete ----------------


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: UUID,
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return crud.delete_customer(db, customer_id)

import logging
import uuid
from typing import List, Optional
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import Lookup
from auth_service.app.schemas.userschema import ProvisionUserRequest
from auth_service.app.services import userservices
from ...models.customers.customers import Customer
from ...schemas.customers.customers_schemas import (
    CustomerCreate, CustomerCreateResponse, CustomerListResponse, CustomerOut, CustomerRequest, CustomerUpdate)
from ...enum.customers_enum import CustomerStatus

logger = logging.getLogger(__name__)

# ----------------- Build Filters for Customers -----------------


def build_customer_filters(params: CustomerRequest):
    filters = []

    if params.status and params.status.lower() != "all":
        filters.append(Customer.status == params.status)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Customer.customer_code.ilike(search_term),
                Customer.company_name.ilike(search_term),
                Customer.contact_person.ilike(search_term),
                Customer.email.ilike(search_term)
            )
        )

    return filters

# ---------------- Overview ----------------


def get_customers_overview(db: Session):
    counts = dict(
        db.query(Customer.status, func.count(Customer.id))
        .group_by(Customer.status)
        .all()
    )
    return {
        "totalCustomers": sum(counts.values()),
        "activeCustomers": counts.get(CustomerStatus.active.value, 0),
        "suspendedCustomers": counts.get(CustomerStatus.suspended.value, 0),
    }

# ----------------- Get All Customers -----------------


def get_customers(db: Session, params: CustomerRequest) -> CustomerListResponse:
    base_query = db.query(Customer).filter(*build_customer_filters(params))

    total = base_query.with_entities(func.count(Customer.id)).scalar()

    customers = (
        base_query
        .order_by(Customer.created_at.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )

    return CustomerListResponse(
        customers=[CustomerOut.model_validate(c) for c in customers], total=total)


def get_customer_by_id(db: Session, customer_id: uuid.UUID) -> Optional[Customer]:
    return db.query(Customer).filter(Customer.id == customer_id).first()


def get_customer_or_404(db: Session, customer_id: uuid.UUID) -> Customer:
    db_customer = get_customer_by_id(db, customer_id)
    if not db_customer:
        return error_response(
            message="Customer not found",
            status_code=str(AppStatusCode.RECORD_NOT_FOUND),
            http_status=404
        )
    return db_customer


# ---------------- Create ----------------


def create_customer(db: Session, auth_db: Session, customer: CustomerCreate) -> CustomerCreateResponse:
    if db.query(Customer).filter(Customer.customer_code == customer.customer_code).first():
        return error_response(
            message=f"Customer code '{customer.customer_code}' already exists",
            status_code=str(AppStatusCode.DUPLICATE_ADD_ERROR),
            http_status=400
        )

    data = customer.model_dump(exclude={"create_login", "password", "user_role"})
    db_customer = Customer(**data)
    db.add(db_customer)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return error_response(
            message="Error creating customer",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_customer)

    result = CustomerCreateResponse.model_validate(db_customer)

    if customer.create_login:
        # the customer row stays even when the login cannot be created
        http_status, body = userservices.provision_user(auth_db, db, ProvisionUserRequest(
            email=customer.email,
            password=customer.password,
            customerId=db_customer.id,
            role=customer.user_role,
            firstName=customer.contact_person,
            phone=customer.phone,
        ))
        if http_status == 200:
            result.login_user_id = uuid.UUID(body["user"]["id"])
        else:
            logger.warning("Login for customer %s not created: %s",
                           db_customer.customer_code, body.get("error"))
            result.login_error = body.get("error")

    return result


# ---------------- Update ----------------


def update_customer(db: Session, customer_id: uuid.UUID, customer: CustomerUpdate) -> Customer:
    db_customer = get_customer_or_404(db, customer_id)

    for key, value in customer.model_dump(exclude_unset=True).items():
        setattr(db_customer, key, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return error_response(
            message="Error updating customer",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=400
        )
    db.refresh(db_customer)
    return db_customer


# ----------------- Delete -----------------


def delete_customer(db: Session, customer_id: uuid.UUID) -> dict:
    """Hard delete; inventory, orders (with lines) and role rows go with it."""
    db_customer = get_customer_or_404(db, customer_id)

    customer_code = db_customer.customer_code
    removed = {
        "inventory_items": len(db_customer.inventory_items),
        "outbound_orders": len(db_customer.outbound_orders),
    }
    db.delete(db_customer)
    db.commit()

    logger.info("Deleted customer %s with %s inventory items and %s orders",
                customer_code, removed["inventory_items"], removed["outbound_orders"])
    return {"id": str(customer_id), "deleted": True, **removed}


# ----------------- Lookups -----------------


def customer_lookup(db: Session, status: Optional[str] = CustomerStatus.active.value) -> List[Lookup]:
    query = db.query(Customer)
    if status:
        query = query.filter(Customer.status == status)
    customers = query.order_by(Customer.company_name.asc()).all()
    return [
        Lookup(id=c.id, name=f"{c.company_name or c.contact_person} ({c.customer_code})")
        for c in customers
    ]


def customer_status_lookup() -> List[Lookup]:
    return [
        Lookup(id=status.value, name=status.name.capitalize())
        for status in CustomerStatus
    ]

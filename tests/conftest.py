import os

# in-memory databases and a fixed signing key, set before any app module is imported
os.environ["AUTH_DATABASE_URL"] = "sqlite://"
os.environ["WAREHOUSE_DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SMTP_HOST"] = ""

from datetime import date
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from auth_service.app.main import app as auth_app
from warehouse_service.app.main import app as warehouse_app
from shared.core import auth
from shared.core.database import (
    AuthBase, AuthSessionLocal, Base, WarehouseSessionLocal, auth_engine, warehouse_engine)
from shared.helpers.email_helper import EmailHelper
from shared.models.profiles import Profile
from shared.models.user_login_session import UserLoginSession
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.enums import RoleName
from warehouse_service.app.models.customers.customers import Customer
from warehouse_service.app.models.inventory.inventory_items import InventoryItem
from warehouse_service.app.models.warehouses.warehouses import Warehouse

PASSWORD = "Password123"


@pytest.fixture(autouse=True)
def reset_databases():
    Base.metadata.drop_all(bind=warehouse_engine)
    AuthBase.metadata.drop_all(bind=auth_engine)
    AuthBase.metadata.create_all(bind=auth_engine)
    Base.metadata.create_all(bind=warehouse_engine)
    yield


@pytest.fixture(autouse=True)
def sent_emails():
    with patch.object(EmailHelper, "send_email", autospec=True, return_value=True) as mock_send:
        yield mock_send


@pytest.fixture
def auth_db():
    session = AuthSessionLocal()
    yield session
    session.close()


@pytest.fixture
def db():
    session = WarehouseSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    return TestClient(warehouse_app)


@pytest.fixture
def auth_client():
    return TestClient(auth_app)


# ---------------- Users ----------------


def create_user(auth_db, db, email, role=None, customer=None, password=PASSWORD, status="active"):
    user = Users(email=email, first_name="Test", last_name="User", status=status)
    user.set_password(password)
    auth_db.add(user)
    auth_db.commit()
    auth_db.refresh(user)

    db.add(Profile(id=user.id, email=email, customer_id=customer.id if customer else None))
    if role:
        db.add(UserRole(user_id=user.id, role=role, customer_id=customer.id if customer else None))
    db.commit()
    return user


def bearer_headers(auth_db, user):
    session = UserLoginSession(user_id=user.id)
    auth_db.add(session)
    auth_db.commit()
    token = auth.create_access_token({
        "user_id": str(user.id),
        "session_id": str(session.id),
        "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(auth_db, db):
    user = create_user(auth_db, db, "admin@example.com", RoleName.SUPER_ADMIN.value)
    return bearer_headers(auth_db, user)


# ---------------- Warehouse data ----------------


def create_customer(db, code="CUST-0001", company_name="Acme Ltd"):
    customer = Customer(
        customer_code=code,
        company_name=company_name,
        customer_type="business",
        contact_person="Jane Doe",
        email=f"{code.lower()}@example.com",
        phone="0123456789",
    )
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def create_warehouse(db, code="WH-001", capacity=1000):
    warehouse = Warehouse(warehouse_code=code, warehouse_name=f"Warehouse {code}",
                          total_capacity=capacity)
    db.add(warehouse)
    db.commit()
    db.refresh(warehouse)
    return warehouse


def create_item(db, customer, warehouse, code="ITM-001", quantity=10, total_quantity=10,
                category="Electronics", name="Widget"):
    item = InventoryItem(
        item_code=code,
        customer_id=customer.id,
        warehouse_id=warehouse.id,
        item_name=name,
        category=category,
        quantity=quantity,
        total_quantity=total_quantity,
        received_date=date.today(),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@pytest.fixture
def customer(db):
    return create_customer(db)


@pytest.fixture
def warehouse(db):
    return create_warehouse(db)


@pytest.fixture
def customer_headers(auth_db, db, customer):
    user = create_user(auth_db, db, "portal@example.com", RoleName.CUSTOMER_ADMIN.value, customer)
    return bearer_headers(auth_db, user)

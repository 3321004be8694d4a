import uuid
from datetime import date

from conftest import bearer_headers, create_customer, create_item, create_user
from shared.core.auth import build_access_scope, redirect_path, scope_filters
from shared.models.user_roles import UserRole
from shared.utils.enums import RoleName
from warehouse_service.app.models.orders.outbound_orders import OutboundOrder


# ---------------- Role resolution ----------------


def test_no_role_row(db):
    scope = build_access_scope(db, uuid.uuid4())

    assert scope.role is None
    assert not scope.is_admin
    assert not scope.is_customer
    assert redirect_path(scope) == "/login"


def test_customer_role(db, customer):
    user_id = uuid.uuid4()
    db.add(UserRole(user_id=user_id, role=RoleName.CUSTOMER_ADMIN.value, customer_id=customer.id))
    db.commit()

    scope = build_access_scope(db, user_id)

    assert scope.is_customer and not scope.is_admin
    assert scope.customer_id == customer.id
    assert redirect_path(scope) == "/customer/dashboard"


def test_both_roles_resolve_to_admin(db, customer):
    user_id = uuid.uuid4()
    db.add_all([
        UserRole(user_id=user_id, role=RoleName.CUSTOMER_ADMIN.value, customer_id=customer.id),
        UserRole(user_id=user_id, role=RoleName.SUPER_ADMIN.value),
    ])
    db.commit()

    scope = build_access_scope(db, user_id)

    assert scope.is_admin and not scope.is_customer
    assert redirect_path(scope) == "/admin/dashboard"


def test_unknown_role_is_neither(db):
    user_id = uuid.uuid4()
    db.add(UserRole(user_id=user_id, role="warehouse_manager"))
    db.commit()

    scope = build_access_scope(db, user_id)

    assert not scope.is_admin and not scope.is_customer


def test_scope_filters(db, customer):
    admin = build_access_scope(db, uuid.uuid4())
    admin.is_admin = True
    assert scope_filters(OutboundOrder.customer_id, admin) == []

    customer_scope = build_access_scope(db, uuid.uuid4())
    customer_scope.is_customer = True
    customer_scope.customer_id = customer.id
    assert len(scope_filters(OutboundOrder.customer_id, customer_scope)) == 1


# ---------------- Guards over HTTP ----------------


def test_missing_token_rejected(client):
    resp = client.get("/api/customers/all")

    assert resp.status_code in (401, 403)


def test_garbage_token_rejected(client):
    resp = client.get("/api/customers/all", headers={"Authorization": "Bearer not-a-jwt"})

    assert resp.status_code == 401


def test_user_without_role_is_refused(client, auth_db, db):
    user = create_user(auth_db, db, "norole@example.com")
    headers = bearer_headers(auth_db, user)

    assert client.get("/api/customers/all", headers=headers).status_code == 403
    assert client.get("/api/portal/dashboard", headers=headers).status_code == 403


def test_customer_cannot_use_admin_routes(client, customer_headers):
    resp = client.get("/api/dashboard/overview", headers=customer_headers)

    assert resp.status_code == 403
    assert resp.json()["message"] == "Access forbidden: Admins only"


def test_admin_cannot_use_customer_portal(client, admin_headers):
    resp = client.get("/api/portal/dashboard", headers=admin_headers)

    assert resp.status_code == 403


# ---------------- Row scoping ----------------


def test_customer_sees_only_own_inventory(client, customer_headers, customer, warehouse, db):
    other = create_customer(db, code="CUST-0002", company_name="Other Co")
    mine = create_item(db, customer, warehouse, code="MINE-1")
    theirs = create_item(db, other, warehouse, code="THEIRS-1")

    resp = client.get("/api/portal/inventory", headers=customer_headers)

    data = resp.json()["data"]
    assert data["total"] == 1
    assert data["inventory_items"][0]["item_code"] == "MINE-1"

    assert client.get(f"/api/portal/inventory/{mine.id}", headers=customer_headers).status_code == 200
    assert client.get(f"/api/portal/inventory/{theirs.id}", headers=customer_headers).status_code == 404


def test_customer_order_is_forced_to_own_customer(client, customer_headers, customer, warehouse, db):
    other = create_customer(db, code="CUST-0002", company_name="Other Co")
    item = create_item(db, customer, warehouse)

    resp = client.post("/api/portal/orders", headers=customer_headers, json={
        "customer_id": str(other.id),
        "warehouse_id": str(warehouse.id),
        "requested_date": date.today().isoformat(),
        "items": [{"inventory_item_id": str(item.id), "quantity": 1}],
    })

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["customer_id"] == str(customer.id)
    # contact details stay in the admin portal
    assert data["customer_email"] == ""


def test_customer_cannot_read_other_orders(client, customer_headers, admin_headers, warehouse, db):
    other = create_customer(db, code="CUST-0002", company_name="Other Co")
    item = create_item(db, other, warehouse)
    order_id = client.post("/api/outbound-orders/", headers=admin_headers, json={
        "customer_id": str(other.id),
        "warehouse_id": str(warehouse.id),
        "requested_date": date.today().isoformat(),
        "items": [{"inventory_item_id": str(item.id), "quantity": 1}],
    }).json()["data"]["id"]

    assert client.get(f"/api/portal/orders/{order_id}", headers=customer_headers).status_code == 404
    assert client.get("/api/portal/orders", headers=customer_headers).json()["data"]["total"] == 0


def test_customer_role_without_customer_sees_nothing(client, auth_db, db, customer, warehouse):
    create_item(db, customer, warehouse)
    user = create_user(auth_db, db, "orphan@example.com", RoleName.CUSTOMER_ADMIN.value)
    headers = bearer_headers(auth_db, user)

    resp = client.get("/api/portal/inventory", headers=headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["total"] == 0

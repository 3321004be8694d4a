from datetime import date

from conftest import create_customer, create_item, create_user
from shared.models.profiles import Profile
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.enums import RoleName
from warehouse_service.app.models.customers.customers import Customer
from warehouse_service.app.models.inventory.inventory_items import InventoryItem
from warehouse_service.app.models.orders.outbound_order_items import OutboundOrderItem
from warehouse_service.app.models.orders.outbound_orders import OutboundOrder


def customer_payload(**overrides):
    payload = {
        "customer_code": "CUST-0100",
        "company_name": "Northwind Traders",
        "customer_type": "business",
        "contact_person": "Anne Smith",
        "email": "anne@northwind.example.com",
        "phone": "0200000000",
    }
    payload.update(overrides)
    return payload


def test_create_customer(client, admin_headers, db):
    resp = client.post("/api/customers/", json=customer_payload(), headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["customer_code"] == "CUST-0100"
    assert data["status"] == "active"
    assert data["login_user_id"] == ""
    assert db.query(Customer).count() == 1


def test_create_customer_with_login(client, admin_headers, auth_db, db, sent_emails):
    resp = client.post("/api/customers/", headers=admin_headers,
                       json=customer_payload(create_login=True, password="Secret123"))

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["login_user_id"]
    assert data["login_error"] == ""

    user = auth_db.query(Users).filter(Users.email == "anne@northwind.example.com").one()
    assert user.email_confirmed_at is not None
    role = db.query(UserRole).filter(UserRole.user_id == user.id).one()
    assert role.role == RoleName.CUSTOMER_ADMIN.value
    assert str(role.customer_id) == data["id"]
    assert sent_emails.call_args.kwargs["template_code"] == "customer_welcome"


def test_login_failure_keeps_customer(client, admin_headers, auth_db, db):
    create_user(auth_db, db, "anne@northwind.example.com")

    resp = client.post("/api/customers/", headers=admin_headers,
                       json=customer_payload(create_login=True, password="Secret123"))

    assert resp.status_code == 200
    assert resp.json()["data"]["login_error"]
    assert db.query(Customer).count() == 1


def test_create_login_needs_password(client, admin_headers):
    resp = client.post("/api/customers/", headers=admin_headers,
                       json=customer_payload(create_login=True, password="short"))

    assert resp.status_code == 422


def test_duplicate_customer_code(client, admin_headers, db):
    create_customer(db, code="CUST-0100")

    resp = client.post("/api/customers/", json=customer_payload(), headers=admin_headers)

    assert resp.status_code == 400


def test_update_customer(client, admin_headers, customer):
    resp = client.put(f"/api/customers/{customer.id}", json={"status": "suspended"},
                      headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json()["data"]["status"] == "suspended"


def test_overview_counts(client, admin_headers, db):
    create_customer(db, code="C1")
    suspended = create_customer(db, code="C2")
    suspended.status = "suspended"
    db.commit()

    data = client.get("/api/customers/overview", headers=admin_headers).json()["data"]

    assert data == {"totalCustomers": 2, "activeCustomers": 1, "suspendedCustomers": 1}


def test_delete_cascades(client, admin_headers, auth_db, db, customer, warehouse):
    item = create_item(db, customer, warehouse)
    client.post("/api/outbound-orders/", headers=admin_headers, json={
        "customer_id": str(customer.id),
        "warehouse_id": str(warehouse.id),
        "requested_date": date.today().isoformat(),
        "items": [{"inventory_item_id": str(item.id), "quantity": 2}],
    })
    portal_user = create_user(auth_db, db, "portal@example.com",
                              RoleName.CUSTOMER_ADMIN.value, customer)

    resp = client.delete(f"/api/customers/{customer.id}", headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["inventory_items"] == 1
    assert data["outbound_orders"] == 1

    db.expire_all()
    assert db.query(Customer).count() == 0
    assert db.query(InventoryItem).count() == 0
    assert db.query(OutboundOrder).count() == 0
    assert db.query(OutboundOrderItem).count() == 0
    assert db.query(UserRole).filter(UserRole.user_id == portal_user.id).count() == 0
    # the profile survives, unlinked
    assert db.get(Profile, portal_user.id).customer_id is None


def test_get_missing_customer(client, admin_headers):
    resp = client.get("/api/customers/00000000-0000-0000-0000-000000000000", headers=admin_headers)

    assert resp.status_code == 404

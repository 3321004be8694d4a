import re
from datetime import date

from conftest import create_item
from shared.utils.app_status_code import AppStatusCode
from warehouse_service.app.crud.orders import outbound_orders_crud as crud
from warehouse_service.app.models.inventory.inventory_items import InventoryItem
from warehouse_service.app.models.orders.outbound_order_items import OutboundOrderItem
from warehouse_service.app.models.orders.outbound_orders import OutboundOrder


def order_payload(customer, warehouse, items, **overrides):
    payload = {
        "customer_id": str(customer.id),
        "warehouse_id": str(warehouse.id),
        "requested_date": date.today().isoformat(),
        "handling_charges": 10,
        "delivery_charges": 5,
        "items": items,
    }
    payload.update(overrides)
    return payload


def line(item, quantity, **extra):
    return {"inventory_item_id": str(item.id), "quantity": quantity, **extra}


def test_create_order_takes_stock(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=10, total_quantity=10)

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 3)]),
                       headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert re.match(r"^OUT-\d{4}-\d{5}$", data["order_number"])
    assert data["status"] == "pending"
    assert data["total_items"] == 1
    assert data["total_quantity"] == 3
    assert data["total_charges"] == 15.0
    assert data["items"][0]["quantity"] == 3
    assert data["customer_email"] == customer.email

    db.expire_all()
    assert db.get(InventoryItem, item.id).quantity == 7


def test_review_totals(client, admin_headers, customer, warehouse, db):
    first = create_item(db, customer, warehouse, code="ITM-1")
    second = create_item(db, customer, warehouse, code="ITM-2")

    resp = client.post("/api/outbound-orders/review",
                       json=order_payload(customer, warehouse, [line(first, 3), line(second, 2)]),
                       headers=admin_headers)

    data = resp.json()["data"]
    assert data["stage"] == "review"
    assert data["total_items"] == 2
    assert data["total_quantity"] == 5
    assert data["total_charges"] == 15.0
    assert db.query(OutboundOrder).count() == 0


def test_order_without_items(client, admin_headers, customer, warehouse):
    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, []), headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Please add at least one item"


def test_quantity_over_snapshot_creates_nothing(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=10, name="Widget")

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 11)]),
                       headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["message"] == "Quantity exceeds available stock for Widget"
    assert db.query(OutboundOrder).count() == 0


def test_live_shortage_leaves_order_without_items(client, admin_headers, customer, warehouse, db,
                                                   monkeypatch):
    item = create_item(db, customer, warehouse, quantity=10, total_quantity=10)
    next_number = crud.generate_unique_order_number

    def number_after_concurrent_shipment(session):
        # stock ships elsewhere after the draft was checked
        db.get(InventoryItem, item.id).quantity = 2
        db.commit()
        return next_number(session)

    monkeypatch.setattr(crud, "generate_unique_order_number", number_after_concurrent_shipment)

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 5)]),
                       headers=admin_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["status_code"] == AppStatusCode.ORDER_ITEMS_WRITE_FAILED
    assert "Insufficient stock: available 2, requested 5" in body["message"]

    db.expire_all()
    orders = db.query(OutboundOrder).all()
    assert len(orders) == 1
    assert body["message"].startswith(f"Order {orders[0].order_number}")
    assert db.query(OutboundOrderItem).count() == 0
    assert db.get(InventoryItem, item.id).quantity == 2


def test_inflated_snapshot_creates_nothing(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=10, total_quantity=10, name="Widget")

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse,
                                          [line(item, 50, available_quantity=999)]),
                       headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["status_code"] == AppStatusCode.ORDER_QUANTITY_EXCEEDS_AVAILABLE
    assert db.query(OutboundOrder).count() == 0


def test_same_item_on_two_lines(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=10, total_quantity=10)

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 3), line(item, 2)]),
                       headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["total_items"] == 2
    assert data["total_quantity"] == 5
    assert sorted(i["quantity"] for i in data["items"]) == [2, 3]

    db.expire_all()
    assert db.get(InventoryItem, item.id).quantity == 5


def test_same_item_lines_over_stock_creates_nothing(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=4, total_quantity=10)

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 3), line(item, 2)]),
                       headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["status_code"] == AppStatusCode.ORDER_QUANTITY_EXCEEDS_AVAILABLE
    assert db.query(OutboundOrder).count() == 0


def test_item_from_other_customer_rejected(client, admin_headers, customer, warehouse, db):
    from conftest import create_customer
    other = create_customer(db, code="CUST-0002", company_name="Other Co")
    item = create_item(db, other, warehouse)

    resp = client.post("/api/outbound-orders/",
                       json=order_payload(customer, warehouse, [line(item, 1)]),
                       headers=admin_headers)

    assert resp.status_code == 400
    assert db.query(OutboundOrder).count() == 0


def test_completed_sets_completed_date(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse)
    order_id = client.post("/api/outbound-orders/",
                           json=order_payload(customer, warehouse, [line(item, 1)]),
                           headers=admin_headers).json()["data"]["id"]

    resp = client.put(f"/api/outbound-orders/{order_id}/status",
                      json={"status": "completed"}, headers=admin_headers)

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["status"] == "completed"
    assert data["completed_date"] == date.today().isoformat()


def test_delete_returns_stock(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, quantity=10, total_quantity=10)
    order_id = client.post("/api/outbound-orders/",
                           json=order_payload(customer, warehouse, [line(item, 4)]),
                           headers=admin_headers).json()["data"]["id"]

    resp = client.delete(f"/api/outbound-orders/{order_id}", headers=admin_headers)

    assert resp.status_code == 200
    db.expire_all()
    assert db.get(InventoryItem, item.id).quantity == 10
    assert db.query(OutboundOrder).count() == 0
    assert db.query(OutboundOrderItem).count() == 0


def test_available_inventory_lists_in_stock_only(client, admin_headers, customer, warehouse, db):
    create_item(db, customer, warehouse, code="ITM-1", quantity=4)
    create_item(db, customer, warehouse, code="ITM-2", quantity=0)

    resp = client.get("/api/outbound-orders/available-inventory",
                      params={"customer_id": str(customer.id), "warehouse_id": str(warehouse.id)},
                      headers=admin_headers)

    assert [i["item_code"] for i in resp.json()["data"]] == ["ITM-1"]


def test_list_orders(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse)
    client.post("/api/outbound-orders/",
                json=order_payload(customer, warehouse, [line(item, 1)]), headers=admin_headers)

    resp = client.get("/api/outbound-orders/all", params={"status": "pending"},
                      headers=admin_headers)

    data = resp.json()["data"]
    assert data["total"] == 1
    assert data["orders"][0]["customer_name"] == "Acme Ltd"

from datetime import date, timedelta

from conftest import create_customer, create_item, create_warehouse


def place_order(client, headers, customer, warehouse, item, quantity=1, handling=10, delivery=5,
                url="/api/outbound-orders/"):
    resp = client.post(url, headers=headers, json={
        "customer_id": str(customer.id),
        "warehouse_id": str(warehouse.id),
        "requested_date": date.today().isoformat(),
        "handling_charges": handling,
        "delivery_charges": delivery,
        "items": [{"inventory_item_id": str(item.id), "quantity": quantity}],
    })
    assert resp.status_code == 200
    return resp.json()["data"]


def test_admin_dashboard(client, admin_headers, customer, warehouse, db):
    inactive = create_warehouse(db, code="WH-002", capacity=500)
    inactive.status = "inactive"
    db.commit()
    item = create_item(db, customer, warehouse)
    place_order(client, admin_headers, customer, warehouse, item)

    data = client.get("/api/dashboard/overview", headers=admin_headers).json()["data"]

    assert data["total_inventory_items"] == 1
    assert data["total_customers"] == 1
    assert data["pending_orders"] == 1
    assert data["warehouse_capacity"] == 1000.0
    assert len(data["recent_orders"]) == 1


def test_reports_overview(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse, code="ITM-1", category="Furniture")
    create_item(db, customer, warehouse, code="ITM-2", category=None, quantity=4, total_quantity=4)
    place_order(client, admin_headers, customer, warehouse, item)
    place_order(client, admin_headers, customer, warehouse, item, handling=20, delivery=0)

    data = client.get("/api/reports/overview", headers=admin_headers).json()["data"]

    assert data["total_revenue"] == 35.0
    assert data["monthly_orders"] == 2
    assert data["active_customers"] == 1
    assert data["orders_by_status"] == [{"label": "pending", "count": 2}]
    assert {"category": "uncategorized", "quantity": 4} in data["inventory_by_category"]
    assert len(data["revenue_by_month"]) == 6
    assert data["revenue_by_month"][-1]["revenue"] == 35.0


def test_reports_date_range_excludes_orders(client, admin_headers, customer, warehouse, db):
    item = create_item(db, customer, warehouse)
    place_order(client, admin_headers, customer, warehouse, item)
    past = date.today() - timedelta(days=60)

    data = client.get("/api/reports/overview", headers=admin_headers, params={
        "date_from": (past - timedelta(days=5)).isoformat(), "date_to": past.isoformat()}).json()["data"]

    assert data["total_revenue"] == 0
    assert data["orders_by_status"] == []


def test_customer_dashboard_and_billing(client, admin_headers, customer_headers, customer, warehouse, db):
    other = create_customer(db, code="CUST-0002", company_name="Other Co")
    mine = create_item(db, customer, warehouse, code="MINE-1")
    theirs = create_item(db, other, warehouse, code="THEIRS-1")
    place_order(client, customer_headers, customer, warehouse, mine, url="/api/portal/orders")
    place_order(client, admin_headers, other, warehouse, theirs, handling=100)

    dashboard = client.get("/api/portal/dashboard", headers=customer_headers).json()["data"]
    assert dashboard["company_name"] == "Acme Ltd"
    assert dashboard["total_items"] == 1
    assert dashboard["pending_orders"] == 1
    assert dashboard["monthly_charges"] == 15.0

    billing = client.get("/api/portal/billing", headers=customer_headers).json()["data"]
    assert billing["currency"] == "GBP"
    assert billing["total_charges"] == 15.0
    assert billing["total_orders"] == 1
    assert len(billing["recent_charges"]) == 1


def test_export_inventory(client, admin_headers, customer, warehouse, db):
    create_item(db, customer, warehouse, code="ITM-9", name="Desk")

    data = client.get("/api/export/", params={"type": "inventory"},
                      headers=admin_headers).json()["data"]

    assert data["filename"].startswith("inventory_export_")
    assert data["filename"].endswith(".json")
    assert data["data"][0]["Item Code"] == "ITM-9"
    assert data["data"][0]["Customer"] == "Acme Ltd"


def test_export_unknown_type(client, admin_headers):
    resp = client.get("/api/export/", params={"type": "invoices"}, headers=admin_headers)

    assert resp.status_code == 400

from conftest import create_item, create_warehouse
from warehouse_service.app.models.inventory.inventory_items import InventoryItem


def test_create_and_list(client, admin_headers):
    resp = client.post("/api/warehouses/", headers=admin_headers, json={
        "warehouse_code": "WH-010", "warehouse_name": "Harbour Depot", "total_capacity": 2500})

    assert resp.status_code == 200
    assert resp.json()["data"]["capacity_unit"] == "sqft"

    data = client.get("/api/warehouses/all", params={"search": "harbour"},
                      headers=admin_headers).json()["data"]
    assert data["total"] == 1


def test_duplicate_code(client, admin_headers, db):
    create_warehouse(db, code="WH-010")

    resp = client.post("/api/warehouses/", headers=admin_headers, json={
        "warehouse_code": "WH-010", "warehouse_name": "Again"})

    assert resp.status_code == 400


def test_lookup_lists_active_only(client, admin_headers, db):
    create_warehouse(db, code="WH-A")
    closed = create_warehouse(db, code="WH-B")
    closed.status = "maintenance"
    db.commit()

    data = client.get("/api/warehouses/warehouse-lookup", headers=admin_headers).json()["data"]

    assert [w["name"] for w in data] == ["Warehouse WH-A (WH-A)"]


def test_delete_removes_inventory(client, admin_headers, customer, warehouse, db):
    create_item(db, customer, warehouse)

    resp = client.delete(f"/api/warehouses/{warehouse.id}", headers=admin_headers)

    assert resp.status_code == 200
    db.expire_all()
    assert db.query(InventoryItem).count() == 0

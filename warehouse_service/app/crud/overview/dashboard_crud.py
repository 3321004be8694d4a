from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ...models.customers.customers import Customer
from ...models.inventory.inventory_items import InventoryItem
from ...models.orders.outbound_orders import OutboundOrder
from ...models.warehouses.warehouses import Warehouse
from ...schemas.overview.dashboard_schemas import AdminDashboardResponse, RecentOrderOut
from ...enum.orders_enum import OrderStatus
from ...enum.warehouses_enum import WarehouseStatus

RECENT_ORDERS_LIMIT = 5


def recent_orders(db: Session, filters: list, limit: int = RECENT_ORDERS_LIMIT) -> List[RecentOrderOut]:
    orders = (
        db.query(OutboundOrder)
        .options(joinedload(OutboundOrder.customer))
        .filter(*filters)
        .order_by(OutboundOrder.created_at.desc())
        .limit(limit)
        .all()
    )
    return [
        RecentOrderOut(
            id=o.id,
            order_number=o.order_number,
            customer_name=o.customer.company_name if o.customer else None,
            status=o.status,
            total_charges=float(o.total_charges or 0),
            requested_date=o.requested_date,
            created_at=o.created_at,
        )
        for o in orders
    ]


def get_admin_dashboard(db: Session) -> AdminDashboardResponse:
    total_items = db.query(func.count(InventoryItem.id)).scalar() or 0
    total_customers = db.query(func.count(Customer.id)).scalar() or 0
    pending_orders = db.query(func.count(OutboundOrder.id)).filter(
        OutboundOrder.status == OrderStatus.pending.value).scalar() or 0
    capacity = db.query(func.coalesce(func.sum(Warehouse.total_capacity), 0)).filter(
        Warehouse.status == WarehouseStatus.active.value).scalar()

    return AdminDashboardResponse(
        total_inventory_items=total_items,
        total_customers=total_customers,
        pending_orders=pending_orders,
        warehouse_capacity=float(capacity or 0),
        recent_orders=recent_orders(db, []),
    )

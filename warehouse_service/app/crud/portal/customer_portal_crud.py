from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.auth import scope_filters
from shared.core.config import settings
from shared.core.schemas import AccessScope
from shared.utils.date_utils import start_of_month
from ...models.customers.customers import Customer
from ...models.inventory.inventory_items import InventoryItem
from ...models.orders.outbound_orders import OutboundOrder
from ...schemas.portal.customer_portal_schemas import BillingSummaryResponse, ChargeOut, CustomerDashboardResponse
from ...enum.orders_enum import OrderStatus
from ..overview.dashboard_crud import recent_orders

RECENT_CHARGES_LIMIT = 10


def _charges(db: Session, filters: list) -> float:
    total = db.query(func.coalesce(func.sum(OutboundOrder.total_charges), 0)).filter(*filters).scalar()
    return float(total or 0)


def get_customer_dashboard(db: Session, scope: AccessScope) -> CustomerDashboardResponse:
    order_scope = scope_filters(OutboundOrder.customer_id, scope)
    customer = db.query(Customer).filter(Customer.id == scope.customer_id).first()

    total_items = db.query(func.count(InventoryItem.id)).filter(
        *scope_filters(InventoryItem.customer_id, scope)).scalar() or 0
    pending_orders = db.query(func.count(OutboundOrder.id)).filter(
        *order_scope, OutboundOrder.status == OrderStatus.pending.value).scalar() or 0

    return CustomerDashboardResponse(
        customer_id=scope.customer_id,
        company_name=customer.company_name if customer else None,
        total_items=total_items,
        pending_orders=pending_orders,
        monthly_charges=_charges(db, [*order_scope, OutboundOrder.created_at >= start_of_month()]),
        recent_orders=recent_orders(db, order_scope),
    )


def get_billing_summary(db: Session, scope: AccessScope) -> BillingSummaryResponse:
    order_scope = scope_filters(OutboundOrder.customer_id, scope)

    total_orders = db.query(func.count(OutboundOrder.id)).filter(*order_scope).scalar() or 0
    charges = (
        db.query(OutboundOrder)
        .filter(*order_scope)
        .order_by(OutboundOrder.created_at.desc())
        .limit(RECENT_CHARGES_LIMIT)
        .all()
    )

    return BillingSummaryResponse(
        currency=settings.CURRENCY,
        total_charges=_charges(db, order_scope),
        monthly_charges=_charges(db, [*order_scope, OutboundOrder.created_at >= start_of_month()]),
        total_orders=total_orders,
        recent_charges=[
            ChargeOut(
                order_id=o.id,
                order_number=o.order_number,
                status=o.status,
                handling_charges=float(o.handling_charges or 0),
                delivery_charges=float(o.delivery_charges or 0),
                total_charges=float(o.total_charges or 0),
                created_at=o.created_at,
            )
            for o in charges
        ],
    )

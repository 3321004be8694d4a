from datetime import datetime, time, timedelta
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.utils.date_utils import last_month_windows, start_of_month
from ...models.customers.customers import Customer
from ...models.inventory.inventory_items import InventoryItem
from ...models.orders.outbound_orders import OutboundOrder
from ...schemas.overview.dashboard_schemas import (
    CategoryQuantity, CountByLabel, MonthlyRevenue, ReportsOverviewResponse, ReportsRequest)
from ...enum.customers_enum import CustomerStatus

UNCATEGORIZED = "uncategorized"
REVENUE_MONTHS = 6


def build_order_date_filters(params: ReportsRequest):
    filters = []
    if params.date_from:
        filters.append(OutboundOrder.created_at >= datetime.combine(params.date_from, time.min))
    if params.date_to:
        # inclusive of the whole end day
        filters.append(OutboundOrder.created_at <
                       datetime.combine(params.date_to + timedelta(days=1), time.min))
    return filters


def sum_revenue(db: Session, filters: list) -> float:
    total = db.query(func.coalesce(func.sum(OutboundOrder.total_charges), 0)).filter(*filters).scalar()
    return float(total or 0)


def get_reports_overview(db: Session, params: ReportsRequest) -> ReportsOverviewResponse:
    order_filters = build_order_date_filters(params)

    monthly_orders = db.query(func.count(OutboundOrder.id)).filter(
        OutboundOrder.created_at >= start_of_month()).scalar() or 0

    inventory_value = db.query(
        func.coalesce(func.sum(InventoryItem.declared_value * InventoryItem.quantity), 0)
    ).scalar()

    active_customers = db.query(func.count(Customer.id)).filter(
        Customer.status == CustomerStatus.active.value).scalar() or 0

    status_rows = (
        db.query(OutboundOrder.status, func.count(OutboundOrder.id))
        .filter(*order_filters)
        .group_by(OutboundOrder.status)
        .order_by(OutboundOrder.status.asc())
        .all()
    )

    category_totals = {}
    for category, quantity in (
        db.query(InventoryItem.category, func.sum(InventoryItem.quantity))
        .group_by(InventoryItem.category)
        .all()
    ):
        key = category or UNCATEGORIZED
        category_totals[key] = category_totals.get(key, 0) + int(quantity or 0)

    revenue_by_month = [
        MonthlyRevenue(
            month=label,
            revenue=sum_revenue(db, [OutboundOrder.created_at >= start,
                                     OutboundOrder.created_at < end]),
        )
        for label, start, end in last_month_windows(REVENUE_MONTHS)
    ]

    return ReportsOverviewResponse(
        total_revenue=sum_revenue(db, order_filters),
        monthly_orders=monthly_orders,
        inventory_value=float(inventory_value or 0),
        active_customers=active_customers,
        orders_by_status=[CountByLabel(label=s, count=c) for s, c in status_rows],
        inventory_by_category=[
            CategoryQuantity(category=k, quantity=v) for k, v in sorted(category_totals.items())],
        revenue_by_month=revenue_by_month,
    )

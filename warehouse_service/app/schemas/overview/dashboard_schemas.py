from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel


class RecentOrderOut(BaseModel):
    id: UUID
    order_number: str
    customer_name: Optional[str] = None
    status: str
    total_charges: float = 0
    requested_date: Optional[date] = None
    created_at: Optional[datetime] = None


class AdminDashboardResponse(BaseModel):
    total_inventory_items: int
    total_customers: int
    pending_orders: int
    warehouse_capacity: float
    recent_orders: List[RecentOrderOut]


class CountByLabel(BaseModel):
    label: str
    count: int


class CategoryQuantity(BaseModel):
    category: str
    quantity: int


class MonthlyRevenue(BaseModel):
    month: str
    revenue: float


class ReportsRequest(EmptyStringModel):
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class ReportsOverviewResponse(BaseModel):
    total_revenue: float
    monthly_orders: int
    inventory_value: float
    active_customers: int
    orders_by_status: List[CountByLabel]
    inventory_by_category: List[CategoryQuantity]
    revenue_by_month: List[MonthlyRevenue]

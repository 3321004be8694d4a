from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from ..overview.dashboard_schemas import RecentOrderOut


class CustomerDashboardResponse(BaseModel):
    customer_id: UUID
    company_name: Optional[str] = None
    total_items: int
    pending_orders: int
    monthly_charges: float
    recent_orders: List[RecentOrderOut]


class ChargeOut(BaseModel):
    order_id: UUID
    order_number: str
    status: str
    handling_charges: float = 0
    delivery_charges: float = 0
    total_charges: float = 0
    created_at: Optional[datetime] = None


class BillingSummaryResponse(BaseModel):
    currency: str
    total_charges: float
    monthly_charges: float
    total_orders: int
    recent_charges: List[ChargeOut]

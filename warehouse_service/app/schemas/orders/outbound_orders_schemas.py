from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime
from shared.core.schemas import CommonQueryParams
from ...enum.orders_enum import OrderPriority, OrderStatus, OrderType

# ---------------- Line items ----------------


class OrderLineIn(BaseModel):
    inventory_item_id: UUID
    quantity: int = Field(..., ge=1)
    # stock seen when the line was picked; filled from inventory when omitted
    available_quantity: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None


class OrderLineOut(BaseModel):
    id: UUID
    inventory_item_id: UUID
    order_item: Optional[str] = None
    item_code: Optional[str] = None
    quantity: int
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


# ---------------- Order Request ----------------
class OutboundOrderRequest(CommonQueryParams):
    status: Optional[str] = None
    customer_id: Optional[UUID] = None


class AvailableInventoryRequest(BaseModel):
    customer_id: UUID
    warehouse_id: UUID


# ---------------- Order Create ----------------
class OutboundOrderCreate(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    customer_id: Optional[UUID] = None
    warehouse_id: Optional[UUID] = None
    order_type: OrderType = OrderType.delivery
    priority: OrderPriority = OrderPriority.normal
    requested_date: date
    scheduled_date: Optional[date] = None
    delivery_address_line1: Optional[str] = None
    delivery_address_line2: Optional[str] = None
    delivery_city: Optional[str] = None
    delivery_state: Optional[str] = None
    delivery_postal_code: Optional[str] = None
    delivery_country: Optional[str] = None
    delivery_contact_name: Optional[str] = None
    delivery_contact_phone: Optional[str] = None
    handling_charges: float = Field(0, ge=0)
    delivery_charges: float = Field(0, ge=0)
    notes: Optional[str] = None
    special_instructions: Optional[str] = None
    items: List[OrderLineIn] = []


class OrderStatusUpdate(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    status: OrderStatus


# ---------------- Order Output ----------------
class OutboundOrderOut(BaseModel):
    id: UUID
    order_number: str
    customer_id: UUID
    warehouse_id: UUID
    customer_name: Optional[str] = None
    warehouse_name: Optional[str] = None
    order_type: str
    priority: Optional[str] = None
    requested_date: date
    scheduled_date: Optional[date] = None
    completed_date: Optional[date] = None
    delivery_address_line1: Optional[str] = None
    delivery_address_line2: Optional[str] = None
    delivery_city: Optional[str] = None
    delivery_state: Optional[str] = None
    delivery_postal_code: Optional[str] = None
    delivery_country: Optional[str] = None
    delivery_contact_name: Optional[str] = None
    delivery_contact_phone: Optional[str] = None
    total_items: int = 0
    total_quantity: int = 0
    status: str
    handling_charges: float = 0
    delivery_charges: float = 0
    total_charges: float = 0
    notes: Optional[str] = None
    special_instructions: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class OutboundOrderDetailOut(OutboundOrderOut):
    items: List[OrderLineOut] = []
    customer_contact: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None


class OutboundOrderListResponse(BaseModel):
    orders: List[OutboundOrderOut]
    total: int


# ---------------- Wizard ----------------
class AvailableInventoryOut(BaseModel):
    id: UUID
    item_code: str
    item_name: str
    sku: Optional[str] = None
    quantity: int
    unit_of_measure: Optional[str] = None

    model_config = {"from_attributes": True}


class ReviewLineOut(BaseModel):
    inventory_item_id: UUID
    item_code: Optional[str] = None
    item_name: str
    quantity: int
    available_quantity: int


class OrderReviewResponse(BaseModel):
    stage: str
    customer_id: UUID
    warehouse_id: UUID
    items: List[ReviewLineOut]
    total_items: int
    total_quantity: int
    handling_charges: float
    delivery_charges: float
    total_charges: float

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime
from shared.core.schemas import CommonQueryParams
from ...enum.inventory_enum import (
    ArrivalCondition, CurrentCondition, DimensionUnit, InventoryStatus, ReceivedWindow, WeightUnit)

QUANTITY_EXCEEDS_TOTAL = "Quantity cannot exceed total quantity"


class InventoryItemBase(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    customer_id: UUID
    warehouse_id: UUID
    sku: Optional[str] = None
    item_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    unit_of_measure: str = "pcs"
    weight: Optional[float] = Field(None, ge=0)
    weight_unit: WeightUnit = WeightUnit.kg
    dimension_length: Optional[float] = Field(None, ge=0)
    dimension_width: Optional[float] = Field(None, ge=0)
    dimension_height: Optional[float] = Field(None, ge=0)
    dimension_unit: DimensionUnit = DimensionUnit.cm
    condition_on_arrival: ArrivalCondition = ArrivalCondition.good
    current_condition: CurrentCondition = CurrentCondition.good
    status: InventoryStatus = InventoryStatus.in_stock
    received_date: date
    barcode: Optional[str] = None
    qr_code: Optional[str] = None
    declared_value: Optional[float] = Field(None, ge=0)
    storage_rate: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


# ---------------- Inventory Request ----------------
class InventoryRequest(CommonQueryParams):
    status: Optional[str] = None
    category: Optional[str] = None
    customer_id: Optional[UUID] = None
    date_filter: Optional[ReceivedWindow] = None


# ---------------- Inventory Create/Update ----------------
class InventoryItemCreate(InventoryItemBase):
    item_code: str = Field(..., min_length=1, max_length=64)
    quantity: int = Field(..., ge=1)
    # defaults to quantity for a fresh receipt
    total_quantity: Optional[int] = Field(None, ge=0)

    @field_validator("total_quantity")
    @classmethod
    def check_quantity_within_total(cls, v: Optional[int], info: ValidationInfo):
        quantity = info.data.get("quantity")
        if v is not None and quantity is not None and quantity > v:
            raise ValueError(QUANTITY_EXCEEDS_TOTAL)
        return v

    @model_validator(mode="after")
    def default_total_quantity(self):
        if self.total_quantity is None:
            self.total_quantity = self.quantity
        return self


class InventoryItemUpdate(BaseModel):
    """Partial update; quantity <= total_quantity is re-checked on the merged record."""
    model_config = {"use_enum_values": True, "validate_default": True}

    item_name: Optional[str] = Field(None, min_length=1)
    sku: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    total_quantity: Optional[int] = Field(None, ge=0)
    unit_of_measure: Optional[str] = None
    weight: Optional[float] = Field(None, ge=0)
    weight_unit: Optional[WeightUnit] = None
    dimension_length: Optional[float] = Field(None, ge=0)
    dimension_width: Optional[float] = Field(None, ge=0)
    dimension_height: Optional[float] = Field(None, ge=0)
    dimension_unit: Optional[DimensionUnit] = None
    condition_on_arrival: Optional[ArrivalCondition] = None
    current_condition: Optional[CurrentCondition] = None
    status: Optional[InventoryStatus] = None
    received_date: Optional[date] = None
    barcode: Optional[str] = None
    qr_code: Optional[str] = None
    declared_value: Optional[float] = Field(None, ge=0)
    storage_rate: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    warehouse_id: Optional[UUID] = None

    @field_validator("total_quantity")
    @classmethod
    def check_quantity_within_total(cls, v: Optional[int], info: ValidationInfo):
        quantity = info.data.get("quantity")
        if v is not None and quantity is not None and quantity > v:
            raise ValueError(QUANTITY_EXCEEDS_TOTAL)
        return v


# ---------------- Inventory Output ----------------
class InventoryItemOut(BaseModel):
    id: UUID
    item_code: str
    customer_id: UUID
    warehouse_id: UUID
    customer_name: Optional[str] = None
    warehouse_name: Optional[str] = None
    sku: Optional[str] = None
    item_name: str
    description: Optional[str] = None
    category: Optional[str] = None
    quantity: int
    total_quantity: int
    unit_of_measure: Optional[str] = None
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    dimension_length: Optional[float] = None
    dimension_width: Optional[float] = None
    dimension_height: Optional[float] = None
    dimension_unit: Optional[str] = None
    condition_on_arrival: Optional[str] = None
    current_condition: Optional[str] = None
    status: str
    received_date: date
    barcode: Optional[str] = None
    qr_code: Optional[str] = None
    declared_value: Optional[float] = None
    storage_rate: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class InventoryListResponse(BaseModel):
    inventory_items: List[InventoryItemOut]
    total: int

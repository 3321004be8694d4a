from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from ...enum.warehouses_enum import CapacityUnit, WarehouseStatus


class WarehouseBase(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    warehouse_name: str = Field(..., min_length=1)
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = "Pakistan"
    total_capacity: Optional[float] = Field(None, ge=0)
    capacity_unit: CapacityUnit = CapacityUnit.sqft
    status: WarehouseStatus = WarehouseStatus.active


class WarehouseRequest(CommonQueryParams):
    status: Optional[str] = None


class WarehouseCreate(WarehouseBase):
    warehouse_code: str = Field(..., min_length=1, max_length=32)


class WarehouseUpdate(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    warehouse_name: Optional[str] = Field(None, min_length=1)
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    total_capacity: Optional[float] = Field(None, ge=0)
    capacity_unit: Optional[CapacityUnit] = None
    status: Optional[WarehouseStatus] = None


class WarehouseOut(BaseModel):
    id: UUID
    warehouse_code: str
    warehouse_name: str
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    total_capacity: Optional[float] = None
    capacity_unit: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class WarehouseListResponse(BaseModel):
    warehouses: List[WarehouseOut]
    total: int

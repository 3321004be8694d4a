from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from shared.core.schemas import CommonQueryParams
from shared.utils.enums import RoleName
from ...enum.customers_enum import CustomerStatus, CustomerType

# ---------------- Base Customer ----------------


class CustomerBase(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    company_name: Optional[str] = None
    customer_type: CustomerType
    contact_person: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    alternate_phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: str = "Pakistan"
    tax_id: Optional[str] = None
    credit_limit: float = Field(0, ge=0)
    payment_terms: Optional[str] = None
    status: CustomerStatus = CustomerStatus.active
    notes: Optional[str] = None


# ---------------- Customer Request ----------------
class CustomerRequest(CommonQueryParams):
    status: Optional[str] = None


# ---------------- Customer Create/Update ----------------
class CustomerCreate(CustomerBase):
    customer_code: str = Field(..., min_length=1, max_length=32)
    # optional portal login created together with the customer
    create_login: bool = False
    password: Optional[str] = None
    user_role: RoleName = RoleName.CUSTOMER_ADMIN

    @model_validator(mode="after")
    def check_login_password(self):
        if self.create_login and (not self.password or len(self.password) < 8):
            raise ValueError(
                "Password must be at least 8 characters when creating a login")
        return self


class CustomerUpdate(BaseModel):
    model_config = {"use_enum_values": True, "validate_default": True}

    # customer_code is fixed once created
    company_name: Optional[str] = None
    customer_type: Optional[CustomerType] = None
    contact_person: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1)
    alternate_phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    tax_id: Optional[str] = None
    credit_limit: Optional[float] = Field(None, ge=0)
    payment_terms: Optional[str] = None
    status: Optional[CustomerStatus] = None
    notes: Optional[str] = None


# ---------------- Customer Output ----------------
class CustomerOut(BaseModel):
    id: UUID
    customer_code: str
    company_name: Optional[str] = None
    customer_type: str
    contact_person: str
    email: str
    phone: str
    alternate_phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    tax_id: Optional[str] = None
    credit_limit: Optional[float] = None
    payment_terms: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class CustomerCreateResponse(CustomerOut):
    login_user_id: Optional[UUID] = None
    login_error: Optional[str] = None


class CustomerListResponse(BaseModel):
    customers: List[CustomerOut]
    total: int

    model_config = {"from_attributes": True}


class CustomerOverviewResponse(BaseModel):
    totalCustomers: int
    activeCustomers: int
    suspendedCustomers: int

    model_config = {"from_attributes": True}

from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

PROVISION_REQUIRED_FIELDS = ("email", "password", "customerId", "role")


class ProvisionUserRequest(BaseModel):
    # every field optional so the service can answer with its own 400 message
    email: Optional[str] = None
    password: Optional[str] = None
    customerId: Optional[UUID] = None
    role: Optional[str] = None
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    phone: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [name for name in PROVISION_REQUIRED_FIELDS if not getattr(self, name)]


class ProvisionedUser(BaseModel):
    id: str
    email: str


class ProvisionUserResponse(BaseModel):
    success: bool = True
    user: ProvisionedUser


class UserResponse(EmptyStringModel):
    id: UUID
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: str
    last_sign_in_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }


class RoleOut(EmptyStringModel):
    role: Optional[str] = None
    customer_id: Optional[UUID] = None

    model_config = {
        "from_attributes": True
    }

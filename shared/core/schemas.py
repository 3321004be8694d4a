from pydantic import BaseModel
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
from uuid import UUID

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

# Shared properties
T = TypeVar("T")


class UserToken(BaseModel):
    user_id: UUID
    session_id: UUID
    email: Optional[str] = None
    status: Optional[str] = None
    exp: Optional[int] = None


class AccessScope(BaseModel):
    """Role row resolved for the current caller on every request."""
    user_id: UUID
    role: Optional[str] = None
    customer_id: Optional[UUID] = None
    is_admin: bool = False
    is_customer: bool = False


class CommonQueryParams(EmptyStringModel):
    search: Optional[str] = None
    skip: Optional[int] = 0
    limit: Optional[int] = None


class Lookup(BaseModel):
    id: Union[str, UUID]  # accepts both UUID and str
    name: str

    class Config:
        from_attributes = True


class ExportResponse(BaseModel):
    filename: str
    data: List[Dict[str, Any]]

    class Config:
        from_attributes = True


class ExportRequestParams(EmptyStringModel):
    search: Optional[str] = None
    status: Optional[str] = None
    skip: Optional[int] = 0
    limit: Optional[int] = 1000


class JsonOutResult(EmptyStringModel, Generic[T]):
    data: Optional[T] = None
    status: str
    status_code: str
    message: str

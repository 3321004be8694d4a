from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from shared.core.auth import allow_admin
from shared.core.database import get_auth_db, get_warehouse_db
from shared.core.schemas import AccessScope
from ..schemas import userschema
from ..services import userservices

router = APIRouter(prefix="/api/functions", tags=["User Provisioning"])


@router.post("/create-customer-user", response_model=userschema.ProvisionUserResponse)
def create_customer_user(
        req: userschema.ProvisionUserRequest,
        auth_db: Session = Depends(get_auth_db),
        warehouse_db: Session = Depends(get_warehouse_db),
        _: AccessScope = Depends(allow_admin)):
    http_status, body = userservices.provision_user(auth_db, warehouse_db, req)
    return JSONResponse(status_code=http_status, content=body)

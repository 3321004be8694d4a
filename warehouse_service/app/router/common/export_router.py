from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.auth import allow_admin, validate_current_token
from shared.core.schemas import AccessScope, ExportRequestParams, ExportResponse
from ...crud.common import export_crud as crud


router = APIRouter(
    prefix="/api/export",
    tags=["Export"],
    dependencies=[Depends(validate_current_token)]
)


@router.get("/", response_model=ExportResponse)
def get_export_data(
        type: str,
        params: ExportRequestParams = Depends(),
        db: Session = Depends(get_db),
        scope: AccessScope = Depends(allow_admin)):
    return crud.get_export_data(db, scope, type, params)

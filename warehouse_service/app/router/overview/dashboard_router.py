from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.auth import allow_admin, validate_current_token
from shared.core.schemas import AccessScope
from ...crud.overview import dashboard_crud
from ...schemas.overview.dashboard_schemas import AdminDashboardResponse


router = APIRouter(prefix="/api/dashboard",
                   tags=["Dashboard"], dependencies=[Depends(validate_current_token)])


@router.get("/overview", response_model=AdminDashboardResponse)
def get_overview(
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return dashboard_crud.get_admin_dashboard(db)

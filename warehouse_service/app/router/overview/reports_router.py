from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from shared.core.database import get_warehouse_db as get_db
from shared.core.auth import allow_admin, validate_current_token
from shared.core.schemas import AccessScope
from ...crud.overview import reports_crud
from ...schemas.overview.dashboard_schemas import ReportsOverviewResponse, ReportsRequest


router = APIRouter(prefix="/api/reports",
                   tags=["Reports"], dependencies=[Depends(validate_current_token)])


@router.get("/overview", response_model=ReportsOverviewResponse)
def get_reports_overview(
    params: ReportsRequest = Depends(),
    db: Session = Depends(get_db),
    _: AccessScope = Depends(allow_admin)
):
    return reports_crud.get_reports_overview(db, params)

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from shared.core import auth
from shared.core.database import get_auth_db as get_db, get_warehouse_db
from shared.core.schemas import UserToken
from ..schemas import authschema
from ..services import authservices

router = APIRouter(prefix="/api/auth", tags=["Warehouse Auth"])


@router.post("/signin", response_model=authschema.AuthenticationResponse)
def signin(
        req: authschema.SignInRequest,
        request: Request,
        db: Session = Depends(get_db),
        warehouse_db: Session = Depends(get_warehouse_db)):
    return authservices.signin(request, db, warehouse_db, req)


@router.post("/signup", response_model=authschema.AuthenticationResponse)
def signup(
        req: authschema.SignUpRequest,
        request: Request,
        db: Session = Depends(get_db),
        warehouse_db: Session = Depends(get_warehouse_db)):
    return authservices.signup(request, db, warehouse_db, req)


@router.get("/session", response_model=authschema.SessionResponse)
def session(
        db: Session = Depends(get_db),
        warehouse_db: Session = Depends(get_warehouse_db),
        current_user: UserToken = Depends(auth.validate_current_token)):
    return authservices.get_session(db, warehouse_db, current_user)


@router.post("/refresh", response_model=authschema.TokenSuccessResponse)
def refresh_token(
        req: authschema.RefreshRequest,
        db: Session = Depends(get_db)):
    return authservices.refresh_access_token(db, req.refresh_token)


@router.post("/signout", response_model=authschema.MessageResponse)
def signout(
        db: Session = Depends(get_db),
        current_user: UserToken = Depends(auth.validate_current_token)):
    return authservices.logout_user(db, current_user)


@router.post("/forgot-password", response_model=authschema.MessageResponse)
def forgot_password(
        req: authschema.ForgotPasswordRequest,
        db: Session = Depends(get_db)):
    return authservices.forgot_password(db, req)


@router.post("/reset-password", response_model=authschema.MessageResponse)
def reset_password(
        req: authschema.ResetPasswordRequest,
        db: Session = Depends(get_db)):
    return authservices.reset_password(db, req)

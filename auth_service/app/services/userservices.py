import logging
from datetime import datetime, timezone
from typing import Tuple
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.config import settings
from shared.helpers.email_helper import EmailHelper
from shared.models.profiles import Profile
from shared.models.user_login_session import UserLoginSession
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.enums import RoleName
from ..schemas.authschema import AuthenticationResponse, SessionResponse
from ..schemas.userschema import (
    PROVISION_REQUIRED_FIELDS, ProvisionUserRequest, RoleOut, UserResponse)

logger = logging.getLogger(__name__)


# ---------------- Provisioning ----------------


def _db_error(e: Exception) -> str:
    return str(getattr(e, "orig", None) or e)


def _remove_identity(auth_db: Session, user_id):
    user = auth_db.query(Users).filter(Users.id == user_id).first()
    if user:
        auth_db.delete(user)
        auth_db.commit()


def _remove_profile(warehouse_db: Session, user_id):
    profile = warehouse_db.query(Profile).filter(Profile.id == user_id).first()
    if profile:
        warehouse_db.delete(profile)
        warehouse_db.commit()


def provision_user(auth_db: Session, warehouse_db: Session, req: ProvisionUserRequest) -> Tuple[int, dict]:
    """Create a login, its profile and its role row as one unit.

    The steps span two databases, so a failed step undoes the earlier ones
    by deleting what they wrote. Returns (http status, body).
    """
    if req.missing_fields():
        return 400, {"error": f"Missing required fields: {', '.join(PROVISION_REQUIRED_FIELDS)}"}

    # 1. auth identity, confirmed straight away
    if auth_db.query(Users).filter(Users.email == req.email).first():
        return 400, {"error": "A user with this email address has already been registered"}

    user = Users(
        email=req.email,
        first_name=req.firstName,
        last_name=req.lastName,
        status="active",
        email_confirmed_at=datetime.now(timezone.utc),
    )
    user.set_password(req.password)
    auth_db.add(user)
    try:
        auth_db.commit()
    except SQLAlchemyError as e:
        auth_db.rollback()
        return 400, {"error": _db_error(e)}
    user_id = user.id

    # 2. profile
    try:
        profile = warehouse_db.query(Profile).filter(Profile.id == user_id).first()
        if not profile:
            profile = Profile(id=user_id)
            warehouse_db.add(profile)
        profile.email = req.email
        profile.first_name = req.firstName
        profile.last_name = req.lastName
        profile.phone = req.phone
        profile.customer_id = req.customerId
        profile.status = "active"
        warehouse_db.commit()
    except SQLAlchemyError as e:
        warehouse_db.rollback()
        logger.error("Profile creation failed for %s, removing login: %s", req.email, _db_error(e))
        _remove_identity(auth_db, user_id)
        return 500, {"error": f"Profile creation failed: {_db_error(e)}"}

    # 3. role row
    try:
        if req.role not in {r.value for r in RoleName}:
            raise ValueError(f"Unknown role '{req.role}'")
        warehouse_db.add(UserRole(user_id=user_id, role=req.role, customer_id=req.customerId))
        warehouse_db.commit()
    except (SQLAlchemyError, ValueError) as e:
        warehouse_db.rollback()
        logger.error("Role assignment failed for %s, removing login and profile: %s",
                     req.email, _db_error(e))
        _remove_identity(auth_db, user_id)
        _remove_profile(warehouse_db, user_id)
        return 500, {"error": f"Role assignment failed: {_db_error(e)}"}

    logger.info("Provisioned %s user %s for customer %s", req.role, req.email, req.customerId)
    send_welcome_email(warehouse_db, profile, req.email)

    return 200, {"success": True, "user": {"id": str(user_id), "email": req.email}}


def send_welcome_email(warehouse_db: Session, profile: Profile, email: str):
    customer = profile.customer
    EmailHelper().send_email(
        template_code="customer_welcome",
        recipients=[email],
        subject="Your customer portal login",
        context={
            "name": profile.first_name or email,
            "company_name": customer.company_name if customer else "",
            "login_link": f"{settings.PORTAL_URL}/login",
            "email": email,
        },
    )


# ---------------- Tokens ----------------


def build_session_response(warehouse_db: Session, user: Users, response_cls=SessionResponse, **extra):
    role_row = auth.get_role_row(warehouse_db, user.id)
    scope = auth.build_access_scope(warehouse_db, user.id)
    return response_cls(
        user=UserResponse.model_validate(user),
        role=RoleOut.model_validate(role_row) if role_row else None,
        customer_id=scope.customer_id,
        is_admin=scope.is_admin,
        is_customer=scope.is_customer,
        redirect_to=auth.redirect_path(scope),
        **extra
    )


def get_user_token(request: Request, auth_db: Session, warehouse_db: Session, user: Users):
    session = UserLoginSession(
        user_id=user.id,
        ip_address=request.client.host if request and request.client else None,
        user_agent=request.headers.get("user-agent") if request else None,
    )
    auth_db.add(session)
    auth_db.commit()
    auth_db.refresh(session)

    token = auth.create_access_token({
        "user_id": str(user.id),
        "session_id": str(session.id),
        "email": user.email})

    refresh_token = auth.create_refresh_token(auth_db, session.id)

    return build_session_response(
        warehouse_db, user, AuthenticationResponse,
        access_token=token,
        refresh_token=refresh_token.token,
        token_type="bearer"
    )

from datetime import datetime, timedelta, timezone
import logging
import secrets
from typing import Optional
from uuid import UUID
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy import case
from sqlalchemy.orm import Session

from shared.models.refresh_token import RefreshToken
from shared.models.user_login_session import UserLoginSession
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.enums import PortalRedirect, RoleName
from shared.core.config import settings
from shared.helpers.json_response_helper import error_response
from shared.core.schemas import AccessScope, UserToken
from shared.core.database import get_auth_db as get_db, get_warehouse_db

logger = logging.getLogger(__name__)

security = HTTPBearer()


def create_access_token(data: dict):
    payload = data.copy()
    expires = datetime.now(timezone.utc) + \
        timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires

    return jwt.encode(payload, settings.JWT_SECRET,
                      algorithm=settings.JWT_ALGORITHM)


def create_refresh_token(db: Session, session_id: UUID):
    session = db.query(UserLoginSession).filter(
        UserLoginSession.id == session_id).first()

    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Login session not found."
        )

    existing = (
        db.query(RefreshToken)
        .filter(RefreshToken.session_id == session.id, RefreshToken.revoked == False)
        .first()
    )

    if existing:
        return existing

    expires = datetime.now(timezone.utc) + \
        timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS)

    refresh = RefreshToken(
        session_id=session.id,
        token=secrets.token_urlsafe(64),
        expires_at=expires
    )
    db.add(refresh)
    db.commit()
    db.refresh(refresh)

    return refresh


def verify_token(db: Session, token: str) -> UserToken:
    """Verify and decode a JWT token bound to an active login session."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        user = UserToken(**payload)
    except JWTError:
        return error_response(
            message="Invalid or expired token",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_EXPIRED),
            http_status=status.HTTP_401_UNAUTHORIZED
        )
    except ValidationError:
        return error_response(
            message="Invalid token structure",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    session = db.query(UserLoginSession).filter(
        UserLoginSession.id == user.session_id,
        UserLoginSession.user_id == user.user_id
    ).first()

    if not session or not session.is_active:
        return error_response(
            message="Session has been logged out or is inactive",
            status_code=str(AppStatusCode.AUTHENTICATION_SESSION_TIMEOUT),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    return user


def validate_current_token(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    user_data = verify_token(db, credentials.credentials)

    user = db.query(Users).filter(Users.id == user_data.user_id).first()

    if not user:
        return error_response(
            message="User not found",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INVALID),
            http_status=404
        )

    if user.status.lower() != "active":
        return error_response(
            message="User is not active. Access denied",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INACTIVE),
            http_status=403
        )

    user_data.status = user.status
    user_data.email = user.email
    return user_data


# ---------------- Roles ----------------


def get_role_row(db: Session, user_id: UUID) -> Optional[UserRole]:
    """The caller's role row, or None when the user has none.

    A user holding both roles is treated as super_admin.
    """
    priority = case((UserRole.role == RoleName.SUPER_ADMIN.value, 0), else_=1)
    return (
        db.query(UserRole)
        .filter(UserRole.user_id == user_id)
        .order_by(priority)
        .first()
    )


def build_access_scope(db: Session, user_id: UUID) -> AccessScope:
    role_row = get_role_row(db, user_id)
    role = role_row.role if role_row else None
    return AccessScope(
        user_id=user_id,
        role=role,
        customer_id=role_row.customer_id if role_row else None,
        is_admin=role == RoleName.SUPER_ADMIN.value,
        is_customer=role == RoleName.CUSTOMER_ADMIN.value,
    )


def redirect_path(scope: AccessScope) -> str:
    if scope.is_admin:
        return PortalRedirect.ADMIN.value
    if scope.is_customer:
        return PortalRedirect.CUSTOMER.value
    return PortalRedirect.LOGIN.value


def get_access_scope(
    current_user: UserToken = Depends(validate_current_token),
    db: Session = Depends(get_warehouse_db)
) -> AccessScope:
    return build_access_scope(db, current_user.user_id)


def allow_admin(scope: AccessScope = Depends(get_access_scope)) -> AccessScope:
    if not scope.is_admin:
        logger.info("Admin route refused for user %s (role=%s)",
                    scope.user_id, scope.role)
        return error_response(
            message="Access forbidden: Admins only",
            status_code=str(AppStatusCode.AUTHENTICATION_UNAUTHORIZED_ACCESS),
            http_status=403
        )

    return scope


def allow_customer(scope: AccessScope = Depends(get_access_scope)) -> AccessScope:
    if not scope.is_customer:
        logger.info("Customer portal refused for user %s (role=%s)",
                    scope.user_id, scope.role)
        return error_response(
            message="Access forbidden: Customer accounts only",
            status_code=str(AppStatusCode.AUTHENTICATION_UNAUTHORIZED_ACCESS),
            http_status=403
        )

    return scope


def scope_filters(customer_column, scope: AccessScope) -> list:
    """Row scoping for customer callers; admins see every customer's rows."""
    if scope.is_admin:
        return []
    # a customer role without a linked customer matches nothing
    return [customer_column == scope.customer_id]

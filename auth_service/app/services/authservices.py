import logging
import secrets
from datetime import datetime, timedelta, timezone
from fastapi import Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core import auth
from shared.core.config import settings
from shared.core.schemas import UserToken
from shared.helpers.email_helper import EmailHelper
from shared.helpers.json_response_helper import error_response
from shared.models.password_reset_token import PasswordResetToken
from shared.models.profiles import Profile
from shared.models.refresh_token import RefreshToken
from shared.models.user_login_session import UserLoginSession
from shared.models.users import Users
from shared.utils.app_status_code import AppStatusCode
from shared.utils.date_utils import as_utc
from shared.utils.enums import UserStatus
from ..schemas import authschema
from ..services import userservices

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = "If an account exists for this email, a reset link has been sent"


#### EMAIL & PASSWORD AUTHENTICATION ###


def signin(
        request: Request,
        db: Session,
        warehouse_db: Session,
        req: authschema.SignInRequest):
    user = db.query(Users).filter(Users.email == req.email).first()

    if not user or not user.verify_password(req.password):
        logger.info("Failed sign in for %s", req.email)
        return error_response(
            message="Invalid email or password",
            status_code=str(AppStatusCode.AUTHENTICATION_CREDENTIALS_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    if user.status != UserStatus.ACTIVE.value:
        return error_response(
            message="User is not active. Access denied",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INACTIVE),
            http_status=status.HTTP_403_FORBIDDEN
        )

    now = datetime.now(timezone.utc)
    user.last_sign_in_at = now
    db.commit()

    profile = warehouse_db.query(Profile).filter(Profile.id == user.id).first()
    if profile:
        profile.last_login = now
        warehouse_db.commit()

    return userservices.get_user_token(request, db, warehouse_db, user)


def signup(
        request: Request,
        db: Session,
        warehouse_db: Session,
        req: authschema.SignUpRequest):
    if db.query(Users).filter(Users.email == req.email).first():
        return error_response(
            message=f"Email '{req.email}' is already registered.",
            status_code=str(AppStatusCode.USER_USERNAME_IS_UNIQUE),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    user = Users(
        email=req.email,
        first_name=req.first_name,
        last_name=req.last_name,
        status=UserStatus.ACTIVE.value,
    )
    user.set_password(req.password)
    db.add(user)
    db.commit()
    db.refresh(user)

    try:
        warehouse_db.add(Profile(
            id=user.id,
            email=user.email,
            first_name=req.first_name,
            last_name=req.last_name,
            phone=req.phone,
        ))
        warehouse_db.commit()
    except SQLAlchemyError:
        warehouse_db.rollback()
        db.delete(user)
        db.commit()
        logger.exception("Profile creation failed during sign up for %s", req.email)
        return error_response(
            message="Error creating profile",
            status_code=str(AppStatusCode.OPERATION_ERROR),
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    # new accounts carry no role until an admin grants one
    return userservices.get_user_token(request, db, warehouse_db, user)


def get_session(db: Session, warehouse_db: Session, current_user: UserToken):
    user = db.query(Users).filter(Users.id == current_user.user_id).first()
    return userservices.build_session_response(warehouse_db, user)


def refresh_access_token(db: Session, refresh_token_str: str):
    token = (
        db.query(RefreshToken)
        .filter_by(token=refresh_token_str, revoked=False)
        .first()
    )

    now = datetime.now(timezone.utc)

    if not token or as_utc(token.expires_at) < now:
        return error_response(
            message="Invalid or expired refresh token",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    session = token.session
    if not session.is_active:
        return error_response(
            message="Session inactive",
            status_code=str(AppStatusCode.AUTHENTICATION_UNAUTHORIZED_ACCESS),
            http_status=status.HTTP_401_UNAUTHORIZED
        )

    user = db.query(Users).filter(Users.id == session.user_id).first()
    if not user:
        return error_response(
            message="User not found",
            status_code=str(AppStatusCode.AUTHENTICATION_USER_INVALID),
            http_status=status.HTTP_404_NOT_FOUND
        )

    # Invalidate old refresh token
    token.revoked = True
    db.commit()

    new_access_token = auth.create_access_token({
        "user_id": str(user.id),
        "session_id": str(session.id),
        "email": user.email})
    new_refresh = auth.create_refresh_token(db, session.id)

    return {
        "access_token": new_access_token,
        "refresh_token": new_refresh.token,
        "token_type": "bearer"
    }


def logout_user(db: Session, current_user: UserToken):
    session = db.query(UserLoginSession).filter(
        UserLoginSession.id == current_user.session_id,
        UserLoginSession.user_id == current_user.user_id
    ).first()

    if not session:
        return error_response(
            message="Active session not found.",
            status_code=str(AppStatusCode.AUTHENTICATION_TOKEN_INVALID),
            http_status=status.HTTP_404_NOT_FOUND
        )

    for token in session.refresh_tokens:
        token.revoked = True
    session.is_active = False
    session.logged_out_at = datetime.now(timezone.utc)
    db.commit()

    return {"message": "Logged out successfully"}


#### PASSWORD RECOVERY ###


def forgot_password(db: Session, req: authschema.ForgotPasswordRequest):
    user = db.query(Users).filter(Users.email == req.email).first()

    if user:
        reset = PasswordResetToken(
            user_id=user.id,
            token=secrets.token_urlsafe(48),
            expires_at=datetime.now(timezone.utc) +
            timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)
        )
        db.add(reset)
        db.commit()

        EmailHelper().send_email(
            template_code="password_reset",
            recipients=[user.email],
            subject="Reset your password",
            context={
                "name": user.first_name or user.email,
                "reset_link": f"{settings.PORTAL_URL}/reset-password?token={reset.token}",
                "expires_minutes": settings.PASSWORD_RESET_EXPIRE_MINUTES,
            },
        )
    else:
        logger.info("Password reset requested for unknown email %s", req.email)

    # same answer either way so accounts cannot be enumerated
    return {"message": FORGOT_PASSWORD_MESSAGE}


def reset_password(db: Session, req: authschema.ResetPasswordRequest):
    reset = db.query(PasswordResetToken).filter(
        PasswordResetToken.token == req.token).first()

    if not reset or reset.used or as_utc(reset.expires_at) < datetime.now(timezone.utc):
        return error_response(
            message="Reset link is invalid or has expired",
            status_code=str(AppStatusCode.AUTHENTICATION_RESET_TOKEN_INVALID),
            http_status=status.HTTP_400_BAD_REQUEST
        )

    reset.user.set_password(req.password)
    reset.used = True
    db.commit()
    logger.info("Password reset for user %s", reset.user_id)

    return {"message": "Password has been reset"}

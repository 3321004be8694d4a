import uuid
from sqlalchemy import Column, String, Boolean, ForeignKey, TIMESTAMP, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import AuthBase


class RefreshToken(AuthBase):
    __tablename__ = "refresh_tokens"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, ForeignKey(
        "user_login_sessions.id", ondelete="CASCADE"))
    token = Column(String(512), nullable=False, unique=True)
    expires_at = Column(TIMESTAMP(timezone=True), nullable=False)
    revoked = Column(Boolean, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    session = relationship("UserLoginSession", back_populates="refresh_tokens")

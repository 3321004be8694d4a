import uuid
from sqlalchemy import Column, String, Boolean, ForeignKey, TIMESTAMP, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import AuthBase


class PasswordResetToken(AuthBase):
    """Single-use token behind the emailed recovery link."""
    __tablename__ = "password_reset_tokens"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey(
        "users.id", ondelete="CASCADE"), nullable=False)
    token = Column(String(128), nullable=False, unique=True, index=True)
    expires_at = Column(TIMESTAMP(timezone=True), nullable=False)
    used = Column(Boolean, default=False)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    user = relationship("Users", backref="password_reset_tokens")

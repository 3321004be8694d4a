import uuid
from sqlalchemy import TIMESTAMP, Column, ForeignKey, String, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship

from shared.core.database import Base


class UserRole(Base):
    __tablename__ = "user_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_roles_user_role"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    role = Column(String(32), nullable=False)  # super_admin | customer_admin
    customer_id = Column(Uuid, ForeignKey(
        "customers.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    customer = relationship("Customer", back_populates="user_roles")

from sqlalchemy import TIMESTAMP, Column, ForeignKey, String, Uuid, func
from sqlalchemy.orm import relationship

from shared.core.database import Base


class Profile(Base):
    """Warehouse-side record of a login, keyed by the auth user id."""
    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True)
    email = Column(String(200), nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    phone = Column(String(50))
    customer_id = Column(Uuid, ForeignKey(
        "customers.id", ondelete="SET NULL"), nullable=True)
    status = Column(String(16), default="active")
    last_login = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="profiles")

import uuid
from sqlalchemy import Column, DateTime, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_code = Column(String(32), unique=True, nullable=False, index=True)
    company_name = Column(String(200))
    customer_type = Column(String(16), nullable=False, default="business")
    contact_person = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False)
    alternate_phone = Column(String(50))
    address_line1 = Column(String(255))
    address_line2 = Column(String(255))
    city = Column(String(100))
    state = Column(String(100))
    postal_code = Column(String(20))
    country = Column(String(100), default="Pakistan")
    tax_id = Column(String(64))
    credit_limit = Column(Numeric(12, 2), default=0)
    payment_terms = Column(String(100))
    status = Column(String(16), nullable=False, default="active")
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    # hard delete takes the customer's stock, orders and roles with it
    inventory_items = relationship(
        "InventoryItem", back_populates="customer", cascade="all, delete")
    outbound_orders = relationship(
        "OutboundOrder", back_populates="customer", cascade="all, delete")
    user_roles = relationship(
        "UserRole", back_populates="customer", cascade="all, delete")
    profiles = relationship(
        "Profile", back_populates="customer", passive_deletes=True)

import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class OutboundOrder(Base):
    __tablename__ = "outbound_orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_number = Column(String(32), unique=True, nullable=False, index=True)
    customer_id = Column(Uuid, ForeignKey(
        "customers.id", ondelete="CASCADE"), nullable=False, index=True)
    warehouse_id = Column(Uuid, ForeignKey(
        "warehouses.id", ondelete="CASCADE"), nullable=False, index=True)
    order_type = Column(String(32), nullable=False, default="delivery")
    priority = Column(String(16), default="normal")
    requested_date = Column(Date, nullable=False)
    scheduled_date = Column(Date)
    completed_date = Column(Date)
    delivery_address_line1 = Column(String(255))
    delivery_address_line2 = Column(String(255))
    delivery_city = Column(String(100))
    delivery_state = Column(String(100))
    delivery_postal_code = Column(String(20))
    delivery_country = Column(String(100))
    delivery_contact_name = Column(String(200))
    delivery_contact_phone = Column(String(50))
    total_items = Column(Integer, default=0)
    total_quantity = Column(Integer, default=0)
    status = Column(String(16), nullable=False, default="pending")
    handling_charges = Column(Numeric(10, 2), default=0)
    delivery_charges = Column(Numeric(10, 2), default=0)
    total_charges = Column(Numeric(10, 2), default=0)
    notes = Column(Text)
    special_instructions = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="outbound_orders")
    warehouse = relationship("Warehouse", back_populates="outbound_orders")
    items = relationship(
        "OutboundOrderItem", back_populates="order", cascade="all, delete")

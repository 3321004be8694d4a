import uuid
from sqlalchemy import Column, DateTime, Numeric, String, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Warehouse(Base):
    __tablename__ = "warehouses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    warehouse_code = Column(String(32), unique=True, nullable=False, index=True)
    warehouse_name = Column(String(200), nullable=False)
    address_line1 = Column(String(255))
    address_line2 = Column(String(255))
    city = Column(String(100))
    state = Column(String(100))
    postal_code = Column(String(20))
    country = Column(String(100), default="Pakistan")
    total_capacity = Column(Numeric(12, 2))
    capacity_unit = Column(String(8), default="sqft")
    status = Column(String(16), nullable=False, default="active")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    inventory_items = relationship(
        "InventoryItem", back_populates="warehouse", cascade="all, delete")
    outbound_orders = relationship(
        "OutboundOrder", back_populates="warehouse", cascade="all, delete")

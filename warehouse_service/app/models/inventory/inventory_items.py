import uuid
from sqlalchemy import CheckConstraint, Column, Date, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_items_quantity"),
        CheckConstraint("quantity <= total_quantity",
                        name="ck_inventory_items_quantity_le_total"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    item_code = Column(String(64), unique=True, nullable=False, index=True)
    customer_id = Column(Uuid, ForeignKey(
        "customers.id", ondelete="CASCADE"), nullable=False, index=True)
    warehouse_id = Column(Uuid, ForeignKey(
        "warehouses.id", ondelete="CASCADE"), nullable=False, index=True)
    sku = Column(String(64))
    item_name = Column(String(200), nullable=False)
    description = Column(Text)
    category = Column(String(100))
    quantity = Column(Integer, nullable=False, default=0)
    total_quantity = Column(Integer, nullable=False, default=0)
    unit_of_measure = Column(String(16), default="pcs")
    weight = Column(Numeric(10, 2))
    weight_unit = Column(String(8), default="kg")
    dimension_length = Column(Numeric(10, 2))
    dimension_width = Column(Numeric(10, 2))
    dimension_height = Column(Numeric(10, 2))
    dimension_unit = Column(String(8), default="cm")
    condition_on_arrival = Column(String(32), default="good")
    current_condition = Column(String(32), default="good")
    status = Column(String(16), nullable=False, default="in_stock")
    received_date = Column(Date, nullable=False)
    barcode = Column(String(128), unique=True)
    qr_code = Column(String(255), unique=True)
    declared_value = Column(Numeric(12, 2))
    storage_rate = Column(Numeric(10, 2))
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    customer = relationship("Customer", back_populates="inventory_items")
    warehouse = relationship("Warehouse", back_populates="inventory_items")
    order_lines = relationship(
        "OutboundOrderItem", back_populates="inventory_item", cascade="all, delete")

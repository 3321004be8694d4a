import uuid
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class OutboundOrderItem(Base):
    __tablename__ = "outbound_order_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_outbound_order_items_quantity"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    outbound_order_id = Column(Uuid, ForeignKey(
        "outbound_orders.id", ondelete="CASCADE"), nullable=False, index=True)
    inventory_item_id = Column(Uuid, ForeignKey(
        "inventory_items.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    order_item = Column(String(200))  # item name at the time of ordering
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    order = relationship("OutboundOrder", back_populates="items")
    inventory_item = relationship("InventoryItem", back_populates="order_lines")

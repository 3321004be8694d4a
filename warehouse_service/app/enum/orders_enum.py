from enum import Enum


class OrderStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    picking = "picking"
    packed = "packed"
    ready = "ready"
    in_transit = "in_transit"
    delivered = "delivered"
    completed = "completed"
    cancelled = "cancelled"


class OrderType(str, Enum):
    pickup = "pickup"
    delivery = "delivery"
    return_to_customer = "return_to_customer"


class OrderPriority(str, Enum):
    normal = "normal"
    high = "high"
    urgent = "urgent"


class WizardStage(str, Enum):
    details = "details"
    items = "items"
    review = "review"

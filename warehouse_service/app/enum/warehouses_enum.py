from enum import Enum


class WarehouseStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    maintenance = "maintenance"


class CapacityUnit(str, Enum):
    sqft = "sqft"
    sqm = "sqm"
    cbm = "cbm"
    cbft = "cbft"

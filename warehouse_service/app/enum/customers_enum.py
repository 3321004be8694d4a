from enum import Enum


class CustomerType(str, Enum):
    individual = "individual"
    business = "business"


class CustomerStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    suspended = "suspended"

from enum import Enum


class RoleName(str, Enum):
    SUPER_ADMIN = "super_admin"
    CUSTOMER_ADMIN = "customer_admin"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class PortalRedirect(str, Enum):
    ADMIN = "/admin/dashboard"
    CUSTOMER = "/customer/dashboard"
    LOGIN = "/login"

from enum import Enum


class InventoryStatus(str, Enum):
    in_stock = "in_stock"
    reserved = "reserved"
    shipped = "shipped"
    damaged = "damaged"


class ArrivalCondition(str, Enum):
    good = "good"
    damaged = "damaged"
    requires_inspection = "requires_inspection"


class CurrentCondition(str, Enum):
    good = "good"
    damaged = "damaged"
    deteriorated = "deteriorated"


class WeightUnit(str, Enum):
    kg = "kg"
    lbs = "lbs"
    g = "g"


class DimensionUnit(str, Enum):
    cm = "cm"
    inch = "inch"
    m = "m"
    ft = "ft"


class ReceivedWindow(str, Enum):
    all = "all"
    today = "today"
    week = "week"
    month = "month"

from datetime import datetime
from sqlalchemy.orm import Session

from shared.core.schemas import AccessScope, ExportRequestParams, ExportResponse
from shared.exporthelper import export_rows
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ..inventory import inventory_items_crud
from ..orders import outbound_orders_crud
from ...schemas.inventory.inventory_items_schemas import InventoryRequest
from ...schemas.orders.outbound_orders_schemas import OutboundOrderRequest

INVENTORY_COLUMNS = {
    "item_code": "Item Code",
    "item_name": "Item Name",
    "customer_name": "Customer",
    "warehouse_name": "Warehouse",
    "category": "Category",
    "quantity": "Quantity",
    "total_quantity": "Total Quantity",
    "unit_of_measure": "Unit",
    "status": "Status",
    "received_date": "Received Date",
    "declared_value": "Declared Value",
}

ORDER_COLUMNS = {
    "order_number": "Order Number",
    "customer_name": "Customer",
    "warehouse_name": "Warehouse",
    "order_type": "Type",
    "priority": "Priority",
    "status": "Status",
    "requested_date": "Requested Date",
    "total_items": "Items",
    "total_quantity": "Quantity",
    "total_charges": "Total Charges",
}


def get_export_data(db: Session, scope: AccessScope, type: str, params: ExportRequestParams) -> ExportResponse:
    if type == "inventory":
        listing = inventory_items_crud.get_inventory_items(
            db, InventoryRequest(search=params.search, status=params.status,
                                 skip=params.skip, limit=params.limit), scope)
        rows = [row.model_dump(mode="json") for row in listing.inventory_items]
        column_map = INVENTORY_COLUMNS
    elif type == "orders":
        listing = outbound_orders_crud.get_orders(
            db, OutboundOrderRequest(search=params.search, status=params.status,
                                     skip=params.skip, limit=params.limit), scope)
        rows = [row.model_dump(mode="json") for row in listing.orders]
        column_map = ORDER_COLUMNS
    else:
        return error_response(
            message=f"Unknown export type: {type}",
            status_code=str(AppStatusCode.INVALID_INPUT),
            http_status=400
        )

    filename = f"{type}_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    return export_rows(rows, filename, column_map)

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import warehouse_engine, Base
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from shared.models import profiles, user_roles
from .models.customers import customers
from .models.warehouses import warehouses
from .models.inventory import inventory_items
from .models.orders import outbound_orders, outbound_order_items
from .router.customers import customer_router
from .router.warehouses import warehouse_router
from .router.inventory import inventory_items_router
from .router.orders import outbound_orders_router
from .router.overview import dashboard_router, reports_router
from .router.portal import customer_portal_router
from .router.common import export_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Warehouse Service API")

# Create all tables
Base.metadata.create_all(bind=warehouse_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(JsonResponseMiddleware)

setup_exception_handlers(app)

# Include routers
app.include_router(customer_router.router)
app.include_router(warehouse_router.router)
app.include_router(inventory_items_router.router)
app.include_router(outbound_orders_router.router)
app.include_router(dashboard_router.router)
app.include_router(reports_router.router)
app.include_router(customer_portal_router.router)
app.include_router(export_router.router)


@app.get("/api/health")
def health():
    return {"status": "healthy"}

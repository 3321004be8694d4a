import logging
import random
from datetime import date, timedelta
from faker import Faker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from shared.core.database import WarehouseSessionLocal, warehouse_engine, Base
from shared.models import profiles, user_roles
from warehouse_service.app.models.customers.customers import Customer
from warehouse_service.app.models.warehouses.warehouses import Warehouse
from warehouse_service.app.models.inventory.inventory_items import InventoryItem
from warehouse_service.app.models.orders import outbound_orders, outbound_order_items
from warehouse_service.app.enum.customers_enum import CustomerType
from warehouse_service.app.enum.inventory_enum import InventoryStatus

logger = logging.getLogger(__name__)

# Create tables
Base.metadata.create_all(bind=warehouse_engine)

fake = Faker()

CATEGORIES = ["Electronics", "Furniture", "Apparel", "Documents", "Household", "Machinery"]


def seed_data(customers: int = 10, warehouses: int = 3, items_per_customer: int = 8):
    db: Session = WarehouseSessionLocal()
    try:
        warehouse_rows = []
        for index in range(1, warehouses + 1):
            warehouse = Warehouse(
                warehouse_code=f"WH-{index:03d}",
                warehouse_name=f"{fake.city()} Warehouse",
                address_line1=fake.street_address(),
                city=fake.city(),
                state=fake.state(),
                postal_code=fake.postcode(),
                total_capacity=round(random.uniform(5000, 50000), 2),
            )
            db.add(warehouse)
            warehouse_rows.append(warehouse)
        db.flush()

        for index in range(1, customers + 1):
            customer = Customer(
                customer_code=f"CUST-{index:04d}",
                company_name=fake.company(),
                customer_type=random.choice([t.value for t in CustomerType]),
                contact_person=fake.name(),
                email=fake.company_email(),
                phone=fake.phone_number(),
                address_line1=fake.street_address(),
                city=fake.city(),
                postal_code=fake.postcode(),
                credit_limit=round(random.uniform(1000, 20000), 2),
                payment_terms=random.choice(["Net 15", "Net 30", "Prepaid"]),
            )
            db.add(customer)
            db.flush()

            for item_index in range(1, items_per_customer + 1):
                total = random.randint(1, 200)
                db.add(InventoryItem(
                    item_code=f"ITM-{index:04d}-{item_index:03d}",
                    customer_id=customer.id,
                    warehouse_id=random.choice(warehouse_rows).id,
                    item_name=fake.catch_phrase(),
                    category=random.choice(CATEGORIES),
                    quantity=random.randint(0, total),
                    total_quantity=total,
                    status=InventoryStatus.in_stock.value,
                    received_date=date.today() - timedelta(days=random.randint(0, 90)),
                    declared_value=round(random.uniform(50, 5000), 2),
                    storage_rate=round(random.uniform(1, 25), 2),
                ))

        db.commit()
        logger.info("Seeded %s warehouses and %s customers", warehouses, customers)

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error seeding data")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_data()

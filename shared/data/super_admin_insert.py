import logging
from datetime import datetime, timezone
from shared.core.config import settings
from shared.core.database import (
    AuthBase, AuthSessionLocal, Base, WarehouseSessionLocal, auth_engine, warehouse_engine)
from shared.models import user_login_session, refresh_token, password_reset_token
from shared.models.profiles import Profile
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.enums import RoleName
from warehouse_service.app.models.customers import customers
from warehouse_service.app.models.warehouses import warehouses
from warehouse_service.app.models.inventory import inventory_items
from warehouse_service.app.models.orders import outbound_orders, outbound_order_items

logger = logging.getLogger(__name__)


def create_super_admin():
    if not settings.SUPER_ADMIN_PASSWORD:
        raise SystemExit("SUPER_ADMIN_PASSWORD must be set")

    AuthBase.metadata.create_all(bind=auth_engine)
    Base.metadata.create_all(bind=warehouse_engine)

    db = AuthSessionLocal()
    warehouse_db = WarehouseSessionLocal()

    try:
        # Check if super admin already exists
        super_admin = db.query(Users).filter(
            Users.email == settings.SUPER_ADMIN_EMAIL).first()

        if super_admin:
            logger.info("Super Admin already exists: %s", super_admin.email)
        else:
            super_admin = Users(
                email=settings.SUPER_ADMIN_EMAIL,
                first_name="Super",
                last_name="Admin",
                status="active",
                email_confirmed_at=datetime.now(timezone.utc),
            )
            super_admin.set_password(settings.SUPER_ADMIN_PASSWORD)
            db.add(super_admin)
            db.commit()
            db.refresh(super_admin)
            logger.info("Super Admin created: %s", super_admin.email)

        if not warehouse_db.query(Profile).filter(Profile.id == super_admin.id).first():
            warehouse_db.add(Profile(
                id=super_admin.id,
                email=super_admin.email,
                first_name=super_admin.first_name,
                last_name=super_admin.last_name,
            ))

        has_role = warehouse_db.query(UserRole).filter(
            UserRole.user_id == super_admin.id,
            UserRole.role == RoleName.SUPER_ADMIN.value
        ).first()
        if not has_role:
            warehouse_db.add(UserRole(user_id=super_admin.id, role=RoleName.SUPER_ADMIN.value))

        warehouse_db.commit()

    except Exception:
        db.rollback()
        warehouse_db.rollback()
        logger.exception("Error creating Super Admin")
        raise

    finally:
        db.close()
        warehouse_db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_super_admin()

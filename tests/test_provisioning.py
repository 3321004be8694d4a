import uuid

import pytest

from conftest import bearer_headers, create_user
from shared.models.profiles import Profile
from shared.models.user_roles import UserRole
from shared.models.users import Users
from shared.utils.enums import RoleName

URL = "/api/functions/create-customer-user"


def provision_payload(customer_id, **overrides):
    payload = {
        "email": "buyer@example.com",
        "password": "Welcome123",
        "customerId": str(customer_id),
        "role": RoleName.CUSTOMER_ADMIN.value,
        "firstName": "Bea",
        "lastName": "Buyer",
        "phone": "0300000000",
    }
    payload.update(overrides)
    return payload


def test_provision_success(auth_client, admin_headers, auth_db, db, customer):
    resp = auth_client.post(URL, json=provision_payload(customer.id), headers=admin_headers)

    assert resp.status_code == 200
    body = resp.json()
    # not wrapped in the standard envelope
    assert body["success"] is True
    assert body["user"]["email"] == "buyer@example.com"

    user_id = uuid.UUID(body["user"]["id"])
    user = auth_db.get(Users, user_id)
    assert user.email_confirmed_at is not None
    assert user.verify_password("Welcome123")

    profile = db.get(Profile, user_id)
    assert profile.customer_id == customer.id
    assert profile.first_name == "Bea"
    role = db.query(UserRole).filter(UserRole.user_id == user_id).one()
    assert role.role == RoleName.CUSTOMER_ADMIN.value
    assert role.customer_id == customer.id


@pytest.mark.parametrize("missing", ["email", "password", "customerId", "role"])
def test_missing_required_field(auth_client, admin_headers, customer, missing):
    payload = provision_payload(customer.id)
    payload.pop(missing)

    resp = auth_client.post(URL, json=payload, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing required fields: email, password, customerId, role"}


def test_existing_email_is_rejected(auth_client, admin_headers, auth_db, db, customer):
    create_user(auth_db, db, "buyer@example.com")

    resp = auth_client.post(URL, json=provision_payload(customer.id), headers=admin_headers)

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_profile_failure_removes_identity(auth_client, admin_headers, auth_db, db):
    resp = auth_client.post(URL, json=provision_payload(uuid.uuid4()), headers=admin_headers)

    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Profile creation failed:")
    auth_db.expire_all()
    assert auth_db.query(Users).filter(Users.email == "buyer@example.com").count() == 0


def test_role_failure_removes_identity_and_profile(auth_client, admin_headers, auth_db, db, customer):
    resp = auth_client.post(URL, json=provision_payload(customer.id, role="owner"),
                            headers=admin_headers)

    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Role assignment failed:")
    auth_db.expire_all()
    assert auth_db.query(Users).filter(Users.email == "buyer@example.com").count() == 0
    assert db.query(Profile).filter(Profile.email == "buyer@example.com").count() == 0


def test_customer_user_cannot_provision(auth_client, auth_db, db, customer):
    portal_user = create_user(auth_db, db, "portal@example.com",
                              RoleName.CUSTOMER_ADMIN.value, customer)

    resp = auth_client.post(URL, json=provision_payload(customer.id),
                            headers=bearer_headers(auth_db, portal_user))

    assert resp.status_code == 403

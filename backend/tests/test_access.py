"""
Unit tests for row-level access control.
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from tracking.errors import Forbidden, NotFound, Unauthenticated
from tracking.models.user import UserRole
from tracking.services.access import AccessControl, AccessScope, Operation
from tracking.utils.auth import Claims

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


def claims_for(user_id, role):
    return Claims(subject_id=user_id, username=f"user{user_id}", role=role, issued_at=NOW, expires_at=NOW)


OWNER = claims_for(1, UserRole.SALES_EXECUTIVE)
OTHER = claims_for(2, UserRole.SALES_EXECUTIVE)
ADMIN = claims_for(3, UserRole.ADMINISTRATOR)

RECORD = SimpleNamespace(id=10, owner_id=1)
SINGLE_RECORD_OPS = [Operation.READ_ONE, Operation.UPDATE, Operation.DELETE]


def test_no_claims_is_unauthenticated():
    with pytest.raises(Unauthenticated):
        AccessControl(None)


@pytest.mark.parametrize("operation", SINGLE_RECORD_OPS)
def test_owner_is_allowed(operation):
    assert AccessControl(OWNER).authorize(operation, RECORD) is RECORD


@pytest.mark.parametrize("operation", SINGLE_RECORD_OPS)
def test_other_sales_executive_is_forbidden(operation):
    with pytest.raises(Forbidden):
        AccessControl(OTHER).authorize(operation, RECORD)


@pytest.mark.parametrize("operation", SINGLE_RECORD_OPS)
def test_administrator_is_always_allowed(operation):
    assert AccessControl(ADMIN).authorize(operation, RECORD) is RECORD


@pytest.mark.parametrize("claims", [OWNER, OTHER, ADMIN])
@pytest.mark.parametrize("operation", SINGLE_RECORD_OPS)
def test_missing_record_is_not_found_for_everyone(claims, operation):
    with pytest.raises(NotFound) as exc:
        AccessControl(claims).authorize(operation, None)
    assert exc.value.message == "Customer not found"


def test_authorize_rejects_multi_record_operations():
    with pytest.raises(ValueError):
        AccessControl(ADMIN).authorize(Operation.READ_MANY, RECORD)


def test_read_many_scope():
    assert AccessControl(ADMIN).scope() == AccessScope.everything()
    assert AccessControl(ADMIN).scope().unrestricted

    scope = AccessControl(OWNER).scope()
    assert not scope.unrestricted
    assert scope.owner_id == 1


@pytest.mark.parametrize("claims", [OWNER, ADMIN])
def test_create_always_owned_by_caller(claims):
    values = AccessControl(claims).prepare_create(
        {"company_name": "Acme", "business_address": "1 Road", "owner_id": 999, "id": 5}
    )

    assert values["owner_id"] == claims.subject_id
    assert "id" not in values
    assert values["company_name"] == "Acme"


@pytest.mark.parametrize("claims", [OWNER, ADMIN])
def test_patch_never_changes_owner(claims):
    patch = AccessControl(claims).sanitize_patch(
        {"owner_id": 2, "created_at": NOW, "id": 99, "remarks": "called back"}
    )

    assert patch == {"remarks": "called back"}

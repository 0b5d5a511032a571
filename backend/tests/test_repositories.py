"""
Tests for the user and customer repositories against in-memory SQLite.
"""

import pytest

from tracking.models.customer import CustomerStatus
from tracking.models.user import UserRole
from tracking.repositories.customers import CustomerFilters, CustomerRepository
from tracking.repositories.users import UserRepository
from tracking.services.access import AccessScope


@pytest.fixture
def users(db):
    return UserRepository(db)


@pytest.fixture
def customers(db):
    return CustomerRepository(db)


@pytest.fixture
def alice(users):
    return users.create("alice", "Alice@Example.com", "hash")


@pytest.fixture
def bob(users):
    return users.create("bob", "bob@example.com", "hash")


def _customer(customers, owner, **fields):
    values = {"owner_id": owner.id, "company_name": "Acme", "business_address": "1 Road"}
    values.update(fields)
    return customers.create(values)


# ── Users ────────────────────────────────────────────────────────────

def test_new_users_are_active_sales_executives(alice):
    assert alice.role is UserRole.SALES_EXECUTIVE
    assert alice.is_active
    assert alice.email == "alice@example.com"


def test_lookups_ignore_deactivated_users(users, alice):
    assert users.find_by_username("alice").id == alice.id
    assert users.find_by_email("ALICE@example.com").id == alice.id

    assert users.deactivate(alice.id)

    assert users.find_by_username("alice") is None
    assert users.find_by_email("alice@example.com") is None
    assert users.get_active(alice.id) is None
    assert users.find_by_username("alice", active_only=False).id == alice.id


def test_deactivate_twice_reports_nothing_changed(users, alice):
    assert users.deactivate(alice.id)
    assert not users.deactivate(alice.id)
    assert not users.deactivate(12345)


def test_set_role(users, alice):
    assert users.set_role(alice.id, UserRole.ADMINISTRATOR)
    assert users.get_active(alice.id).role is UserRole.ADMINISTRATOR


def test_touch_last_login(users, alice):
    assert alice.last_login is None
    users.touch_last_login(alice.id)
    assert users.get_active(alice.id).last_login is not None


# ── Customers ────────────────────────────────────────────────────────

def test_scoped_list_returns_exact_owner_subset(customers, alice, bob):
    mine = {_customer(customers, alice).id, _customer(customers, alice).id}
    theirs = {_customer(customers, bob).id}

    assert {c.id for c in customers.list(AccessScope.owned_by(alice.id))} == mine
    assert {c.id for c in customers.list(AccessScope.owned_by(bob.id))} == theirs
    assert {c.id for c in customers.list(AccessScope.everything())} == mine | theirs


def test_list_filters(customers, alice):
    _customer(customers, alice, company_name="Blue Ocean", area="Downtown", tapped=True)
    _customer(customers, alice, company_name="Red Rock", area="Harbour", status=CustomerStatus.INACTIVE)
    _customer(customers, alice, company_name="Green Leaf", first_name="Oscar")

    everything = AccessScope.everything()

    def names(**kw):
        return sorted(c.company_name for c in customers.list(everything, CustomerFilters(**kw)))

    assert names(tapped=True) == ["Blue Ocean"]
    assert names(tapped=False) == ["Green Leaf", "Red Rock"]
    assert names(status=CustomerStatus.INACTIVE) == ["Red Rock"]
    assert names(area="Harbour") == ["Red Rock"]
    assert names(search="ocean") == ["Blue Ocean"]
    assert names(search="osc") == ["Green Leaf"]


def test_list_is_newest_first(customers, alice):
    first = _customer(customers, alice)
    second = _customer(customers, alice)

    assert [c.id for c in customers.list(AccessScope.everything())] == [second.id, first.id]


def test_areas_are_distinct_sorted_and_scoped(customers, alice, bob):
    _customer(customers, alice, area="Harbour")
    _customer(customers, alice, area="Downtown")
    _customer(customers, alice, area="Harbour")
    _customer(customers, alice)
    _customer(customers, bob, area="Airport")

    assert customers.areas(AccessScope.owned_by(alice.id)) == ["Downtown", "Harbour"]
    assert customers.areas(AccessScope.everything()) == ["Airport", "Downtown", "Harbour"]


def test_update_changes_fields_but_never_owner(customers, alice, bob):
    customer = _customer(customers, alice)

    assert customers.update(customer.id, {"remarks": "follow up", "owner_id": bob.id})

    updated = customers.get(customer.id)
    assert updated.remarks == "follow up"
    assert updated.owner_id == alice.id


def test_empty_patch_still_reports_existence(customers, alice):
    customer = _customer(customers, alice)

    assert customers.update(customer.id, {})
    assert not customers.update(customer.id + 100, {})


def test_update_and_delete_missing_ids(customers):
    assert customers.update(404, {"remarks": "x"}) is False
    assert customers.delete(404) is False


def test_delete(customers, alice):
    customer = _customer(customers, alice)

    assert customers.delete(customer.id)
    assert customers.get(customer.id) is None

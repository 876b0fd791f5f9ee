"""
Nested collection editor tests.
"""

import pytest

from app.core.exceptions import ConflictError, NotFoundError
from app.schemas.client import AddressUpdate
from app.services.client import addresses, contact_persons


def address(**overrides) -> dict:
    values = {
        "line1": "1 Rd",
        "line2": None,
        "line3": None,
        "city": "X",
        "state": "Y",
        "country": "India",
        "pin": 100001,
        "gstin": None,
    }
    values.update(overrides)
    return values


def contact(emails: list[str]) -> dict:
    return {
        "first_name": "Asha",
        "last_name": "Rao",
        "designation": None,
        "contact_numbers": [123],
        "emails": emails,
    }


def test_insert_prepends_with_fresh_id():
    items = addresses.insert([], address(city="First"))
    items = addresses.insert(items, address(city="Second"))

    assert [item["city"] for item in items] == ["Second", "First"]
    assert items[0]["id"] and items[1]["id"]
    assert items[0]["id"] != items[1]["id"]
    assert {k: v for k, v in items[0].items() if k != "id"} == address(city="Second")


def test_insert_does_not_touch_input():
    items = addresses.insert([], address())
    before = list(items)
    addresses.insert(items, address(city="Other"))
    assert items == before


def test_duplicate_gstin_conflicts():
    items = addresses.insert([], address(gstin="29ABCDE1234F1Z5"))

    with pytest.raises(ConflictError):
        addresses.insert(items, address(city="Other", gstin="29ABCDE1234F1Z5"))

    assert len(items) == 1


def test_missing_gstin_never_conflicts():
    items = addresses.insert([], address())
    items = addresses.insert(items, address())
    assert len(items) == 2


def test_shared_contact_email_conflicts():
    items = contact_persons.insert([], contact(["asha@x.com", "rao@x.com"]))

    with pytest.raises(ConflictError):
        contact_persons.insert(items, contact(["new@x.com", "rao@x.com"]))


def test_distinct_contact_emails_accepted():
    items = contact_persons.insert([], contact(["asha@x.com"]))
    items = contact_persons.insert(items, contact(["other@x.com"]))
    assert len(items) == 2


def test_get_unknown_id():
    with pytest.raises(NotFoundError):
        addresses.get(addresses.insert([], address()), "missing")


def test_update_replaces_by_identity():
    items = addresses.insert([], address(city="A"))
    items = addresses.insert(items, address(city="B"))
    items = addresses.insert(items, address(city="C"))
    target = items[1]["id"]

    updated = addresses.update(items, target, AddressUpdate(city="B2"))

    assert [item["city"] for item in updated] == ["C", "B2", "A"]
    assert updated[1]["id"] == target


def test_update_unknown_id():
    with pytest.raises(NotFoundError):
        addresses.update([], "missing", AddressUpdate(city="Z"))


def test_delete_removes_exactly_one():
    items = addresses.insert([], address(city="A"))
    items = addresses.insert(items, address(city="B"))
    items = addresses.insert(items, address(city="C"))

    remaining = addresses.delete(items, items[1]["id"])

    assert [item["city"] for item in remaining] == ["C", "A"]


def test_delete_unknown_id():
    with pytest.raises(NotFoundError):
        contact_persons.delete([], "missing")

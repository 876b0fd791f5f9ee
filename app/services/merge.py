"""
Partial-update merging.

Scalar fields are replaced when a value is given and kept otherwise.
Multi-valued fields only ever grow: new values are appended at the end,
values already stored are skipped. Nothing stored is ever lost.
"""

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from app.models.client import Client
from app.models.user import User
from app.schemas.client import AddressUpdate, ClientUpdate, ContactPersonUpdate
from app.schemas.user import UserUpdate


logger = logging.getLogger(__name__)


CLIENT_SCALARS = ("name", "division", "vertical", "logo")
CLIENT_LISTS = ("contact_numbers", "emails")

ADDRESS_SCALARS = ("line1", "line2", "line3", "city", "state", "country", "pin", "gstin")

CONTACT_PERSON_SCALARS = ("first_name", "last_name", "designation")
CONTACT_PERSON_LISTS = ("contact_numbers", "emails")

USER_SCALARS = ("first_name", "last_name", "email", "avatar")
USER_LISTS = ("user_type",)


def is_present(value: Any) -> bool:
    """A value counts as given unless it is None or empty."""
    return value is not None and value != "" and value != []


def merge_scalar(existing: Any, incoming: Any) -> Any:
    """Return the incoming value if given, else the stored one."""
    return incoming if is_present(incoming) else existing


def merge_multi(existing: Iterable[Any] | None, incoming: Any, field: str = "values") -> list:
    """
    Append an incoming value (or list of values) to a stored list.

    Values already in the stored list are skipped. Containment is
    exact equality. An incoming list is not deduplicated against itself.
    """
    current = list(existing or [])
    if not is_present(incoming):
        return current

    # A list contributes only its elements missing from the stored list,
    # never the whole list again.
    values = incoming if isinstance(incoming, list) else [incoming]
    added = [value for value in values if value not in current]

    if not added:
        logger.info("%s already contains %r, nothing appended", field, incoming)
        return current

    return current + added


def merge_fields(
    stored: Mapping[str, Any],
    incoming: Mapping[str, Any],
    scalars: Iterable[str],
    lists: Iterable[str] = (),
) -> dict[str, Any]:
    """Merge an incoming partial mapping into a copy of the stored one."""
    merged = dict(stored)
    for field in scalars:
        merged[field] = merge_scalar(stored.get(field), incoming.get(field))
    for field in lists:
        merged[field] = merge_multi(stored.get(field), incoming.get(field), field)
    return merged


def _incoming(data: BaseModel) -> dict[str, Any]:
    return data.model_dump(exclude_unset=True)


def merge_client(client: Client, data: ClientUpdate) -> dict[str, Any]:
    """New column values for a client."""
    stored = {field: getattr(client, field) for field in CLIENT_SCALARS + CLIENT_LISTS}
    return merge_fields(stored, _incoming(data), CLIENT_SCALARS, CLIENT_LISTS)


def merge_address(address: Mapping[str, Any], data: AddressUpdate) -> dict[str, Any]:
    """Replacement address document carrying the same id."""
    return merge_fields(address, _incoming(data), ADDRESS_SCALARS)


def merge_contact_person(contact: Mapping[str, Any], data: ContactPersonUpdate) -> dict[str, Any]:
    """Replacement contact person document carrying the same id."""
    return merge_fields(
        contact,
        _incoming(data),
        CONTACT_PERSON_SCALARS,
        CONTACT_PERSON_LISTS,
    )


def merge_user(user: User, data: UserUpdate) -> dict[str, Any]:
    """
    New column values for a user.
    The password is not merged here; it has to be hashed by the caller.
    """
    stored = {field: getattr(user, field) for field in USER_SCALARS + USER_LISTS}
    return merge_fields(stored, _incoming(data), USER_SCALARS, USER_LISTS)

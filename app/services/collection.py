"""
Editing of sub-entity arrays embedded in a parent document.

Every operation returns a new list and leaves the one it was given
untouched. Items are matched by their ``id``, never by position.
"""

import logging
import uuid
from typing import Any, Callable, Mapping, Sequence

from app.core.exceptions import ConflictError, NotFoundError


logger = logging.getLogger(__name__)

Item = dict[str, Any]


def new_item_id() -> str:
    return uuid.uuid4().hex


def gstin_taken(items: Sequence[Mapping[str, Any]], new: Mapping[str, Any]) -> bool:
    """An address conflicts when another one carries the same non-empty GSTIN."""
    gstin = new.get("gstin")
    if not gstin:
        return False
    return gstin in [item.get("gstin") for item in items]


def email_taken(items: Sequence[Mapping[str, Any]], new: Mapping[str, Any]) -> bool:
    """A contact person conflicts when any of its emails is already used."""
    used = {email for item in items for email in item.get("emails") or []}
    return any(email in used for email in new.get("emails") or [])


class NestedCollection:
    """
    List/get/insert/update/delete over one kind of embedded sub-entity.

    Args:
        label: Human name of the sub-entity, used in error messages
        merge: Function merging a stored item with a partial update
        conflicts: Optional uniqueness check run before insertion
        conflict_detail: Message of the ConflictError raised on violation
    """

    def __init__(
        self,
        label: str,
        merge: Callable[[Mapping[str, Any], Any], Item],
        conflicts: Callable[[Sequence[Mapping[str, Any]], Mapping[str, Any]], bool] | None = None,
        conflict_detail: str = "Item already exists",
    ):
        self.label = label
        self.merge = merge
        self.conflicts = conflicts
        self.conflict_detail = conflict_detail

    def find(self, items: Sequence[Mapping[str, Any]], item_id: str) -> Item | None:
        return next((dict(item) for item in items if item.get("id") == item_id), None)

    def get(self, items: Sequence[Mapping[str, Any]], item_id: str) -> Item:
        item = self.find(items, item_id)
        if item is None:
            raise NotFoundError(f"{self.label} not found")
        return item

    def insert(self, items: Sequence[Mapping[str, Any]], data: Mapping[str, Any]) -> list[Item]:
        """Prepend a new item with a fresh id."""
        if self.conflicts is not None and self.conflicts(items, data):
            logger.info("%s rejected: %s", self.label, self.conflict_detail)
            raise ConflictError(self.conflict_detail)

        item = {**data, "id": new_item_id()}
        return [item] + [dict(existing) for existing in items]

    def update(self, items: Sequence[Mapping[str, Any]], item_id: str, patch: Any) -> list[Item]:
        """Replace the item with this id by its merge with ``patch``."""
        merged = self.merge(self.get(items, item_id), patch)
        merged["id"] = item_id
        return [
            merged if item.get("id") == item_id else dict(item)
            for item in items
        ]

    def delete(self, items: Sequence[Mapping[str, Any]], item_id: str) -> list[Item]:
        """Drop the item with this id, keeping the others in order."""
        self.get(items, item_id)
        return [dict(item) for item in items if item.get("id") != item_id]

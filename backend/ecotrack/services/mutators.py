"""
Add / update / delete over record collections.

Each function returns a new list and leaves the caller's collection alone.
Records are matched on their `id` attribute.
"""
from typing import Any, List, Sequence


def add(collection: Sequence[Any], record: Any) -> List[Any]:
    # Id uniqueness is the store's job (uuid primary keys)
    return [*collection, record]


def update(collection: Sequence[Any], record: Any) -> List[Any]:
    """Replace the element with the same id. Unknown ids leave the collection as it was."""
    return [record if item.id == record.id else item for item in collection]


def delete(collection: Sequence[Any], record_id: str) -> List[Any]:
    """Drop the first element with `record_id`. Unknown ids are a no-op."""
    items = list(collection)
    for index, item in enumerate(items):
        if item.id == record_id:
            del items[index]
            break
    return items

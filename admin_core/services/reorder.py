"""
Ordering helpers for data models, attributes, options and menu items.

Reordering is a move (remove at ``from_index``, insert at ``to_index``), not a
swap. Persisted orders use sparse values so a later single insertion does
not renumber everything.
"""

from typing import Any, Sequence, TypeVar

from admin_core.models.contracts.data_models import AttributeOption

T = TypeVar("T")

SORT_ORDER_STEP = 100


def reorder(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    """
    Move one item and return a new list.

    ``to_index`` is the position of the item in the resulting list. Indexes
    out of range raise ``IndexError``; the input is never modified.

    Example:
        >>> reorder(["a", "b", "c", "d"], 0, 2)
        ['b', 'c', 'a', 'd']
    """
    size = len(items)
    if not 0 <= from_index < size:
        raise IndexError(f"from_index {from_index} out of range for {size} items")
    if not 0 <= to_index < size:
        raise IndexError(f"to_index {to_index} out of range for {size} items")

    result = list(items)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def _item_id(item: Any) -> str:
    if isinstance(item, dict):
        return item["id"]
    return getattr(item, "id")


def sparse_sort_orders(items: Sequence[Any], step: int = SORT_ORDER_STEP) -> list[dict[str, Any]]:
    """
    Sort order entries for a batch reorder request.

    Returns ``[{"id": ..., "sort_order": 0}, {"id": ..., "sort_order": 100}, ...]``
    """
    return [{"id": _item_id(item), "sort_order": index * step} for index, item in enumerate(items)]


def renumber_options(options: Sequence[AttributeOption]) -> list[AttributeOption]:
    """Rewrite each option's ``order`` to its list position."""
    return [
        option if option.order == index else option.model_copy(update={"order": index})
        for index, option in enumerate(options)
    ]


def find_index(items: Sequence[Any], item_id: str) -> int:
    """Position of the item with ``item_id``; ``ValueError`` if absent."""
    for index, item in enumerate(items):
        if _item_id(item) == item_id:
            return index
    raise ValueError(f"No item with id {item_id!r}")

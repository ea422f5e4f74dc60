"""
Pure helpers shared by the list and set matrices.

The matrices keep their own storage; these functions only read it or build
new values from it, so neither variant depends on the other.
"""
from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any, TypeVar

from eisenhower.core.exceptions import (
    MissingCategoryError,
    MissingComparatorError,
    NullArgumentError,
    UnhashableTaskError,
    UninitializedCategoryError,
)
from eisenhower.domain.category import Category, OrderingPolicy
from eisenhower.domain.protocols import SortKey

C = TypeVar("C", bound=Collection[Any])

# Scan order used wherever "the first category" matters.
SCAN_ORDER = Category.ordered(OrderingPolicy.IMPORTANCE_OVER_URGENCY)


# ============================================================================
# Argument validation
# ============================================================================

def resolve_category(
    category: Category | None,
    urgent: bool | None = None,
    important: bool | None = None,
) -> Category:
    """Return `category`, or classify the urgent/important pair when it is missing."""
    if category is not None:
        if urgent is not None or important is not None:
            raise TypeError("Pass either a category or urgent/important flags, not both")
        if not isinstance(category, Category):
            raise TypeError(f"Expected a Category, got {type(category).__name__}")
        return category
    if urgent is None or important is None:
        raise NullArgumentError("category")
    return Category.classify(urgent, important)


def has_category(
    category: Category | None,
    urgent: bool | None,
    important: bool | None,
) -> bool:
    """Whether the caller named a category, directly or by flags."""
    return category is not None or urgent is not None or important is not None


def require_task(task: Any) -> None:
    """Reject None and anything that cannot live in a set."""
    if task is None:
        raise NullArgumentError("task")
    try:
        hash(task)
    except TypeError:
        raise UnhashableTaskError(task) from None


def require_tasks(tasks: Iterable[Any] | None) -> list[Any]:
    """Materialize a batch, rejecting None anywhere before anything is stored."""
    if tasks is None:
        raise NullArgumentError("tasks")
    batch = list(tasks)
    for task in batch:
        require_task(task)
    return batch


def require_tasks_by_category(
    tasks_by_category: Mapping[Category, Iterable[Any]] | None,
) -> dict[Category, list[Any]]:
    """
    Validate a full per-category mapping.

    Returns an empty dict for an empty mapping, otherwise one materialized
    batch per category in scan order.
    """
    if tasks_by_category is None:
        raise NullArgumentError("tasks_by_category")
    if not tasks_by_category:
        return {}
    batches: dict[Category, list[Any]] = {}
    for category in SCAN_ORDER:
        if tasks_by_category.get(category) is None:
            raise MissingCategoryError(category)
        batches[category] = require_tasks(tasks_by_category[category])
    return batches


def require_keys(keys: Mapping[Category, SortKey] | None) -> dict[Category, SortKey]:
    if keys is None:
        raise NullArgumentError("keys")
    resolved: dict[Category, SortKey] = {}
    for category in SCAN_ORDER:
        key = keys.get(category)
        if key is None:
            raise MissingComparatorError(category)
        resolved[category] = key
    return resolved


# ============================================================================
# Storage
# ============================================================================

def new_storage(factory: Callable[[], C]) -> dict[Category, C]:
    """One fresh, empty collection per category."""
    return {category: factory() for category in SCAN_ORDER}


def copy_storage(storage: Mapping[Category, C], copier: Callable[[C], C]) -> dict[Category, C]:
    return {category: copier(bucket_of(storage, category)) for category in SCAN_ORDER}


def bucket_of(storage: Mapping[Category, C], category: Category) -> C:
    try:
        return storage[category]
    except KeyError:
        raise UninitializedCategoryError(category) from None


def as_grid(storage: Mapping[Category, C], copier: Callable[[C], C]) -> list[list[C]]:
    """Lay the categories out as [urgent_row][important_col]; index 0 means yes."""
    grid: list[list[Any]] = [[None, None], [None, None]]
    for category in SCAN_ORDER:
        row = 0 if category.urgent else 1
        col = 0 if category.important else 1
        grid[row][col] = copier(bucket_of(storage, category))
    return grid


# ============================================================================
# Queries
# ============================================================================

def quadrants_containing(storage: Mapping[Category, Collection[Any]], task: Any) -> list[Category]:
    return [category for category in SCAN_ORDER if task in bucket_of(storage, category)]


def union_of(storage: Mapping[Category, Collection[Any]]) -> set[Any]:
    tasks: set[Any] = set()
    for category in SCAN_ORDER:
        tasks.update(bucket_of(storage, category))
    return tasks


def sort_tasks(tasks: Iterable[Any], key: SortKey | None = None) -> list[Any]:
    """Stable sort into a new list; equal tasks keep their iteration order."""
    return sorted(tasks, key=key)


def merge_sorted(
    storage: Mapping[Category, Collection[Any]],
    policy: OrderingPolicy,
    key_for: Callable[[Category], SortKey | None],
) -> list[Any]:
    """
    Two-level sort.

    Each category is sorted on its own with the key `key_for` picks for it,
    then the sorted runs are concatenated in the order of `policy`.
    """
    merged: list[Any] = []
    for category in Category.ordered(policy):
        merged.extend(sort_tasks(bucket_of(storage, category), key_for(category)))
    return merged

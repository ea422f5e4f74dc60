"""
Domain protocols (interfaces) for the Eisenhower matrix.
These define the contracts that both matrix variants must follow.
"""
from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any, Protocol, TypeVar

from eisenhower.domain.category import Category, OrderingPolicy


# ============================================================================
# Task Protocol
# ============================================================================

class SupportsOrdering(Protocol):
    """What the matrix needs from a stored task: equality, hashing and `<`."""

    def __eq__(self, other: object) -> bool:
        ...

    def __hash__(self) -> int:
        ...

    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=SupportsOrdering)

# Sort key applied to each task, as accepted by `sorted(key=...)`.
# Two-argument comparators can be adapted with `functools.cmp_to_key`.
SortKey = Callable[[Any], Any]


# ============================================================================
# Matrix Protocol
# ============================================================================

class EisenhowerMatrix(Protocol[T]):
    """
    Category-keyed multi-collection shared by the list and set variants.

    Every method taking a category also accepts the keyword pair
    `urgent=`/`important=` instead of a Category.
    """

    def add_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        """
        Insert a task into one category.

        Returns:
            Whether the visible content of the matrix changed

        Raises:
            NullArgumentError: When the task or category is missing
        """
        ...

    def add_all_tasks(
        self,
        tasks: Iterable[T],
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ...

    def add_tasks_by_category(self, tasks_by_category: Mapping[Category, Iterable[T]]) -> bool:
        """
        Insert one batch per category.

        Raises:
            NullArgumentError: When the mapping is None
            MissingCategoryError: When a non-empty mapping lacks a category
        """
        ...

    def add_task_if_absent_in_quadrant(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ...

    def add_task_if_absent_in_matrix(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ...

    def get_tasks(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> Collection[T]:
        ...

    def get_tasks_sorted(
        self,
        category: Category | None = None,
        key: SortKey | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> list[T]:
        ...

    def get_all_tasks(self) -> set[T]:
        ...

    def get_all_tasks_sorted(
        self,
        policy: OrderingPolicy = OrderingPolicy.IMPORTANCE_OVER_URGENCY,
        key: SortKey | None = None,
    ) -> list[T]:
        """
        Sort every category on its own, then concatenate the categories
        in the order given by `policy`.
        """
        ...

    def get_all_tasks_sorted_per_quadrant(
        self,
        keys: Mapping[Category, SortKey],
        policy: OrderingPolicy = OrderingPolicy.IMPORTANCE_OVER_URGENCY,
    ) -> list[T]:
        """
        Raises:
            NullArgumentError: When the mapping is None
            MissingComparatorError: When a category has no sort key
        """
        ...

    def get_quadrant(self, task: T) -> Category | None:
        ...

    def get_quadrants(self, task: T) -> set[Category]:
        ...

    def contains_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ...

    def remove_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ...

    def remove_task_occurrences(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        """
        Remove every equal task from one category, or from all of them
        when no category is given.

        Returns:
            True if at least one task was removed anywhere
        """
        ...

    def clear_quadrant(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> EisenhowerMatrix[T]:
        """Return an independent copy with one category emptied."""
        ...

    def clear_all_tasks(self) -> EisenhowerMatrix[T]:
        """Return an independent copy with every category emptied."""
        ...

    def to_map(self) -> dict[Category, Collection[T]]:
        ...

    def to_matrix(self) -> list[list[Collection[T]]]:
        """2x2 grid indexed [urgent_row][important_col], row/col 0 meaning yes."""
        ...

"""
Set-backed Eisenhower matrix.

A task lives in at most one category, at most once: inserting a task that
is already anywhere in the matrix leaves the matrix unchanged.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic

from eisenhower.core.exceptions import TaskNotFoundError
from eisenhower.domain.category import Category, OrderingPolicy
from eisenhower.domain.protocols import SortKey, T
from eisenhower.matrix import operations as ops
from eisenhower.utils.logger import log_with_context, matrix_logger


class SetMatrix(Generic[T]):
    """Eisenhower matrix with matrix-wide uniqueness of tasks."""

    kind = "set"

    def __init__(self, tasks_by_category: Mapping[Category, Iterable[T]] | None = None):
        self._storage: dict[Category, set[T]] = ops.new_storage(set)
        if tasks_by_category:
            self.add_tasks_by_category(tasks_by_category)

    # ------------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------------

    def add_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        """Insert a task unless it already exists in any category."""
        ops.require_task(task)
        quadrant = ops.resolve_category(category, urgent, important)
        return self._insert(task, quadrant)

    def add_all_tasks(
        self,
        tasks: Iterable[T],
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        batch = ops.require_tasks(tasks)
        quadrant = ops.resolve_category(category, urgent, important)
        added = sum(1 for task in batch if self._insert(task, quadrant))
        if added:
            log_with_context(
                matrix_logger, "debug", "Tasks added",
                kind=self.kind, category=quadrant.name, count=added,
            )
        return added > 0

    def add_tasks_by_category(self, tasks_by_category: Mapping[Category, Iterable[T]]) -> bool:
        batches = ops.require_tasks_by_category(tasks_by_category)
        modified = False
        for quadrant, batch in batches.items():
            for task in batch:
                modified = self._insert(task, quadrant) or modified
        return modified

    def add_task_if_absent_in_quadrant(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        # Uniqueness is matrix-wide, so absence from the quadrant alone is not enough.
        ops.require_task(task)
        quadrant = ops.resolve_category(category, urgent, important)
        if task in self._bucket(quadrant):
            return False
        return self._insert(task, quadrant)

    def add_task_if_absent_in_matrix(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        return self._insert(task, ops.resolve_category(category, urgent, important))

    # ------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------

    def get_tasks(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> set[T]:
        return set(self._bucket(ops.resolve_category(category, urgent, important)))

    def get_tasks_sorted(
        self,
        category: Category | None = None,
        key: SortKey | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> list[T]:
        return ops.sort_tasks(self._bucket(ops.resolve_category(category, urgent, important)), key)

    def get_all_tasks(self) -> set[T]:
        return ops.union_of(self._storage)

    def get_all_tasks_sorted(
        self,
        policy: OrderingPolicy = OrderingPolicy.IMPORTANCE_OVER_URGENCY,
        key: SortKey | None = None,
    ) -> list[T]:
        return ops.merge_sorted(self._storage, policy, lambda _category: key)

    def get_all_tasks_sorted_per_quadrant(
        self,
        keys: Mapping[Category, SortKey],
        policy: OrderingPolicy = OrderingPolicy.IMPORTANCE_OVER_URGENCY,
    ) -> list[T]:
        resolved = ops.require_keys(keys)
        return ops.merge_sorted(self._storage, policy, resolved.__getitem__)

    def get_quadrant(self, task: T) -> Category | None:
        ops.require_task(task)
        found = ops.quadrants_containing(self._storage, task)
        return found[0] if found else None

    def get_quadrants(self, task: T) -> set[Category]:
        ops.require_task(task)
        return set(ops.quadrants_containing(self._storage, task))

    def contains_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        if ops.has_category(category, urgent, important):
            return task in self._bucket(ops.resolve_category(category, urgent, important))
        return any(task in bucket for bucket in self._storage.values())

    def is_task_urgent(self, task: T) -> bool:
        """
        Urgency of the category holding `task`.

        Raises:
            NullArgumentError: If task is None
            TaskNotFoundError: If task is not in the matrix
        """
        return self._locate(task).urgent

    def is_task_important(self, task: T) -> bool:
        """
        Importance of the category holding `task`.

        Raises:
            NullArgumentError: If task is None
            TaskNotFoundError: If task is not in the matrix
        """
        return self._locate(task).important

    # ------------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------------

    def remove_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        return self._discard(task, ops.resolve_category(category, urgent, important))

    def remove_task_occurrences(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        if ops.has_category(category, urgent, important):
            return self._discard(task, ops.resolve_category(category, urgent, important))
        quadrant = self.get_quadrant(task)
        return quadrant is not None and self._discard(task, quadrant)

    # ------------------------------------------------------------------------
    # Copy-on-clear
    # ------------------------------------------------------------------------

    def clear_quadrant(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> SetMatrix[T]:
        quadrant = ops.resolve_category(category, urgent, important)
        cleared = self.copy()
        cleared._storage[quadrant] = set()
        log_with_context(matrix_logger, "debug", "Quadrant cleared", kind=self.kind, category=quadrant.name)
        return cleared

    def clear_all_tasks(self) -> SetMatrix[T]:
        log_with_context(matrix_logger, "debug", "All quadrants cleared", kind=self.kind)
        return type(self)()

    def copy(self) -> SetMatrix[T]:
        clone = type(self)()
        clone._storage = ops.copy_storage(self._storage, set)
        return clone

    __copy__ = copy

    # ------------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------------

    def to_map(self) -> dict[Category, set[T]]:
        return ops.copy_storage(self._storage, set)

    def to_matrix(self) -> list[list[set[T]]]:
        return ops.as_grid(self._storage, set)

    # ------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------

    def _bucket(self, category: Category) -> set[T]:
        return ops.bucket_of(self._storage, category)

    def _insert(self, task: T, category: Category) -> bool:
        bucket = self._bucket(category)
        if self.contains_task(task):
            return False
        bucket.add(task)
        return True

    def _discard(self, task: T, category: Category) -> bool:
        bucket = self._bucket(category)
        if task not in bucket:
            return False
        bucket.remove(task)
        log_with_context(matrix_logger, "debug", "Task removed", kind=self.kind, category=category.name, count=1)
        return True

    def _locate(self, task: T) -> Category:
        quadrant = self.get_quadrant(task)
        if quadrant is None:
            raise TaskNotFoundError(task)
        return quadrant

    # ------------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._storage.values())

    def __iter__(self) -> Iterator[T]:
        for quadrant in ops.SCAN_ORDER:
            yield from self._bucket(quadrant)

    def __contains__(self, task: object) -> bool:
        return task is not None and self.contains_task(task)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetMatrix):
            return NotImplemented
        return self._storage == other._storage

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{q.name}={len(self._bucket(q))}" for q in ops.SCAN_ORDER)
        return f"{type(self).__name__}({counts})"

"""
List-backed Eisenhower matrix.

Each category is an ordered, index-addressable sequence that accepts
duplicates, both inside one category and across categories.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic

from eisenhower.core.exceptions import IndexOutOfRangeError, NullArgumentError
from eisenhower.domain.category import Category, OrderingPolicy
from eisenhower.domain.protocols import SortKey, T
from eisenhower.matrix import operations as ops
from eisenhower.utils.logger import log_with_context, matrix_logger


class ListMatrix(Generic[T]):
    """
    Eisenhower matrix with list semantics.

    Example:
        >>> matrix = ListMatrix()
        >>> matrix.add_task("Pay taxes", urgent=True, important=True)
        True
        >>> matrix.get_quadrant("Pay taxes")
        <Category.DO_IT_NOW: (True, True)>
    """

    kind = "list"

    def __init__(self, tasks_by_category: Mapping[Category, Iterable[T]] | None = None):
        self._storage: dict[Category, list[T]] = ops.new_storage(list)
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
        """Append a task; always changes the matrix."""
        ops.require_task(task)
        quadrant = ops.resolve_category(category, urgent, important)
        self._bucket(quadrant).append(task)
        return True

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
        self._bucket(quadrant).extend(batch)
        if batch:
            log_with_context(
                matrix_logger, "debug", "Tasks added",
                kind=self.kind, category=quadrant.name, count=len(batch),
            )
        return bool(batch)

    def add_tasks_by_category(self, tasks_by_category: Mapping[Category, Iterable[T]]) -> bool:
        batches = ops.require_tasks_by_category(tasks_by_category)
        modified = False
        for quadrant, batch in batches.items():
            self._bucket(quadrant).extend(batch)
            modified = modified or bool(batch)
        return modified

    def add_task_if_absent_in_quadrant(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        quadrant = ops.resolve_category(category, urgent, important)
        bucket = self._bucket(quadrant)
        if task in bucket:
            return False
        bucket.append(task)
        return True

    def add_task_if_absent_in_matrix(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> bool:
        ops.require_task(task)
        quadrant = ops.resolve_category(category, urgent, important)
        if self.contains_task(task):
            return False
        self._bucket(quadrant).append(task)
        return True

    # ------------------------------------------------------------------------
    # Index access
    # ------------------------------------------------------------------------

    def get_task(self, category: Category, index: int) -> T:
        """
        Return the task stored at `index` in a category.

        Raises:
            IndexOutOfRangeError: Unless 0 <= index < size of the category
        """
        bucket = self._bucket(ops.resolve_category(category))
        self._check_index(bucket, index)
        return bucket[index]

    def set_task(self, task: T, category: Category, index: int) -> T:
        """
        Replace the task at `index` and return the one it replaced.

        Raises:
            NullArgumentError: If task is None
            UnhashableTaskError: If task cannot be hashed
            IndexOutOfRangeError: Unless 0 <= index < size of the category
        """
        ops.require_task(task)
        bucket = self._bucket(ops.resolve_category(category))
        self._check_index(bucket, index)
        previous = bucket[index]
        bucket[index] = task
        return previous

    def sub_tasks(self, category: Category, start: int, stop: int) -> list[T]:
        """Copy of the half-open range [start, stop) of a category."""
        bucket = self._bucket(ops.resolve_category(category))
        if start is None or stop is None:
            raise NullArgumentError("start" if start is None else "stop")
        if not 0 <= start <= stop <= len(bucket):
            raise IndexOutOfRangeError(
                f"Invalid range [{start}, {stop}) for a category of size {len(bucket)}",
                index=start,
                size=len(bucket),
            )
        return bucket[start:stop]

    def count_task(
        self,
        task: T,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> int:
        """Number of stored tasks equal to `task`, in one category or overall."""
        ops.require_task(task)
        if ops.has_category(category, urgent, important):
            return self._bucket(ops.resolve_category(category, urgent, important)).count(task)
        return sum(bucket.count(task) for bucket in self._storage.values())

    # ------------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------------

    def get_tasks(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> list[T]:
        return list(self._bucket(ops.resolve_category(category, urgent, important)))

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
        """Remove every occurrence of `task` from one category."""
        ops.require_task(task)
        return self._remove_all(task, ops.resolve_category(category, urgent, important))

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
            return self._remove_all(task, ops.resolve_category(category, urgent, important))
        removed = False
        for quadrant in ops.SCAN_ORDER:
            removed = self._remove_all(task, quadrant) or removed
        return removed

    # ------------------------------------------------------------------------
    # Copy-on-clear
    # ------------------------------------------------------------------------

    def clear_quadrant(
        self,
        category: Category | None = None,
        *,
        urgent: bool | None = None,
        important: bool | None = None,
    ) -> ListMatrix[T]:
        quadrant = ops.resolve_category(category, urgent, important)
        cleared = self.copy()
        cleared._storage[quadrant] = []
        log_with_context(matrix_logger, "debug", "Quadrant cleared", kind=self.kind, category=quadrant.name)
        return cleared

    def clear_all_tasks(self) -> ListMatrix[T]:
        cleared = type(self)()
        log_with_context(matrix_logger, "debug", "All quadrants cleared", kind=self.kind)
        return cleared

    def copy(self) -> ListMatrix[T]:
        """Structurally independent copy; tasks themselves are shared."""
        clone = type(self)()
        clone._storage = ops.copy_storage(self._storage, list)
        return clone

    __copy__ = copy

    # ------------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------------

    def to_map(self) -> dict[Category, list[T]]:
        return ops.copy_storage(self._storage, list)

    def to_matrix(self) -> list[list[list[T]]]:
        return ops.as_grid(self._storage, list)

    # ------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------

    def _bucket(self, category: Category) -> list[T]:
        return ops.bucket_of(self._storage, category)

    def _remove_all(self, task: T, category: Category) -> bool:
        bucket = self._bucket(category)
        kept = [stored for stored in bucket if stored != task]
        removed = len(bucket) - len(kept)
        if not removed:
            return False
        bucket[:] = kept
        log_with_context(
            matrix_logger, "debug", "Task removed",
            kind=self.kind, category=category.name, count=removed,
        )
        return True

    @staticmethod
    def _check_index(bucket: list[T], index: int) -> None:
        if index is None:
            raise NullArgumentError("index")
        if not 0 <= index < len(bucket):
            raise IndexOutOfRangeError(
                f"Index {index} out of range for a category of size {len(bucket)}",
                index=index,
                size=len(bucket),
            )

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
        if not isinstance(other, ListMatrix):
            return NotImplemented
        return self._storage == other._storage

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{q.name}={len(self._bucket(q))}" for q in ops.SCAN_ORDER)
        return f"{type(self).__name__}({counts})"

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from eisenhower.core.config import Settings, get_settings
from eisenhower.domain.category import Category, OrderingPolicy
from eisenhower.domain.protocols import SortKey
from eisenhower.matrix.factory import AnyMatrix, MatrixKind, create_matrix
from eisenhower.utils.logger import log_with_context, planner_logger

T = TypeVar("T")


@dataclass(frozen=True)
class PlannerEntry(Generic[T]):
    task: T
    urgent: bool
    important: bool

    @property
    def category(self) -> Category:
        return Category.classify(self.urgent, self.important)


def prioritize(
    entries: Iterable[PlannerEntry[Any]],
    kind: MatrixKind | str | None = None,
    settings: Settings | None = None,
) -> AnyMatrix:
    """Sort tasks into Eisenhower categories."""
    settings = settings or get_settings()
    matrix = create_matrix(kind, settings)

    total = 0
    added = 0
    for entry in entries:
        total += 1
        if matrix.add_task(entry.task, entry.category):
            added += 1

    log_with_context(
        planner_logger, "info", "Tasks prioritized",
        kind=matrix.kind, received=total, stored=added,
    )
    return matrix


def prioritized_list(
    entries: Iterable[PlannerEntry[Any]],
    policy: OrderingPolicy | str | None = None,
    key: SortKey | None = None,
    kind: MatrixKind | str | None = None,
    settings: Settings | None = None,
) -> list[Any]:
    """Flatten prioritized tasks into one list, most pressing category first."""
    settings = settings or get_settings()
    matrix = prioritize(entries, kind, settings)
    ordering = OrderingPolicy.parse(policy) if policy is not None else settings.matrix.policy
    return matrix.get_all_tasks_sorted(ordering, key)

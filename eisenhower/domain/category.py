from __future__ import annotations

from enum import Enum

from eisenhower.core.exceptions import CategoryOutOfRangeError, NullArgumentError


class OrderingPolicy(Enum):
    """How the four categories are linearized into one sequence."""

    IMPORTANCE_OVER_URGENCY = "importance_over_urgency"
    URGENCY_OVER_IMPORTANCE = "urgency_over_importance"

    @classmethod
    def parse(cls, value: OrderingPolicy | str) -> OrderingPolicy:
        """Accept a member, its value or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if value is None:
            raise NullArgumentError("policy")
        text = str(value).strip().lower()
        for policy in cls:
            if text in (policy.value, policy.name.lower()):
                return policy
        raise ValueError(f"Unknown ordering policy: {value!r}")


class Category(Enum):
    """
    The four Eisenhower quadrants, each an (urgent, important) pair.

    Classical numbering:
    1. DO_IT_NOW               (urgent, important)
    2. SCHEDULE_IT             (not urgent, important)
    3. DELEGATE_OR_OPTIMIZE_IT (urgent, not important)
    4. ELIMINATE_IT            (not urgent, not important)
    """

    DO_IT_NOW = (True, True)
    SCHEDULE_IT = (False, True)
    DELEGATE_OR_OPTIMIZE_IT = (True, False)
    ELIMINATE_IT = (False, False)

    def __init__(self, urgent: bool, important: bool):
        self.urgent = urgent
        self.important = important

    @classmethod
    def classify(cls, urgent: bool, important: bool) -> Category:
        return cls((bool(urgent), bool(important)))

    @classmethod
    def from_number(cls, number: int) -> Category:
        if isinstance(number, bool) or not isinstance(number, int):
            raise CategoryOutOfRangeError(number)
        try:
            return _BY_NUMBER[number]
        except KeyError:
            raise CategoryOutOfRangeError(number) from None

    @classmethod
    def ordered(
        cls, policy: OrderingPolicy = OrderingPolicy.IMPORTANCE_OVER_URGENCY
    ) -> tuple[Category, ...]:
        if policy is None:
            raise NullArgumentError("policy")
        return _ORDERINGS[OrderingPolicy.parse(policy)]

    @property
    def number(self) -> int:
        return _ORDERINGS[OrderingPolicy.IMPORTANCE_OVER_URGENCY].index(self) + 1

    @property
    def label(self) -> str:
        return _LABELS[self]

    def is_urgent(self) -> bool:
        return self.urgent

    def is_important(self) -> bool:
        return self.important

    def ordinal_number(self) -> int:
        return self.number

    def __str__(self) -> str:
        return self.label


_ORDERINGS: dict[OrderingPolicy, tuple[Category, ...]] = {
    OrderingPolicy.IMPORTANCE_OVER_URGENCY: (
        Category.DO_IT_NOW,
        Category.SCHEDULE_IT,
        Category.DELEGATE_OR_OPTIMIZE_IT,
        Category.ELIMINATE_IT,
    ),
    OrderingPolicy.URGENCY_OVER_IMPORTANCE: (
        Category.DO_IT_NOW,
        Category.DELEGATE_OR_OPTIMIZE_IT,
        Category.SCHEDULE_IT,
        Category.ELIMINATE_IT,
    ),
}

_BY_NUMBER: dict[int, Category] = {
    index: category
    for index, category in enumerate(
        _ORDERINGS[OrderingPolicy.IMPORTANCE_OVER_URGENCY], start=1
    )
}

_LABELS: dict[Category, str] = {
    Category.DO_IT_NOW: "Do it now",
    Category.SCHEDULE_IT: "Schedule it",
    Category.DELEGATE_OR_OPTIMIZE_IT: "Delegate or optimize it",
    Category.ELIMINATE_IT: "Eliminate it",
}

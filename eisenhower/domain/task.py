from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class TaskProperties:
    """Keys used to identify well-known properties of a Task."""

    TASK_NAME = "Task name"
    MORE_INFO = "More info"
    DATE = "Date"
    TIME = "Time"
    LOCATION = "Where?"
    PRIORITY = "Priority"
    IMAGE = "Image"


@dataclass(eq=False)
class Task:
    """A named task with free-form properties and optional subtasks.

    Equality covers name, properties and subtasks; hashing uses the name
    only, so equal tasks hash alike and either matrix variant can hold them.

    Ordering looks at the name alone. Two tasks that share a name but differ
    in properties are unequal yet tied: `a <= b` and `b <= a` both hold, and
    a stable sort keeps them in insertion order.
    """

    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    subtasks: list[Task] = field(default_factory=list)

    def contains_info(self, key: str) -> bool:
        return key in self.properties

    def put_info(self, key: str, value: Any) -> Any:
        previous = self.properties.get(key)
        self.properties[key] = value
        return previous

    def put_info_if_absent(self, key: str, value: Any) -> Any:
        if key in self.properties:
            return self.properties[key]
        self.properties[key] = value
        return None

    def get_info(self, key: str, default: Any = None) -> Any:
        return self.properties.get(key, default)

    def remove_info(self, key: str) -> Any:
        return self.properties.pop(key, None)

    def replace_info(self, key: str, value: Any) -> Any:
        """Replace a property only if it is already set; returns the old value."""
        if key not in self.properties:
            return None
        return self.put_info(key, value)

    def add_subtask(self, subtask: Task) -> None:
        self.subtasks.append(subtask)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return (
            self.name == other.name
            and self.properties == other.properties
            and self.subtasks == other.subtasks
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.name < other.name

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.name <= other.name

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.name > other.name

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.name >= other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

"""
Custom exceptions for the Eisenhower matrix library.
Every failure is reported to the direct caller through this hierarchy.
"""
from __future__ import annotations

from typing import Any


# ============================================================================
# Base Exceptions
# ============================================================================

class EisenhowerError(Exception):
    """Base exception for all Eisenhower matrix errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Argument Exceptions
# ============================================================================

class NullArgumentError(EisenhowerError, TypeError):
    """Raised when a required task, category, key or mapping is None."""

    def __init__(self, argument: str):
        super().__init__(f"{argument} cannot be None", {"argument": argument})
        self.argument = argument


class UnhashableTaskError(EisenhowerError, TypeError):
    """Raised when a task cannot be hashed and so cannot be stored or looked up."""

    def __init__(self, task: object):
        super().__init__(
            f"Tasks must be hashable, got {type(task).__name__}",
            {"task": task, "type": type(task).__name__},
        )
        self.task = task


class IndexOutOfRangeError(EisenhowerError, IndexError):
    """Raised when a list-matrix index or range falls outside a category."""

    def __init__(self, message: str, index: int | None = None, size: int = 0):
        super().__init__(message, {"index": index, "size": size})
        self.index = index
        self.size = size


class CategoryOutOfRangeError(EisenhowerError, ValueError):
    """Raised when a number cannot be converted to a category (1-4)."""

    def __init__(self, number: object):
        super().__init__(
            f"Category number must be between 1 and 4, got {number!r}",
            {"number": number},
        )
        self.number = number


# ============================================================================
# Lookup Exceptions
# ============================================================================

class TaskNotFoundError(EisenhowerError, LookupError):
    """Raised when a task is required to be somewhere in the matrix but is not."""

    def __init__(self, task: object):
        super().__init__(
            "Task not present anywhere in this Eisenhower matrix",
            {"task": task},
        )
        self.task = task


class MissingComparatorError(EisenhowerError, ValueError):
    """Raised when a per-category sort key mapping omits a category."""

    def __init__(self, category: object):
        super().__init__(
            f"Sort key missing for category {category}",
            {"category": category},
        )
        self.category = category


class MissingCategoryError(EisenhowerError, ValueError):
    """Raised when a per-category task mapping omits a category."""

    def __init__(self, category: object):
        super().__init__(
            f"Category {category} is missing in the provided mapping",
            {"category": category},
        )
        self.category = category


# ============================================================================
# Internal State Exceptions
# ============================================================================

class UninitializedCategoryError(EisenhowerError, RuntimeError):
    """
    Raised when a category has no storage collection.

    Construction always sets up all four categories, so this signals
    a programming error rather than a recoverable condition.
    """

    def __init__(self, category: object):
        super().__init__(
            f"Category {category} has not been initialized with a proper collection",
            {"category": category},
        )
        self.category = category


# ============================================================================
# Configuration Exceptions
# ============================================================================

class ConfigurationError(EisenhowerError, ValueError):
    """Raised when configuration is invalid."""
    pass

"""
Behavior shared by both matrix variants.

Every test here runs once against ListMatrix and once against SetMatrix
through the parametrized `matrix` fixture.
"""
import copy
import functools

import pytest

from eisenhower.core.exceptions import (
    MissingCategoryError,
    MissingComparatorError,
    NullArgumentError,
    UnhashableTaskError,
    UninitializedCategoryError,
)
from eisenhower.domain.category import Category, OrderingPolicy
from eisenhower.domain.task import Task


ALL_EMPTY = {category: [] for category in Category}


# ============================================================================
# Insertion
# ============================================================================

class TestInsertion:

    def test_add_by_category(self, matrix):
        assert matrix.add_task("Pay taxes", Category.DO_IT_NOW) is True
        assert matrix.contains_task("Pay taxes", Category.DO_IT_NOW)

    def test_add_by_flags(self, matrix):
        assert matrix.add_task("Plan vacation", urgent=False, important=True) is True
        assert matrix.get_quadrant("Plan vacation") is Category.SCHEDULE_IT

    def test_add_none_task(self, matrix):
        with pytest.raises(NullArgumentError) as exc_info:
            matrix.add_task(None, Category.DO_IT_NOW)

        assert exc_info.value.argument == "task"
        assert isinstance(exc_info.value, TypeError)

    def test_add_without_category(self, matrix):
        with pytest.raises(NullArgumentError) as exc_info:
            matrix.add_task("Pay taxes")

        assert exc_info.value.argument == "category"

    def test_add_with_half_flags(self, matrix):
        with pytest.raises(NullArgumentError):
            matrix.add_task("Pay taxes", urgent=True)

    def test_add_with_wrong_category_type(self, matrix):
        with pytest.raises(TypeError):
            matrix.add_task("Pay taxes", "DO_IT_NOW")

    @pytest.mark.parametrize("flags", [
        {"urgent": False, "important": False},
        {"urgent": True, "important": True},
        {"urgent": True},
    ])
    def test_add_with_category_and_flags(self, matrix, flags):
        with pytest.raises(TypeError):
            matrix.add_task("Pay taxes", Category.DO_IT_NOW, **flags)

        assert len(matrix) == 0

    def test_add_unhashable_task(self, matrix):
        with pytest.raises(UnhashableTaskError) as exc_info:
            matrix.add_task([1, 2], Category.DO_IT_NOW)

        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.details["type"] == "list"
        assert len(matrix) == 0
        assert matrix.get_all_tasks() == set()

    def test_add_all_with_unhashable_item_stores_nothing(self, matrix):
        with pytest.raises(UnhashableTaskError):
            matrix.add_all_tasks(["a", {"b": 1}], Category.DO_IT_NOW)

        assert len(matrix) == 0

    def test_add_all(self, matrix):
        assert matrix.add_all_tasks(["a", "b"], Category.ELIMINATE_IT) is True
        assert sorted(matrix.get_tasks(Category.ELIMINATE_IT)) == ["a", "b"]

    def test_add_all_by_flags(self, matrix):
        assert matrix.add_all_tasks(["a"], urgent=True, important=False) is True
        assert matrix.get_quadrant("a") is Category.DELEGATE_OR_OPTIMIZE_IT

    def test_add_all_empty_is_unchanged(self, matrix):
        assert matrix.add_all_tasks([], Category.DO_IT_NOW) is False

    def test_add_all_none(self, matrix):
        with pytest.raises(NullArgumentError):
            matrix.add_all_tasks(None, Category.DO_IT_NOW)

    def test_add_all_with_none_item_stores_nothing(self, matrix):
        with pytest.raises(NullArgumentError):
            matrix.add_all_tasks(["a", None, "b"], Category.DO_IT_NOW)

        assert len(matrix) == 0

    def test_add_all_from_generator(self, matrix):
        assert matrix.add_all_tasks((name for name in ["x", "y"]), Category.SCHEDULE_IT)
        assert len(matrix) == 2


# ============================================================================
# Per-category mapping insertion
# ============================================================================

class TestInsertionByCategory:

    def test_full_mapping(self, matrix):
        changed = matrix.add_tasks_by_category({
            Category.DO_IT_NOW: ["a"],
            Category.SCHEDULE_IT: ["b"],
            Category.DELEGATE_OR_OPTIMIZE_IT: [],
            Category.ELIMINATE_IT: ["c"],
        })

        assert changed is True
        assert matrix.get_quadrant("a") is Category.DO_IT_NOW
        assert matrix.get_quadrant("b") is Category.SCHEDULE_IT
        assert matrix.get_quadrant("c") is Category.ELIMINATE_IT

    def test_all_empty_lists_is_unchanged(self, matrix):
        assert matrix.add_tasks_by_category(ALL_EMPTY) is False

    def test_empty_mapping_is_noop(self, matrix):
        assert matrix.add_tasks_by_category({}) is False
        assert len(matrix) == 0

    def test_none_mapping(self, matrix):
        with pytest.raises(NullArgumentError):
            matrix.add_tasks_by_category(None)

    def test_missing_category_stores_nothing(self, matrix):
        with pytest.raises(MissingCategoryError) as exc_info:
            matrix.add_tasks_by_category({
                Category.DO_IT_NOW: ["a"],
                Category.SCHEDULE_IT: ["b"],
                Category.DELEGATE_OR_OPTIMIZE_IT: ["c"],
            })

        assert exc_info.value.category is Category.ELIMINATE_IT
        assert len(matrix) == 0

    def test_constructor_accepts_mapping(self, matrix):
        built = type(matrix)({**ALL_EMPTY, Category.DO_IT_NOW: ["a"]})

        assert built.get_tasks_sorted(Category.DO_IT_NOW) == ["a"]


# ============================================================================
# Conditional insertion
# ============================================================================

class TestConditionalInsertion:

    def test_if_absent_in_quadrant(self, matrix):
        assert matrix.add_task_if_absent_in_quadrant("a", Category.DO_IT_NOW) is True
        assert matrix.add_task_if_absent_in_quadrant("a", Category.DO_IT_NOW) is False
        assert len(matrix) == 1

    def test_if_absent_in_matrix(self, matrix):
        matrix.add_task("a", Category.SCHEDULE_IT)

        assert matrix.add_task_if_absent_in_matrix("a", Category.DO_IT_NOW) is False
        assert not matrix.contains_task("a", Category.DO_IT_NOW)
        assert matrix.add_task_if_absent_in_matrix("b", urgent=True, important=True) is True
        assert matrix.contains_task("b", Category.DO_IT_NOW)

    def test_uninitialized_category(self, matrix):
        del matrix._storage[Category.DO_IT_NOW]

        with pytest.raises(UninitializedCategoryError) as exc_info:
            matrix.add_task_if_absent_in_quadrant("a", Category.DO_IT_NOW)

        assert isinstance(exc_info.value, RuntimeError)


# ============================================================================
# Queries
# ============================================================================

class TestQueries:

    def test_get_tasks_returns_copy(self, populated):
        tasks = populated.get_tasks(Category.DO_IT_NOW)
        tasks.clear()

        assert len(populated.get_tasks(Category.DO_IT_NOW)) == 2

    def test_get_tasks_by_flags(self, populated):
        assert set(populated.get_tasks(urgent=False, important=False)) == {"Watch TV"}

    def test_get_tasks_none_category(self, populated):
        with pytest.raises(NullArgumentError):
            populated.get_tasks(None)

    def test_get_tasks_sorted(self, populated):
        assert populated.get_tasks_sorted(Category.DO_IT_NOW) == ["Fix prod bug", "Pay taxes"]

    def test_get_tasks_sorted_with_key(self, populated):
        by_length = populated.get_tasks_sorted(Category.DO_IT_NOW, key=len)

        assert by_length == ["Pay taxes", "Fix prod bug"]

    def test_get_tasks_sorted_with_cmp(self, populated):
        reverse = functools.cmp_to_key(lambda a, b: (a < b) - (a > b))

        assert populated.get_tasks_sorted(Category.DO_IT_NOW, reverse) == ["Pay taxes", "Fix prod bug"]

    def test_get_all_tasks(self, populated):
        assert populated.get_all_tasks() == {
            "Pay taxes", "Fix prod bug", "Plan vacation", "Answer emails", "Watch TV",
        }

    def test_get_quadrant_missing(self, populated):
        assert populated.get_quadrant("Nothing") is None
        assert populated.get_quadrants("Nothing") == set()

    def test_get_quadrant_none(self, populated):
        with pytest.raises(NullArgumentError):
            populated.get_quadrant(None)

    def test_contains(self, populated):
        assert populated.contains_task("Watch TV")
        assert populated.contains_task("Watch TV", Category.ELIMINATE_IT)
        assert populated.contains_task("Watch TV", urgent=False, important=False)
        assert not populated.contains_task("Watch TV", Category.DO_IT_NOW)
        assert "Watch TV" in populated
        assert None not in populated

    def test_contains_none(self, populated):
        with pytest.raises(NullArgumentError):
            populated.contains_task(None)

    def test_len_and_iter(self, populated):
        assert len(populated) == 5
        assert list(populated)[-1] == "Watch TV"


# ============================================================================
# Two-level sort
# ============================================================================

class TestSortedRetrieval:

    def test_policy_concatenation_with_empty_category(self, matrix):
        matrix.add_task("A", Category.DO_IT_NOW)
        matrix.add_task("B", Category.DO_IT_NOW)
        matrix.add_task("C", Category.SCHEDULE_IT)

        assert matrix.get_all_tasks_sorted(OrderingPolicy.IMPORTANCE_OVER_URGENCY, str.lower) == ["A", "B", "C"]
        assert matrix.get_all_tasks_sorted(OrderingPolicy.URGENCY_OVER_IMPORTANCE, str.lower) == ["A", "B", "C"]

    def test_policy_changes_middle_categories(self, populated):
        importance_first = populated.get_all_tasks_sorted(OrderingPolicy.IMPORTANCE_OVER_URGENCY)
        urgency_first = populated.get_all_tasks_sorted(OrderingPolicy.URGENCY_OVER_IMPORTANCE)

        assert importance_first == ["Fix prod bug", "Pay taxes", "Plan vacation", "Answer emails", "Watch TV"]
        assert urgency_first == ["Fix prod bug", "Pay taxes", "Answer emails", "Plan vacation", "Watch TV"]

    def test_sorting_does_not_mutate(self, matrix):
        matrix.add_all_tasks(["b", "a"], Category.DO_IT_NOW)
        before = matrix.to_map()

        matrix.get_all_tasks_sorted()

        assert matrix.to_map() == before

    def test_scenario(self, matrix):
        matrix.add_task("Pay taxes", urgent=True, important=True)
        matrix.add_task("Plan vacation", urgent=False, important=True)

        assert matrix.get_quadrant("Pay taxes") is Category.DO_IT_NOW
        assert matrix.get_all_tasks_sorted(OrderingPolicy.IMPORTANCE_OVER_URGENCY) == ["Pay taxes", "Plan vacation"]

    def test_per_quadrant_keys(self, populated):
        keys = {category: (lambda task: task) for category in Category}
        keys[Category.DO_IT_NOW] = len

        result = populated.get_all_tasks_sorted_per_quadrant(keys, OrderingPolicy.IMPORTANCE_OVER_URGENCY)

        assert result[:2] == ["Pay taxes", "Fix prod bug"]
        assert result[2:] == ["Plan vacation", "Answer emails", "Watch TV"]

    def test_per_quadrant_missing_key(self, populated):
        keys = {Category.DO_IT_NOW: len, Category.SCHEDULE_IT: len, Category.ELIMINATE_IT: len}

        with pytest.raises(MissingComparatorError) as exc_info:
            populated.get_all_tasks_sorted_per_quadrant(keys)

        assert exc_info.value.category is Category.DELEGATE_OR_OPTIMIZE_IT

    def test_per_quadrant_none_key(self, populated):
        keys = {category: len for category in Category}
        keys[Category.ELIMINATE_IT] = None

        with pytest.raises(MissingComparatorError):
            populated.get_all_tasks_sorted_per_quadrant(keys)

    def test_per_quadrant_none_mapping(self, populated):
        with pytest.raises(NullArgumentError):
            populated.get_all_tasks_sorted_per_quadrant(None)

    def test_sorts_task_objects(self, matrix):
        matrix.add_task(Task("b"), Category.ELIMINATE_IT)
        matrix.add_task(Task("a"), Category.ELIMINATE_IT)
        matrix.add_task(Task("z"), Category.DO_IT_NOW)

        assert [t.name for t in matrix.get_all_tasks_sorted()] == ["z", "a", "b"]


# ============================================================================
# Removal
# ============================================================================

class TestRemoval:

    def test_remove_task(self, populated):
        assert populated.remove_task("Pay taxes", Category.DO_IT_NOW) is True
        assert not populated.contains_task("Pay taxes")
        assert populated.remove_task("Pay taxes", Category.DO_IT_NOW) is False

    def test_remove_from_wrong_category(self, populated):
        assert populated.remove_task("Pay taxes", Category.ELIMINATE_IT) is False
        assert populated.contains_task("Pay taxes")

    def test_remove_none(self, populated):
        with pytest.raises(NullArgumentError):
            populated.remove_task(None, Category.DO_IT_NOW)

    def test_remove_occurrences_everywhere(self, populated):
        assert populated.remove_task_occurrences("Watch TV") is True
        assert populated.remove_task_occurrences("Watch TV") is False
        assert len(populated) == 4

    def test_remove_occurrences_by_flags(self, populated):
        assert populated.remove_task_occurrences("Plan vacation", urgent=False, important=True) is True
        assert populated.get_quadrant("Plan vacation") is None


# ============================================================================
# Copy-on-clear
# ============================================================================

class TestClear:

    def test_clear_quadrant_is_copy_on_write(self, populated):
        before = populated.get_tasks(Category.DO_IT_NOW)

        cleared = populated.clear_quadrant(Category.DO_IT_NOW)

        assert populated.get_tasks(Category.DO_IT_NOW) == before
        assert len(cleared.get_tasks(Category.DO_IT_NOW)) == 0
        assert cleared != populated
        assert cleared.get_tasks(Category.SCHEDULE_IT) == populated.get_tasks(Category.SCHEDULE_IT)

    def test_clear_quadrant_shares_no_collection(self, populated):
        cleared = populated.clear_quadrant(urgent=True, important=True)

        cleared.add_task("New", Category.SCHEDULE_IT)

        assert not populated.contains_task("New")

    def test_clear_all(self, populated):
        cleared = populated.clear_all_tasks()

        assert len(cleared) == 0
        assert len(populated) == 5
        assert type(cleared) is type(populated)

    def test_clear_chain_can_be_reverted(self, populated):
        original = populated.copy()

        populated.clear_quadrant(Category.DO_IT_NOW).clear_quadrant(Category.ELIMINATE_IT)

        assert populated == original

    def test_clear_none(self, populated):
        with pytest.raises(NullArgumentError):
            populated.clear_quadrant(None)


# ============================================================================
# Views and copies
# ============================================================================

class TestViews:

    def test_to_map_is_deep(self, populated):
        snapshot = populated.to_map()
        snapshot[Category.DO_IT_NOW].clear()

        assert set(snapshot) == set(Category)
        assert len(populated.get_tasks(Category.DO_IT_NOW)) == 2

    def test_to_matrix_layout(self, populated):
        grid = populated.to_matrix()

        assert set(grid[0][0]) == {"Pay taxes", "Fix prod bug"}
        assert set(grid[0][1]) == {"Answer emails"}
        assert set(grid[1][0]) == {"Plan vacation"}
        assert set(grid[1][1]) == {"Watch TV"}

    def test_copy_is_independent(self, populated):
        clone = copy.copy(populated)

        clone.remove_task_occurrences("Watch TV")

        assert clone != populated
        assert populated.contains_task("Watch TV")

    def test_equality(self, matrix):
        other = type(matrix)()
        matrix.add_task("a", Category.DO_IT_NOW)
        other.add_task("a", Category.DO_IT_NOW)

        assert matrix == other

    def test_matrices_are_unhashable(self, matrix):
        with pytest.raises(TypeError):
            hash(matrix)

    def test_repr(self, populated):
        assert "DO_IT_NOW=2" in repr(populated)

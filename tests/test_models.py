"""Tests für das Lehrkraft-Modell, die Fehlerklassen und den Quicksort."""

import pytest
from pydantic import ValidationError

from models.errors import (
    CapacityExceededError,
    EmptyQueueError,
    IndexOutOfRangeError,
    InstructorQueueError,
    InvalidArgumentError,
)
from models.instructor import Instructor
from sorting.keys import SortKey, key_function
from sorting.quicksort import partition_descending, quick_sort_descending


class ListAdapter:
    """Minimaler Container mit get/swap für den generischen Quicksort."""

    def __init__(self, values):
        self.values = list(values)
        self.swaps = 0

    def get_instructor_at(self, index):
        return self.values[index]

    def swap_instructors(self, i, j):
        self.swaps += 1
        self.values[i], self.values[j] = self.values[j], self.values[i]


def identity(v):
    return v


# ─── INSTRUCTOR ───────────────────────────────────────────────────────────────

class TestInstructor:
    def test_valid_instructor(self):
        inst = Instructor("John", "Doe", 3)
        assert inst.first_name == "John"
        assert inst.last_name == "Doe"
        assert inst.num_courses == 3

    def test_keyword_construction(self):
        inst = Instructor(first_name="Jane", last_name="Smith", num_courses=0)
        assert inst.num_courses == 0

    def test_str(self):
        assert str(Instructor("John", "Doe", 3)) == "John Doe, Courses: 3"

    def test_names_are_not_trimmed(self):
        inst = Instructor(" John", "Doe ", 1)
        assert inst.first_name == " John"
        assert inst.last_name == "Doe "

    @pytest.mark.parametrize("first,last", [
        (None, "Smith"),
        ("John", None),
        ("", "Smith"),
        ("John", ""),
        ("   ", "Smith"),
        ("John", "\t "),
    ])
    def test_blank_names_raise(self, first, last):
        with pytest.raises(InvalidArgumentError):
            Instructor(first, last, 3)

    def test_negative_courses_raise(self):
        with pytest.raises(InvalidArgumentError):
            Instructor("John", "Doe", -1)

    @pytest.mark.parametrize("courses", [None, "drei", 2.5])
    def test_invalid_course_type_raises(self, courses):
        with pytest.raises(InvalidArgumentError):
            Instructor("John", "Doe", courses)

    @pytest.mark.parametrize("courses", ["3", True, 3.0])
    def test_course_count_is_not_coerced(self, courses):
        """Strikte Typen: keine stille Umwandlung in eine Kursanzahl."""
        with pytest.raises(InvalidArgumentError):
            Instructor("John", "Doe", courses)

    def test_model_validate_valid(self):
        inst = Instructor.model_validate(
            {"first_name": "Jane", "last_name": "Smith", "num_courses": 5}
        )
        assert inst == Instructor("Jane", "Smith", 5)

    @pytest.mark.parametrize("data", [
        {"first_name": "John", "last_name": "", "num_courses": 1},
        {"first_name": "John", "last_name": "Doe", "num_courses": -1},
        {"first_name": "John", "last_name": "Doe", "num_courses": "3"},
        {"first_name": "John", "last_name": "Doe"},
    ])
    def test_model_validate_raises_invalid_argument(self, data):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Instructor.model_validate(data)
        assert str(exc_info.value).startswith("Ungültige Lehrkraft")

    def test_error_is_chained_to_validation_error(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Instructor("John", "", 1)
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert "last_name" in str(exc_info.value)

    def test_instructor_is_immutable(self):
        inst = Instructor("John", "Doe", 3)
        with pytest.raises(ValidationError):
            inst.num_courses = 4
        assert inst.num_courses == 3

    def test_value_equality_and_hash(self):
        a = Instructor("John", "Doe", 3)
        b = Instructor("John", "Doe", 3)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Instructor("John", "Doe", 4)


# ─── FEHLERKLASSEN ────────────────────────────────────────────────────────────

class TestErrors:
    @pytest.mark.parametrize("cls", [
        InvalidArgumentError, CapacityExceededError,
        EmptyQueueError, IndexOutOfRangeError,
    ])
    def test_common_base(self, cls):
        assert issubclass(cls, InstructorQueueError)

    def test_builtin_compat(self):
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(IndexOutOfRangeError, IndexError)

    def test_distinct_conditions(self):
        assert not issubclass(CapacityExceededError, EmptyQueueError)
        assert not issubclass(EmptyQueueError, CapacityExceededError)


# ─── SORTIERSCHLÜSSEL ─────────────────────────────────────────────────────────

class TestSortKey:
    def test_extractors(self):
        inst = Instructor("Jane", "Smith", 5)
        assert key_function(SortKey.LAST_NAME)(inst) == "Smith"
        assert key_function(SortKey.COURSES)(inst) == 5

    def test_string_value_accepted(self):
        assert key_function("last_name")(Instructor("A", "B", 1)) == "B"

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError):
            key_function("first_name")

    def test_labels(self):
        assert SortKey.LAST_NAME.label == "Nachname"
        assert SortKey.COURSES.label == "Anzahl Kurse"


# ─── QUICKSORT ────────────────────────────────────────────────────────────────

class TestQuicksort:
    def test_partition_places_pivot(self):
        items = ListAdapter([3, 7, 1, 9, 5])
        p = partition_descending(items, 0, 4, identity)
        assert p == 2
        assert items.values[p] == 5
        assert all(v > 5 for v in items.values[:p])
        assert all(v <= 5 for v in items.values[p + 1:])

    def test_partition_exact_permutation(self):
        """Letztes Element als Pivot, Tausch bei strikt größer."""
        items = ListAdapter([3, 7, 1, 9, 5])
        partition_descending(items, 0, 4, identity)
        assert items.values == [7, 9, 5, 3, 1]

    def test_sort_descending(self):
        items = ListAdapter([4, 1, 3, 9, 7, 3, 0])
        quick_sort_descending(items, 0, 6, identity)
        assert items.values == [9, 7, 4, 3, 3, 1, 0]

    def test_equal_keys_keep_partition_order(self):
        """Gleichstände werden nicht über einen Zweitschlüssel aufgelöst."""
        items = ListAdapter([(1, "a"), (1, "b"), (1, "c")])
        quick_sort_descending(items, 0, 2, lambda t: t[0])
        # Alle gleich: nur der Pivot-Tausch (i+1, high) je Partition
        assert items.values == [(1, "c"), (1, "a"), (1, "b")]

    def test_low_ge_high_no_swaps(self):
        items = ListAdapter([1, 2])
        quick_sort_descending(items, 1, 1, identity)
        quick_sort_descending(items, 1, 0, identity)
        assert items.values == [1, 2]
        assert items.swaps == 0

    def test_same_result_as_builtin_sorted(self):
        values = [5, 3, 8, 1, 9, 2, 7, 7, 0, 4, 6]
        items = ListAdapter(values)
        quick_sort_descending(items, 0, len(values) - 1, identity)
        assert items.values == sorted(values, reverse=True)

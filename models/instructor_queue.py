"""InstructorQueue: Warteschlange fester Kapazität für Lehrkräfte.

Array-basiert: die Elemente liegen lückenlos in [0, size), die Plätze
[size, capacity) sind leer (None). Einfügen nur am Ende, Entnehmen nur vorne
(mit Linksverschiebung). Zusätzlich zwei absteigende In-place-Sortierungen
(Nachname, Anzahl Kurse) über denselben Quicksort.
"""

import logging
from typing import Iterator, Optional

from models.errors import (
    CapacityExceededError,
    EmptyQueueError,
    IndexOutOfRangeError,
    InvalidArgumentError,
)
from models.instructor import Instructor
from sorting.keys import SortKey, key_function
from sorting.quicksort import quick_sort_descending

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Warteschlange ist leer!"


class InstructorQueue:
    """Warteschlange mit fester Kapazität und Sortierfunktionen."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError(
                f"Kapazität muss eine ganze Zahl sein, nicht {type(capacity).__name__}"
            )
        if capacity <= 0:
            raise InvalidArgumentError(
                f"Kapazität muss größer als 0 sein (erhalten: {capacity})"
            )
        self._capacity = capacity
        self._instructors: list[Optional[Instructor]] = [None] * capacity
        self._size = 0

    # ─── Einfügen / Entnehmen ───

    def enqueue(self, instructor: Instructor) -> None:
        """Hängt eine Lehrkraft am Ende an."""
        if instructor is None:
            raise InvalidArgumentError("Lehrkraft darf nicht None sein")
        if not isinstance(instructor, Instructor):
            raise InvalidArgumentError(
                f"Erwartet Instructor, erhalten: {type(instructor).__name__}"
            )
        if self._size >= self._capacity:
            raise CapacityExceededError(
                f"Warteschlange ist voll ({self._capacity} Plätze)"
            )
        self._instructors[self._size] = instructor
        self._size += 1
        logger.debug(f"enqueue: {instructor} (size={self._size})")

    def dequeue(self) -> Instructor:
        """Entnimmt die vorderste Lehrkraft; der Rest rückt um eins nach links."""
        if self._size == 0:
            raise EmptyQueueError("Warteschlange ist leer, nichts zu entnehmen")
        front = self._instructors[0]
        for i in range(self._size - 1):
            self._instructors[i] = self._instructors[i + 1]
        self._size -= 1
        self._instructors[self._size] = None
        logger.debug(f"dequeue: {front} (size={self._size})")
        return front

    # ─── Lesen / Tauschen ───

    def get_instructor_at(self, index: int) -> Optional[Instructor]:
        """Element an ``index`` oder None, wenn der Index ungültig ist."""
        if index < 0 or index >= self._size:
            return None
        return self._instructors[index]

    def swap_instructors(self, i: int, j: int) -> None:
        if i < 0 or i >= self._size or j < 0 or j >= self._size:
            raise IndexOutOfRangeError(
                f"Ungültiger Index für Tausch: ({i}, {j}), size={self._size}"
            )
        self._instructors[i], self._instructors[j] = (
            self._instructors[j], self._instructors[i]
        )

    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def to_list(self) -> list[Instructor]:
        """Momentaufnahme der belegten Plätze in aktueller Reihenfolge."""
        return list(self._instructors[:self._size])

    def display(self) -> str:
        """Eine Zeile pro Lehrkraft mit 1-basierter Position."""
        if self._size == 0:
            return EMPTY_MESSAGE
        return "\n".join(
            f"{pos}. {instructor}"
            for pos, instructor in enumerate(self, start=1)
        )

    # ─── Sortieren ───

    def sort_by_last_name_descending(self, low: int, high: int) -> None:
        """Sortiert [low, high] absteigend nach Nachname (ordinaler Vergleich)."""
        self._sort_range(SortKey.LAST_NAME, low, high)

    def sort_by_courses_descending(self, low: int, high: int) -> None:
        """Sortiert [low, high] absteigend nach Anzahl Kurse."""
        self._sort_range(SortKey.COURSES, low, high)

    def sort(self, key: SortKey) -> None:
        """Sortiert die gesamte Warteschlange absteigend nach ``key``."""
        self._sort_range(SortKey(key), 0, self._size - 1)

    def _sort_range(self, key: SortKey, low: int, high: int) -> None:
        if low < 0 or high >= self._size:
            raise InvalidArgumentError(
                f"Ungültiger Sortierbereich [{low}, {high}] bei size={self._size}"
            )
        logger.debug(f"Sortiere [{low}, {high}] absteigend nach {key.value}")
        quick_sort_descending(self, low, high, key_function(key))

    # ─── Dunder ───

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Instructor]:
        for i in range(self._size):
            yield self._instructors[i]

    def __repr__(self) -> str:
        return f"InstructorQueue({self._size}/{self._capacity})"

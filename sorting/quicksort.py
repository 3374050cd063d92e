"""Absteigender Quicksort (Partition-Exchange) über einen indizierbaren Container.

Der Container muss ``get_instructor_at(index)`` und
``swap_instructors(i, j)`` anbieten. Pivot ist immer das letzte Element des
Bereichs; Elemente mit Schlüssel strikt größer als der Pivot wandern nach
links. Das Verfahren ist nicht stabil, Gleichstände werden nicht nach einem
Zweitschlüssel aufgelöst.
"""

import logging
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class SwappableSequence(Protocol):
    def get_instructor_at(self, index: int) -> Any: ...

    def swap_instructors(self, i: int, j: int) -> None: ...


def partition_descending(
    items: SwappableSequence,
    low: int,
    high: int,
    key: Callable[[Any], Any],
) -> int:
    """Partitioniert [low, high] um den Pivot an ``high``.

    Gibt die endgültige Position des Pivots zurück. Danach gilt: alle
    Elemente in [low, p) haben einen Schlüssel > Pivot, alle in (p, high]
    einen Schlüssel <= Pivot.
    """
    pivot = key(items.get_instructor_at(high))
    i = low - 1
    for j in range(low, high):
        if key(items.get_instructor_at(j)) > pivot:
            i += 1
            items.swap_instructors(i, j)
    items.swap_instructors(i + 1, high)
    return i + 1


def quick_sort_descending(
    items: SwappableSequence,
    low: int,
    high: int,
    key: Callable[[Any], Any],
) -> None:
    """Sortiert [low, high] (inklusive) absteigend nach ``key``.

    Bereichsprüfung ist Sache des Aufrufers. ``low >= high`` ist ein No-op.
    Rekursiert wird nur in die kleinere Teilfolge, die größere wird in der
    Schleife weiterbearbeitet (Stacktiefe O(log n)). Da beide Teilfolgen
    disjunkt sind, entsteht dieselbe Permutation wie bei doppelter Rekursion.
    """
    while low < high:
        p = partition_descending(items, low, high, key)
        logger.debug(f"Partition [{low}, {high}] → Pivot-Position {p}")
        if p - low < high - p:
            quick_sort_descending(items, low, p - 1, key)
            low = p + 1
        else:
            quick_sort_descending(items, p + 1, high, key)
            high = p - 1

"""Sortierte Kopien einer Warteschlange (Rangliste nach Nachname / Kursen).

Die Quelle wird nie verändert: es wird eine neue Warteschlange gleicher Größe
angelegt, Element für Element befüllt und erst dann sortiert.
"""

import logging

from models.errors import InvalidArgumentError
from models.instructor_queue import InstructorQueue
from sorting.keys import SortKey

logger = logging.getLogger(__name__)


def copy_queue(source: InstructorQueue, destination: InstructorQueue) -> None:
    """Hängt alle Lehrkräfte aus ``source`` in Reihenfolge an ``destination`` an."""
    if source is None:
        raise InvalidArgumentError("Quell-Warteschlange darf nicht None sein")
    if destination is None:
        raise InvalidArgumentError("Ziel-Warteschlange darf nicht None sein")
    for i in range(source.size()):
        destination.enqueue(source.get_instructor_at(i))


def sorted_copy(source: InstructorQueue, key: SortKey) -> InstructorQueue:
    """Neue, absteigend nach ``key`` sortierte Warteschlange.

    Kapazität = Größe der Quelle (mindestens 1, damit auch eine leere
    Quelle eine gültige, leere Kopie ergibt).
    """
    key = SortKey(key)
    copy = InstructorQueue(max(source.size(), 1))
    copy_queue(source, copy)
    copy.sort(key)
    logger.info(f"Sortierte Kopie nach {key.value}: {copy.size()} Einträge")
    return copy


def ranking_by_all_keys(source: InstructorQueue) -> dict[SortKey, InstructorQueue]:
    """Sortierte Kopien für jeden Sortierschlüssel (Nachname, Kurse)."""
    return {key: sorted_copy(source, key) for key in SortKey}

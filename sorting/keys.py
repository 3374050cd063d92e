"""Sortierschlüssel für Lehrkräfte."""

from enum import Enum
from operator import attrgetter
from typing import Any, Callable


class SortKey(str, Enum):
    LAST_NAME = "last_name"
    COURSES = "courses"

    @property
    def label(self) -> str:
        """Anzeigename für Überschriften."""
        return _LABELS[self]


_LABELS = {
    SortKey.LAST_NAME: "Nachname",
    SortKey.COURSES: "Anzahl Kurse",
}

# Nachnamen werden ordinal (Codepoints) verglichen, nicht locale-abhängig
_EXTRACTORS: dict[SortKey, Callable[[Any], Any]] = {
    SortKey.LAST_NAME: attrgetter("last_name"),
    SortKey.COURSES: attrgetter("num_courses"),
}


def key_function(key: SortKey) -> Callable[[Any], Any]:
    """Liefert die Extraktionsfunktion für einen Sortierschlüssel."""
    return _EXTRACTORS[SortKey(key)]

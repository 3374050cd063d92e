"""Fehlerklassen der Dozenten-Warteschlange.

Jede verletzte Vorbedingung wird sofort als eigene Fehlerklasse an den
Aufrufer gemeldet; der Kern fängt keine eigenen Fehler ab.
"""


class InstructorQueueError(Exception):
    """Basisklasse aller Fehler der Warteschlange."""


class InvalidArgumentError(InstructorQueueError, ValueError):
    """Ungültiges Argument (leerer Name, negative Kursanzahl, Kapazität <= 0, ...)."""


class CapacityExceededError(InstructorQueueError):
    """Warteschlange ist voll."""


class EmptyQueueError(InstructorQueueError):
    """Entnahme aus einer leeren Warteschlange."""


class IndexOutOfRangeError(InstructorQueueError, IndexError):
    """Index außerhalb von [0, size)."""

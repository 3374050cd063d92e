"""Sortier-Modul: Partition-Exchange-Sort (Quicksort) absteigend nach Schlüssel."""

from .keys import SortKey, key_function
from .quicksort import quick_sort_descending, partition_descending

__all__ = [
    "SortKey",
    "key_function",
    "quick_sort_descending",
    "partition_descending",
]

"""
algorithms/sorting/
-------------------
In-place sorting generators over a list of numbers.
"""

from algorithms.sorting.bubble_sort    import bubble_sort
from algorithms.sorting.selection_sort import selection_sort
from algorithms.sorting.insertion_sort import insertion_sort
from algorithms.sorting.merge_sort     import merge_sort
from algorithms.sorting.quick_sort     import quick_sort
from algorithms.sorting.heap_sort      import heap_sort, sift_down_max

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "heap_sort",
    "sift_down_max",
]

"""Min-heap construction and heap sort that records each extraction pass."""

from __future__ import annotations


def heapify(values: list[int], index: int, size: int) -> None:
    """Sift values[index] down so the first ``size`` items keep the min-heap property."""
    while True:
        smallest = index
        left = 2 * index + 1
        right = left + 1
        if left < size and values[left] < values[smallest]:
            smallest = left
        if right < size and values[right] < values[smallest]:
            smallest = right
        if smallest == index:
            return
        values[index], values[smallest] = values[smallest], values[index]
        index = smallest


def build_min_heap(values: list[int]) -> None:
    """Rearrange ``values`` in place into a min-heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, index, size)


def heap_sort(values: list[int]) -> list[list[int]]:
    """Sort ``values`` in place into ascending order.

    Returns a snapshot of the remaining heap after each extraction of the minimum.
    """
    build_min_heap(values)
    ordered: list[int] = []
    passes: list[list[int]] = []
    while values:
        ordered.append(values[0])
        last = values.pop()
        if values:
            values[0] = last
            heapify(values, 0, len(values))
        passes.append(list(values))
    values[:] = ordered
    return passes
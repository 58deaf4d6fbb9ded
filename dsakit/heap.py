"""Array-backed binary min-heap."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from typing import Optional


class MinHeap:
    """A binary min-heap of integers stored in a list."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._heap: list[int] = []
        for key in keys:
            self.insert(key)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index] >= heap[parent]:
                return
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while 2 * index + 1 < size:
            left = 2 * index + 1
            right = left + 1
            smallest = right if right < size and heap[right] < heap[left] else left
            if heap[smallest] >= heap[index]:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def insert(self, key: int) -> None:
        """Add a key to the heap."""
        self._heap.append(key)
        self._sift_up(len(self._heap) - 1)

    def delete_min(self) -> int:
        """Remove and return the smallest key; IndexError if the heap is empty."""
        if not self._heap:
            raise IndexError("delete_min from an empty heap")
        smallest = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return smallest

    def items(self) -> list[int]:
        """Return the keys in their array order."""
        return list(self._heap)

    def __len__(self) -> int:
        return len(self._heap)


def main(argv: Optional[list[str]] = None) -> int:
    """Fill a heap, print it, remove the minimum and print it again."""
    argparse.ArgumentParser(description="Min-heap demonstration").parse_args(argv)
    heap = MinHeap([10, 5, 15, 2])
    print("HEAP: " + " ".join(map(str, heap.items())))
    print(f"after deleting:{heap.delete_min()}")
    print(" ".join(map(str, heap.items())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
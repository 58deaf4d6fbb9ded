import pytest

from dsakit.heap import MinHeap, main


def _is_heap(items):
    return all(items[(i - 1) // 2] <= items[i] for i in range(1, len(items)))


@pytest.mark.parametrize(
    "keys",
    [[10, 5, 15, 2], list(range(20, 0, -1)), [7, 7, 3, 9, 1, 1, 8], [42]],
)
def test_drain_gives_sorted_order(keys):
    heap = MinHeap(keys)
    drained = [heap.delete_min() for _ in range(len(keys))]
    assert drained == sorted(keys)
    assert len(heap) == 0


def test_heap_property_after_each_insert():
    heap = MinHeap()
    keys = [10, 5, 15, 2, 8, 1, 20, 3]
    for key in keys:
        heap.insert(key)
        assert _is_heap(heap.items())
    assert heap.items()[0] == min(keys)


def test_heap_property_after_delete():
    keys = [31, 4, 15, 9, 26, 5, 35, 8]
    heap = MinHeap(keys)
    heap.delete_min()
    assert _is_heap(heap.items())
    assert sorted(heap.items()) == sorted(keys)[1:]


def test_len_tracks_size():
    heap = MinHeap([3, 1, 2])
    assert len(heap) == 3
    heap.delete_min()
    assert len(heap) == 2


def test_delete_min_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().delete_min()


def test_items_is_a_copy():
    heap = MinHeap([5, 1])
    items = heap.items()
    items.clear()
    assert len(heap) == 2


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("HEAP: ")
    assert "after deleting:2" in out
    assert sorted(map(int, out.splitlines()[-1].split())) == [5, 10, 15]
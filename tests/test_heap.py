import pytest

from csalgos.heap import HeapEmptyError, HeapFullError, MinHeap


def _drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.remove_min())
    return out


def _is_heap(values):
    return all(
        not values[child] < values[(child - 1) // 2]
        for child in range(1, len(values))
    )


@pytest.mark.parametrize(
    "data",
    [
        [5, 3, 8, 1, 9, 2],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [7, 7, 7, 3, 3],
        [-3, 9, 3, 7],
    ],
)
def test_drain_yields_sorted_order(data):
    heap = MinHeap(len(data))
    for value in data:
        heap.add(value)
    assert _drain(heap) == sorted(data)


def test_strings_are_ordered_lexicographically():
    words = ["blythe", "smith", "hurts", "mahomes"]
    heap = MinHeap(10)
    for word in words:
        heap.add(word)
    assert heap.peek_min() == "blythe"
    assert _drain(heap) == sorted(words)


def test_full_heap_rejects_add():
    heap = MinHeap(2)
    heap.add(4)
    heap.add(1)
    with pytest.raises(HeapFullError):
        heap.add(0)
    assert len(heap) == 2
    assert heap.peek_min() == 1


def test_zero_capacity_heap_is_always_full():
    heap = MinHeap(0)
    with pytest.raises(HeapFullError):
        heap.add(1)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)


def test_empty_heap_errors():
    heap = MinHeap(3)
    assert heap.is_empty()
    with pytest.raises(HeapEmptyError):
        heap.peek_min()
    with pytest.raises(HeapEmptyError):
        heap.remove_min()


def test_length_tracks_adds_and_removes():
    heap = MinHeap(5)
    for value in [4, 2, 6]:
        heap.add(value)
    assert len(heap) == 3
    heap.remove_min()
    assert len(heap) == 2
    assert not heap.is_empty()


def test_peek_does_not_remove():
    heap = MinHeap(4)
    for value in [10, 20, 5]:
        heap.add(value)
    assert heap.peek_min() == 5
    assert len(heap) == 3
    assert heap.remove_min() == 5
    assert heap.peek_min() == 10


def test_iteration_keeps_heap_property_and_contents():
    data = [9, 4, 7, 1, 8, 2, 6, 3, 5]
    heap = MinHeap(len(data))
    for value in data:
        heap.add(value)
        assert _is_heap(list(heap))
    assert sorted(heap) == sorted(data)
    heap.remove_min()
    heap.remove_min()
    assert _is_heap(list(heap))
    assert sorted(heap) == sorted(data)[2:]


def test_space_is_reusable_after_removal():
    heap = MinHeap(1)
    heap.add(3)
    assert heap.remove_min() == 3
    heap.add(8)
    assert heap.peek_min() == 8


class _Room:
    def __init__(self, finish):
        self.finish = finish

    def __lt__(self, other):
        return self.finish < other.finish


def test_objects_ordered_by_their_lt_only():
    finishes = [30, 10, 20]
    heap = MinHeap(3)
    for finish in finishes:
        heap.add(_Room(finish))
    assert [room.finish for room in _drain(heap)] == sorted(finishes)
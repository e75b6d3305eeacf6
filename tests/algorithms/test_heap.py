import random

import pytest

from tspgraph.algorithms.heap import (
    BinaryHeap,
    HeapCapacityError,
    HeapEmptyError,
    HeapNode,
)


def make_heap(weights, capacity=None):
    heap = BinaryHeap(capacity if capacity is not None else len(weights))
    nodes = [HeapNode(val=i, weight=w) for i, w in enumerate(weights)]
    for node in nodes:
        heap.insert(node)
    return heap, nodes


def test_new_heap_is_empty():
    heap = BinaryHeap(3)
    assert len(heap) == 0
    assert heap.is_empty()
    assert not heap.is_full()
    assert heap.capacity == 4
    assert heap.check_invariant()


def test_negative_size_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        BinaryHeap(-1)


def test_insert_and_find_min():
    heap, nodes = make_heap([5.0, 3.0, 8.0, 1.0])
    assert len(heap) == 4
    assert heap.find_min() is nodes[3]
    assert len(heap) == 4
    assert heap.check_invariant()


def test_insert_beyond_capacity():
    heap, _ = make_heap([1.0, 2.0])
    assert heap.is_full()
    with pytest.raises(HeapCapacityError, match="capacity"):
        heap.insert(HeapNode(val=9, weight=0.5))
    # The failed insert leaves the heap untouched
    assert len(heap) == 2
    assert heap.check_invariant()


def test_zero_capacity_heap_is_always_full():
    heap = BinaryHeap(0)
    with pytest.raises(HeapCapacityError):
        heap.insert(HeapNode(val=0, weight=1.0))


def test_insert_same_node_twice_rejected():
    heap = BinaryHeap(3)
    node = HeapNode(val=0, weight=1.0)
    heap.insert(node)
    with pytest.raises(ValueError, match="already in the heap"):
        heap.insert(node)


def test_nodes_are_tracked_by_identity():
    heap = BinaryHeap(2)
    a = HeapNode(val=1, weight=1.0)
    b = HeapNode(val=1, weight=1.0)
    heap.insert(a)
    heap.insert(b)
    assert a in heap and b in heap
    assert heap.position_of(a) != heap.position_of(b)


def test_extract_min_returns_sorted_order():
    weights = [7.0, 2.0, 9.0, 4.0, 4.0, 1.0, 8.0, 3.0]
    heap, _ = make_heap(weights)
    out = [heap.extract_min().weight for _ in range(len(weights))]
    assert out == sorted(weights)
    assert heap.is_empty()


def test_extract_min_random_order():
    rng = random.Random(7)
    weights = [rng.uniform(0, 100) for _ in range(50)]
    heap, _ = make_heap(weights)
    out = []
    while not heap.is_empty():
        out.append(heap.extract_min().weight)
        assert heap.check_invariant()
    assert out == sorted(weights)


def test_empty_heap_errors():
    heap = BinaryHeap(2)
    with pytest.raises(HeapEmptyError):
        heap.extract_min()
    with pytest.raises(HeapEmptyError):
        heap.find_min()
    # HeapEmptyError is an IndexError
    with pytest.raises(IndexError):
        heap.extract_min()


def test_delete_at_slot():
    heap, nodes = make_heap([1.0, 5.0, 2.0, 6.0, 7.0, 3.0])
    slot = heap.position_of(nodes[3])
    removed = heap.delete(slot)
    assert removed is nodes[3]
    assert nodes[3] not in heap
    assert len(heap) == 5
    assert heap.check_invariant()


def test_delete_moves_last_element_up_when_needed():
    #            1
    #        10      2
    #      11  12   3  4
    # Deleting 11 moves 4 into its slot, where it must sift up past 10.
    heap, nodes = make_heap([1.0, 10.0, 2.0, 11.0, 12.0, 3.0, 4.0])
    heap.delete(heap.position_of(nodes[3]))
    assert heap.check_invariant()
    assert [heap.extract_min().weight for _ in range(6)] == [1, 2, 3, 4, 10, 12]


def test_delete_last_slot():
    heap, nodes = make_heap([1.0, 2.0, 3.0])
    assert heap.delete(3) is nodes[2]
    assert len(heap) == 2
    assert heap.check_invariant()


@pytest.mark.parametrize("slot", [0, 4, -1])
def test_delete_invalid_slot(slot):
    heap, _ = make_heap([1.0, 2.0, 3.0])
    with pytest.raises(IndexError, match="outside the heap"):
        heap.delete(slot)


def test_delete_node():
    heap, nodes = make_heap([4.0, 1.0, 3.0])
    heap.delete_node(nodes[1])
    assert heap.find_min() is nodes[2]
    with pytest.raises(KeyError, match="not in the heap"):
        heap.delete_node(nodes[1])


def test_change_key_decrease():
    heap, nodes = make_heap([4.0, 5.0, 6.0, 7.0])
    heap.change_key(nodes[3], 0.5)
    assert nodes[3].weight == 0.5
    assert heap.find_min() is nodes[3]
    assert heap.check_invariant()


def test_change_key_increase():
    heap, nodes = make_heap([1.0, 5.0, 6.0, 7.0])
    heap.change_key(nodes[0], 10.0)
    assert heap.check_invariant()
    assert [heap.extract_min().val for _ in range(4)] == [1, 2, 3, 0]


def test_change_key_unknown_node():
    heap, _ = make_heap([1.0])
    with pytest.raises(KeyError):
        heap.change_key(HeapNode(val=5, weight=1.0), 0.0)


def test_mixed_operations_keep_heap_property():
    """Random inserts, extracts, deletes and key changes keep heap order."""
    rng = random.Random(42)
    heap = BinaryHeap(64)
    live = []
    for step in range(500):
        op = rng.random()
        if op < 0.45 and not heap.is_full():
            node = HeapNode(val=step, weight=rng.uniform(0, 50))
            heap.insert(node)
            live.append(node)
        elif op < 0.65 and live:
            node = heap.extract_min()
            assert node.weight == min(n.weight for n in live)
            live.remove(node)
        elif op < 0.8 and live:
            node = heap.delete(rng.randint(1, len(heap)))
            live.remove(node)
        elif live:
            heap.change_key(rng.choice(live), rng.uniform(0, 50))
        assert heap.check_invariant()
        assert len(heap) == len(live)


def test_iteration_covers_all_nodes():
    heap, nodes = make_heap([3.0, 1.0, 2.0])
    assert {id(n) for n in heap} == {id(n) for n in nodes}
    assert repr(heap) == "BinaryHeap(size=3, capacity=4)"

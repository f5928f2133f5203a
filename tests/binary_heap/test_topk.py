import numpy as np

from binheap import BinaryHeap, get_topk, merge, nsmallest, reverse_order


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = BinaryHeap.from_iterable([10, 5, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_empty_heap(self):
        heap = BinaryHeap()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk_max_heap(self):
        heap = BinaryHeap.from_iterable([10, 5, 15, 1, 20], reverse_order())
        result = get_topk(heap, 3)
        assert result == [20, 15, 10]

    def test_get_topk_min_heap(self):
        heap = BinaryHeap.from_iterable([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        assert result == [1, 5, 10]

    def test_get_topk_does_not_mutate(self):
        heap = BinaryHeap.from_iterable([10, 5, 15, 1, 20])
        get_topk(heap, 2)
        assert len(heap) == 5
        assert heap.peek() == 1

    def test_get_topk_larger_than_heap(self):
        heap = BinaryHeap.from_iterable([2, 1])
        assert get_topk(heap, 10) == [1, 2]


class TestNSmallest:
    def test_nsmallest_natural(self):
        assert nsmallest(3, [5, 1, 4, 2, 3]) == [1, 2, 3]

    def test_nsmallest_with_comparator(self):
        result = nsmallest(2, [5, 1, 4, 2, 3], reverse_order())
        assert result == [5, 4]

    def test_nsmallest_non_positive_k(self):
        assert nsmallest(0, [1, 2]) == []
        assert nsmallest(-3, [1, 2]) == []

    def test_nsmallest_short_stream(self):
        assert nsmallest(5, iter([3, 1])) == [1, 3]

    def test_nsmallest_random(self):
        rng = np.random.default_rng(42)
        values = rng.integers(0, 1000, size=500).tolist()
        assert nsmallest(10, values) == sorted(values)[:10]


class TestMerge:
    def test_merge_sorted_inputs(self):
        result = list(merge([1, 4, 7], [2, 5, 8], [3, 6, 9]))
        assert result == list(range(1, 10))

    def test_merge_with_empty_inputs(self):
        assert list(merge([], [1, 2], [])) == [1, 2]
        assert list(merge()) == []

    def test_merge_with_comparator(self):
        result = list(merge([9, 5, 1], [8, 2], comparator=reverse_order()))
        assert result == [9, 8, 5, 2, 1]

    def test_merge_ties_follow_input_order(self):
        def by_key(a, b):
            return a[0] - b[0]

        left = [(1, "left"), (2, "left")]
        right = [(1, "right"), (2, "right")]
        result = list(merge(left, right, comparator=by_key))
        assert result == [(1, "left"), (1, "right"), (2, "left"), (2, "right")]

    def test_merge_is_lazy(self):
        def endless():
            n = 0
            while True:
                yield n
                n += 2

        merged = merge(endless(), [1, 3])
        assert [next(merged) for _ in range(5)] == [0, 1, 2, 3, 4]

from binheap import BinaryHeap, get_topk, reverse_order


priorities = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]

# Create a min heap with the natural ordering
print("Creating binary heap...")
heap = BinaryHeap.from_iterable(priorities)

# Test basic properties
print(f"Heap: {heap!r}")
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top 3: {get_topk(heap, 3)}")
print(f"Drained: {list(heap)}")

# Same elements, reversed comparator
max_heap = BinaryHeap.from_iterable(priorities, reverse_order())
print(f"Max heap drained: {[max_heap.pop() for _ in range(len(max_heap))]}")

# dsakit

A small collection of classic data structures and algorithms for
Python 3.10 and later. It depends only on the standard library.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra and run pytest:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `missing_number`, `generate_missing_number_cases`, `k_rotate`, `largest_element`, `lower_bound`, `sort_cabs`, `make_zeroes`, `rank_students`, `rotate_image`, `sort_fruits` |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `heap_sort`, `bubble_sort`, `merge_sort_2d`, `binary_search` |
| `dsakit.recursion` | `find_all_occurrences`, `is_sorted`, `factorial`, `fibonacci`, `fibonacci_recursive`, `power`, `first_occurrence`, `last_occurrence`, `decreasing`, `increasing` |
| `dsakit.patterns` | Text patterns returned as lists of lines: `rectangle`, `right_triangle`, `number_triangle`, `repeated_number_triangle`, `inverted_triangle`, `inverted_number_triangle`, `pyramid`, `inverted_pyramid`, `diamond`, `arrow`, `binary_triangle` |
| `dsakit.stack` | `Stack` (list-backed, with `insert_at_bottom` and `reverse`) and `LinkedStack` (node-backed) |
| `dsakit.circular_queue` | `CircularQueue`, a fixed-capacity ring buffer |
| `dsakit.vector` | `DynamicArray`, an array that doubles its capacity when full |
| `dsakit.heap` | `MinHeap` |
| `dsakit.hashtable` | `HashTable`, string keys with separate chaining and growth past a 0.7 load factor |
| `dsakit.linked_list` | `LinkedList`, with `push_front`, `push_back`, `insert`, `pop_front`, `pop_back`, `reverse` and `kth_last` |
| `dsakit.trie` | `Trie`, with `insert`, `search` and `starts_with` |
| `dsakit.greedy` | `fractional_knapsack`, `Job`, `job_sequencing` |
| `dsakit.disjoint_set` | `DisjointSet`, with path compression and union by size |
| `dsakit.graph` | `Graph` (`add_edge`, `bfs`, `dfs`, `dfs_iterative`, `from_adjacency_matrix`), `adjacency_list`, `adjacency_matrix`, `topological_sort` |
| `dsakit.shortest_paths` | `dijkstra`, `bellman_ford`, `floyd_warshall`, `NegativeCycleError` |
| `dsakit.spanning_tree` | `kruskal_mst`, `prim_mst` |

## Examples

```python
from dsakit.sorting import merge_sort, binary_search
from dsakit.heap import MinHeap
from dsakit.trie import Trie
from dsakit.spanning_tree import prim_mst

print(merge_sort([5, 2, 9, 1]))          # [1, 2, 5, 9]
print(binary_search([1, 2, 5, 9], 5))     # 2

heap = MinHeap()
for mark in [90, 80, 12, 13, 15, 56, 94]:
    heap.push(mark)
print(heap.pop())                         # 12

trie = Trie()
trie.insert("apple")
print(trie.search("apple"), trie.starts_with("app"))   # True True

edges = [(0, 1, 7), (0, 3, 8), (1, 3, 3), (1, 2, 6), (3, 2, 4),
         (3, 4, 3), (2, 4, 2), (2, 5, 5), (4, 5, 2)]
print(prim_mst(6, edges))                 # 17
```

## Conventions

- Sorting functions return a new sorted list and leave their input alone.
- Graph edges are `(u, v)` pairs, or `(u, v, weight)` triples for the
  weighted algorithms. Vertices are numbered from zero everywhere except
  `adjacency_list` and `adjacency_matrix`, which take vertices
  `1..vertex_count`.
- `dijkstra` treats edges as undirected and rejects negative weights;
  `bellman_ford` treats edges as directed and raises `NegativeCycleError`
  for a reachable negative cycle. Unreachable vertices get `math.inf`.
- `Graph.dfs` gives the order of a recursive depth-first walk;
  `Graph.dfs_iterative` gives the order of an explicit stack that marks
  vertices when they are pushed. `topological_sort` raises `ValueError`
  on a cycle.
- Taking from an empty container (`pop`, `peek`, `front`, `back`) raises
  `IndexError`; pushing onto a full `CircularQueue` raises `OverflowError`.
- `HashTable.search` returns `None` for a missing key, while
  `table[key]` raises `KeyError`.

## What it does not do

This is a library only. It has no command-line program and no interactive
menus: every structure and algorithm is used by importing it and calling
it from Python.
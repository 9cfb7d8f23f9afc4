# algokit

A collection of classic algorithms and data structures written in plain Python
with no third-party dependencies. It is a library only: there is no
command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bucket_sort`, `counting_sort`, `cycle_sort`, `heap_sort`, `insertion_sort` |
| `algokit.numbers` | `count_set_bits`, `climb_stairs`, `factorial`, `factorial_iterative`, `fibonacci`, `fibonacci_top_down`, `fibonacci_bottom_up`, `gcd`, `PrimeSieve`, `is_prime` |
| `algokit.arrays` | `transpose`, `reflect`, `rotate_clockwise`, `stock_span`, `insert_at_start`, `inverse`, `max_subarray_sum` |
| `algokit.dynamic` | `knapsack_top_down`, `knapsack_bottom_up`, `longest_common_subsequence` |
| `algokit.expressions` | `evaluate_postfix`, `is_matching`, `is_balanced` |
| `algokit.graphs` | `Graph` (with `bfs` and `dfs`), `dijkstra`, `kahn_topological_sort`, `topological_sort`, `CycleError` |
| `algokit.connectivity` | `Edge`, `UnionFind`, `kruskal`, `strongly_connected_components` |
| `algokit.linked_list` | `Node`, `LinkedList`, `has_cycle`, `split`, `add_two_numbers` |

The sorting functions return a new ascending list and leave their input
alone. `bucket_sort` and `counting_sort` take non-negative integers only and
raise `ValueError` otherwise.

## Examples

```python
from algokit.sorting import heap_sort
from algokit.numbers import climb_stairs, gcd, is_prime
from algokit.expressions import evaluate_postfix, is_balanced
from algokit.dynamic import knapsack_bottom_up, longest_common_subsequence
from algokit.arrays import rotate_clockwise, stock_span

heap_sort([39, 43, 6, -1, 0, 43, 65, 78, 3, 200])   # [-1, 0, 3, 6, 39, 43, 43, 65, 78, 200]
climb_stairs(10)                                     # 89
gcd(6, 9)                                            # 3
is_prime(45)                                         # False
is_balanced("({[]})")                                # True
evaluate_postfix("abc*+", {"a": 1, "b": 2, "c": 3})  # 7.0
longest_common_subsequence("aggtab", "gxtxayb")      # 4
knapsack_bottom_up([10, 20, 10, 15], [2, 2, 3, 1], 30)  # 55
rotate_clockwise([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [[7, 4, 1], [8, 5, 2], [9, 6, 3]]
stock_span([100, 80, 60, 70, 60, 75, 85])            # [1, 1, 1, 2, 1, 4, 6]
```

Graphs:

```python
from algokit.graphs import Graph, kahn_topological_sort, CycleError

g = Graph()
for u, v in [(0, 1), (0, 4), (1, 2), (2, 3), (2, 4), (3, 4), (3, 5)]:
    g.add_edge(u, v)
g.bfs(0)   # [0, 1, 4, 2, 3, 5]
g.dfs(0)   # [0, 1, 2, 3, 4, 5]

kahn_topological_sort(6, [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)])
# [4, 5, 2, 0, 3, 1]; a cyclic graph raises CycleError
```

`dijkstra` works on undirected graphs given as `(v1, v2, weight)` triples and
returns `math.inf` for vertices that cannot be reached.

Spanning trees:

```python
from algokit.connectivity import kruskal

kruskal([(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)], 4)
# [Edge(start=2, end=3, weight=4), Edge(start=0, end=3, weight=5), Edge(start=0, end=1, weight=10)]
```

Linked lists:

```python
from algokit.linked_list import LinkedList, split

numbers = LinkedList([1, 2, 3, 4, 5, 6, 7])
first, second = split(numbers.head)
first.data, second.data   # (1, 5)
```

`add_two_numbers` takes two list heads that hold digits, most significant
first, and returns the head of a new list holding their sum.

## What it does not include

The package has no search functions, no standalone priority-queue class and no
binary-tree types or traversals. For a heap, `heapq` from the standard library
does the job.
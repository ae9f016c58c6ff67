# dsakit

Compact implementations of classic data structures and algorithms, meant for
reading, experimenting and learning. There are no dependencies beyond the
standard library.

- `dsakit.containers`: a bounded `Stack` (LIFO) and `Queue` (FIFO). Going past
  their limits raises `ContainerFullError` (a subclass of `OverflowError`) or
  `ContainerEmptyError` (a subclass of `IndexError`).
- `dsakit.graph`: an adjacency-matrix `Graph`, directed or undirected, with
  breadth-first and depth-first traversal.
- `dsakit.findmax`: `find_max`, a divide-and-conquer maximum search.
- `dsakit.knapsack`: greedy 0/1 knapsack selection by value, by weight or by
  value/weight ratio.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Stack and queue

```python
from dsakit.containers import Stack, Queue

stack = Stack(100)          # capacity defaults to 100
for value in (15, 12, 10):
    stack.push(value)
stack.pop()                 # returns 10
stack.peek()                # 12
print(list(stack))          # [12, 15], top first
len(stack)                  # 2

queue = Queue(100)
for value in (10, 20, 30):
    queue.enqueue(value)
queue.dequeue()             # returns 10
print(list(queue))          # [20, 30], front first
```

Both containers have `is_empty()` and `is_full()`. A capacity below 1 raises
`ValueError`.

`Queue` is a linear queue. Slots freed by `dequeue()` are reused only after
the queue has been emptied completely. Until then, `is_full()` can report
`True` while the queue holds fewer than `capacity` values.

### Graph

```python
from dsakit.graph import Graph

g = Graph(7, directed=False)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6)]:
    g.add_edge(u, v)
g.has_edge(1, 0)            # True, since the graph is undirected
print(g.bfs(0))             # [0, 1, 2, 3, 4, 5, 6]
print(g.dfs(0))             # [0, 2, 6, 5, 1, 4, 3]
print(g.format_matrix())    # rows of "0 "/"1 " cells
```

Vertices are numbered `0 .. vertices - 1`. A vertex outside that range raises
`IndexError`.

`dfs` is stack-based. It marks a vertex when it pushes it and pushes
neighbours in ascending order, so the highest-numbered neighbour is visited
first.

### Maximum search

```python
from dsakit.findmax import find_max

find_max([3, 9, 4, 1])      # 9
```

`find_max` accepts any iterable of comparable values. An empty input raises
`ValueError`.

### Greedy knapsack

```python
from dsakit.knapsack import Strategy, format_items, format_selection, make_items, pick_items

items = make_items([(60, 10), (100, 20), (120, 30)])   # (value, weight), numbered from 1
selection = pick_items(items, 50, Strategy.RATIO)
selection.taken             # the Item objects taken, in the order taken
selection.total_value
selection.total_weight
selection.remaining
print(format_items(items))
print(format_selection(selection, Strategy.RATIO))
```

`Strategy` has three members:

| Member | Value | Order in which items are considered |
| --- | --- | --- |
| `Strategy.VALUE` | 1 | highest value first |
| `Strategy.WEIGHT` | 2 | lowest weight first |
| `Strategy.RATIO` | 3 | highest value/weight ratio first |

Items are taken whole, in that order, while they still fit. `Item.ratio` is
infinite for an item of weight 0.

## Commands

Each module also provides a small demonstration command:

```
dsakit-containers               # push/pop and enqueue/dequeue demonstration
dsakit-graph [bfs|dfs|matrix]   # traversal of a sample tree (default: bfs), or a sample adjacency matrix
dsakit-findmax                  # reads a count and that many integers from stdin, prints the maximum
dsakit-knapsack                 # interactive greedy knapsack session on stdin
```

Each of them also runs as `python -m dsakit.<module>`.
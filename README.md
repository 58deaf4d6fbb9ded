# dsakit

A small collection of classic data structures and graph algorithms in plain
Python, with no third-party dependencies.

## What is inside

| Module             | Contents                                                                  |
|--------------------|---------------------------------------------------------------------------|
| `dsakit.aa`        | `AATree`: AA tree with `insert`, `search`, `in` and `inorder`              |
| `dsakit.avl`       | `Leaderboard` of `Player(player_id, score)` kept in an AVL tree by score  |
| `dsakit.bst`       | `BST`: binary search tree with `postorder`, `height`, `height_iterative`, `sum_up` and `==` |
| `dsakit.splay`     | `SplayTree` with `insert`, `preorder` and `in`                            |
| `dsakit.heap`      | `MinHeap` with `insert`, `delete_min`, `items` and `len()`                |
| `dsakit.btree`     | `BTree` of minimum degree 2 with `insert`, `remove`, `levels`, `render`   |
| `dsakit.redblack`  | `RedBlackTree` with `insert`, `inorder`, `render`; node colours as `Color` |
| `dsakit.maze`      | `Maze`: `dfs` and `bfs` paths from the top-left to the bottom-right cell  |
| `dsakit.dijkstra`  | `dijkstra(graph, source)` on an adjacency matrix and `path_to(parent, target)` |
| `dsakit.kruskal`   | `kruskal(edges, vertex_count)` with `Edge` and `DisjointSet`              |
| `dsakit.prims`     | `prims(graph)` on an adjacency matrix, returning `Edge` objects           |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the library

```python
from dsakit.aa import AATree
from dsakit.heap import MinHeap
from dsakit.dijkstra import dijkstra, path_to

tree = AATree([10, 20, 5, 15, 25])
print(tree.inorder())         # [5, 10, 15, 20, 25]
print(5 in tree)              # True

heap = MinHeap([10, 5, 15, 2])
print(heap.delete_min())      # 2
print(len(heap))              # 3

graph = [
    [0, 10, 3, -1],
    [-1, 0, 1, 2],
    [-1, 4, 0, 8],
    [-1, -1, 9, 0],
]
distance, parent = dijkstra(graph, 0)
print(path_to(parent, 3))     # [0, 2, 1, 3]
print(distance[3])            # 9
```

Notes on behaviour:

- `AATree`, `AVL Leaderboard`, `BST` and `SplayTree` ignore a key that is
  already present (the leaderboard keeps the first player with a given score).
  `BTree` stores a repeated key again, and `RedBlackTree` places an equal value
  to the right.
- `MinHeap.delete_min` raises `IndexError` on an empty heap.
- In `dijkstra`, `-1` (`NO_EDGE`) marks a missing edge; unreachable vertices
  get distance `math.inf` and parent `None`.
- In `prims`, a weight of `0` marks a missing edge and weights of `INF`
  (100000) or more are ignored; unreachable vertices are left out.
- `kruskal` and `prims` return edges in the order they are chosen.
- `Maze` treats `0` as open and any other value as a wall; it raises
  `ValueError` for an empty or ragged grid. `dfs` and `bfs` return a list of
  `(row, col)` cells, or `None` when the goal cannot be reached.

## Limits

- Deletion exists only for the AVL leaderboard (`Leaderboard.delete`) and the
  B-tree. The AA, splay, red-black and plain search trees support insertion
  and lookup or listing only.
- `BTree.remove` only removes keys held in a leaf reached by following a child
  when the key is greater than every key in a node; any other key raises
  `KeyError`, even if it is stored. Nodes are not refilled or merged after a
  removal.
- `BST.sum_up` replaces every key with its subtree sum, so the tree is no
  longer a search tree afterwards.

## Demonstrations

Each module has a `main` function that builds a sample structure and prints
the result. They are installed as commands:

```
dsakit-aa          # AA tree contents and a lookup
dsakit-avl         # leaderboard before and after removing a player
dsakit-bst         # equality check, post-order listing, heights, subtree sums
dsakit-splay       # pre-order listing of a splay tree
dsakit-heap        # heap contents before and after removing the minimum
dsakit-btree       # B-tree levels before and after a deletion
dsakit-redblack    # in-order listing with node colours
dsakit-maze        # DFS and BFS paths through a 5x5 maze
dsakit-dijkstra    # shortest path and its cost on a four-node graph
dsakit-kruskal     # spanning tree between departments, by Kruskal's method
dsakit-prims       # spanning tree between departments, by Prim's method
```

The commands take no options beyond `-h`/`--help`.
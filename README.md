# dslab

Classic data structures and algorithms in plain Python, using only the
standard library.

## Contents

| Module | What it provides |
| --- | --- |
| `dslab.binary_tree` | `TreeNode` and `BinaryTree`: built from a preorder listing, with recursive and iterative traversals, mirroring, height, leaf and internal-node counts, deep copying and clearing |
| `dslab.heap_sort` | `heapify`, `build_min_heap` and `heap_sort` on a min-heap |
| `dslab.bst` | `MirrorableBST`: a binary search tree that can be mirrored and still be searched, trimmed and asked for its minimum and maximum |
| `dslab.threaded_bst` | `ThreadedNode` and `ThreadedBST`: an inorder-threaded search tree with insertion, deletion and traversals that need no stack |
| `dslab.linear_probing` | `LinearProbingTable`: an open-addressing table (10 slots by default) with insertion with or without replacement; `TableFullError` when it is full |
| `dslab.chained_hash` | `ChainedHashTable`: a table with separate chaining (10 buckets by default) |
| `dslab.graph` | `Graph`: an undirected adjacency-list graph with BFS, DFS, component counting and degrees |
| `dslab.mst` | `prim` and `kruskal` minimum spanning trees, with `Edge` and `UnionFind` |
| `dslab.optimal_bst` | `OBSTNode`, `build_optimal_bst` for a minimum-cost search tree and `render_tree` to outline it |
| `dslab.avl_dictionary` | `AVLDictionary`: a keyword-to-meaning dictionary kept balanced as an AVL tree, reporting the rotations it makes |
| `dslab.student_file` | `Student` and `StudentFile`: a sequential file of student records |
| `dslab.employee_file` | `Employee`, `EmployeeIndex` and `EmployeeFile`: a direct-access record file located through a hashed index of offsets |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

A tree from a preorder listing, where `-1` marks an empty child:

```python
from dslab.binary_tree import BinaryTree

tree = BinaryTree.from_preorder([1, 2, -1, -1, 3, -1, -1])
tree.inorder()            # [2, 1, 3]
tree.height()             # 1
tree.count_leaves()       # 2
tree.mirror()
tree.inorder()            # [3, 1, 2]
```

Heap sort works in place and returns the heap left after each extraction:

```python
from dslab.heap_sort import heap_sort

values = [5, 3, 8, 1]
heap_sort(values)         # [[3, 5, 8], [5, 8], [8], []]
values                    # [1, 3, 5, 8]
```

Minimum spanning trees return the total cost and the chosen edges:

```python
from dslab.mst import Edge, kruskal

kruskal(3, [Edge(0, 1, 4), Edge(1, 2, 1), Edge(0, 2, 3)])
# (4, [Edge(u=1, v=2, weight=1), Edge(u=0, v=2, weight=3)])
```

A balanced dictionary:

```python
from dslab.avl_dictionary import AVLDictionary

words = AVLDictionary()
words.add("apple", "a fruit")
words.add("banana", "another fruit")
words.items()             # [("apple", "a fruit"), ("banana", "another fruit")]
words.find("banana")      # ("another fruit", 2)
print(words.render())
```

Hash tables:

```python
from dslab.chained_hash import ChainedHashTable
from dslab.linear_probing import LinearProbingTable

chained = ChainedHashTable()
chained.insert(12)
chained.insert(22)
chained.find(22)          # 2

probing = LinearProbingTable()
probing.bulk_insert([11, 21, 31], False)   # [0, 1, 2]
probing.search(21)        # 2
```

## Record files

`StudentFile` and `EmployeeFile` store one JSON record per line. Opening
either one empties the file at the given path. `EmployeeFile` keeps the byte
offset of every record in an `EmployeeIndex` and reads a record by seeking
straight to it; deleting a record rewrites the file and updates the offsets
of the records that remain.

## What the package does not do

It is a library only: there is no command to run and no interactive menu.
The index of an `EmployeeFile` lives in memory, so records written by an
earlier `EmployeeFile` cannot be found after the object is gone.
# csalgos

Classic data structures and algorithms in plain Python, each with a small
command-line front end. No third-party dependencies.

## Modules

- `csalgos.heap` – `MinHeap`, a binary min-heap with a fixed `capacity`.
  `add` raises `HeapFullError` when the heap is full; `remove_min` and
  `peek_min` raise `HeapEmptyError` when it is empty. It also offers
  `is_empty()`, `len()` and iteration over the stored values in heap order.
  Values only need to support `<`.
- `csalgos.avl_node` – `AVLNode`, a tree node with `data`, `left`, `right`,
  `parent` and `height`, plus `is_leaf()`, `is_root()` and `depth()`.
- `csalgos.avl` – `AVLTree`, a self-balancing search tree of distinct
  integers: `insert` (a duplicate changes nothing), `remove` (raises
  `KeyError` for a missing value), `find` (returns the node or `None`),
  `in`, `len()`, ascending iteration, and `render()`, which draws the tree
  sideways with the left and right subtree heights of every node.
- `csalgos.sorters` – `BubbleSorter`, `HeapSorter`, `MergeSorter`,
  `QuickSorter` and `SystemSorter`, all subclasses of `Sorter`, which holds
  a list of strings in `values` and can `read` them from and `write` them to
  a text stream. `make_sorter(kind)` builds one by name (`bubble`, `heap`,
  `merge`, `quick`, `sys`) and raises `ValueError` for any other name.
  `merge_sort` and `quick_sort` return sorted copies of a sequence.
- `csalgos.stack` – `Stack` with `push`, `pop`, `top`, `is_empty` and
  `len()`; `pop` and `top` raise `IndexError` on an empty stack.
- `csalgos.intervals` – `Interval` (name, start, finish; `display()` draws
  it as a bar of `X`), `Classroom` (finish time and an id, numbered 1, 2, …
  when not given), `read_intervals`, `read_classrooms`, and
  `min_classrooms`, the greedy count of rooms a set of lectures needs.
- `csalgos.fibonacci` – `fib_recursive`, `fib_memo` and `fib_table`, with
  the sequence starting 1, 1, 2, 3, …. `fib_memo` and `fib_table` raise
  `ValueError` for a negative argument; `fib_recursive` returns 1 for it.
- `csalgos.arguments` – `concat_args` joins strings, `sum_args` adds the
  integer each string starts with, and `unique_sorted` returns the distinct
  integers ascending.

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

```python
from csalgos.heap import MinHeap
from csalgos.avl import AVLTree
from csalgos.stack import Stack
from csalgos.fibonacci import fib_table
from csalgos.sorters import make_sorter

heap = MinHeap(10)
for value in ["pear", "apple", "fig"]:
    heap.add(value)
heap.remove_min()          # "apple"

tree = AVLTree()
for value in [9, 3, -3, 7]:
    tree.insert(value)
7 in tree                  # True
list(tree)                 # [-3, 3, 7, 9]
print(tree.render())

stack = Stack()
stack.push("a")
stack.push("b")
stack.pop()                # "b"

fib_table(10)              # 89

sorter = make_sorter("merge")
sorter.values = ["pear", "apple", "fig"]
sorter.sort()
sorter.values              # ["apple", "fig", "pear"]
```

Reading lectures and counting classrooms:

```python
import io
from csalgos.intervals import read_intervals, min_classrooms

lectures = read_intervals(io.StringIO("A 0 3\nB 1 4\nC 3 5\n"))
min_classrooms(lectures)   # 2
```

`read_intervals` reads `name start finish` triples and stops at the first
one that does not parse.

## Commands

Each command returns exit status 1 and writes a message to standard error
on bad usage or bad input.

Sort the strings in a file. The file holds a count followed by that many
whitespace-separated words. The sort type is one of `bubble`, `heap`,
`merge`, `quick` or `sys`; add `-print` to write the result, one word a line.

```
csalgos-sort words.txt merge -print
```

Count the classrooms needed for the lectures in a file, one
`name start finish` per line; prints `needed N classrooms`:

```
csalgos-classrooms lectures.txt
```

Build an AVL tree from 9, 3, -3, 7 and any extra integers given, print it,
then delete values read from standard input until `0` or end of input,
printing the tree after each deletion:

```
csalgos-avl 12 5 20
```

Print the arguments one per line, last first:

```
csalgos-stack one two three
```

Print the n-th Fibonacci number, optionally choosing the method
(`recursive`, `memo` or `table`, the default):

```
csalgos-fib 40
csalgos-fib 20 memo
```

Print a greeting, then the arguments joined as one string and summed as
integers:

```
csalgos-args 1 2 3
```

## Limits

Everything is held in memory; nothing is stored between runs. The AVL tree
holds integers only, and the sorters sort strings by plain string order.
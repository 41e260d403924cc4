# dsakit

Classic data structures and algorithms in plain Python: bounded arrays,
linear and binary search, the usual sorting algorithms, array-backed and
linked stacks and queues, infix-to-postfix conversion, bracket matching,
graph traversal, binary search trees and AVL trees. No third-party
dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `BoundedArray`, `ArrayFullError`, `make_2d_array`, `linear_search`, `binary_search`, `insert_at`, `delete_at`, `display` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `merge_sorted`, `quick_sort`, `partition`, `format_array` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `TwoStacks`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.expressions` | `infix_to_postfix`, `is_balanced`, `matches`, `precedence`, `is_operator` |
| `dsakit.graphs` | `bfs`, `dfs` over an adjacency matrix |
| `dsakit.binary_tree` | `Node`, `pre_order`, `in_order`, `post_order` |
| `dsakit.bst` | `is_bst`, `search`, `iterative_search`, `insert`, `delete`, `in_order_predecessor` |
| `dsakit.avl` | `AVLNode`, `insert`, `left_rotate`, `right_rotate`, `height`, `balance_factor`, `pre_order` |
| `dsakit.guessing` | the number-guessing game: `Hint`, `judge`, `play`, `main` |
| `dsakit.stack_menu` | the menu-driven stack: `run_menu`, `main` |

## Usage

### Arrays, sorting and searching

The sorts work in place on any mutable sequence; `bubble_sort` also
returns the number of passes it made before stopping early.

```python
from dsakit.sorting import quick_sort, merge_sorted, format_array
from dsakit.arrays import binary_search, linear_search, insert_at, delete_at

values = [12, 54, 65, 7, 23, 9]
quick_sort(values)
print(format_array(values))                # 7 9 12 23 54 65

merge_sorted([1, 4, 9], [2, 3, 10])        # [1, 2, 3, 4, 9, 10]

binary_search([4, 6, 8, 10, 45, 50], 50)   # 5
linear_search([4, 6, 8, 10, 45, 50], 9)    # -1

arr = [7, 8, 12, 27, 88]
insert_at(arr, 45, capacity=100, index=3)  # arr == [7, 8, 12, 45, 27, 88]
delete_at(arr, 1)                          # returns 8
```

`insert_at` raises `ArrayFullError` when the list already holds `capacity`
elements, and both `insert_at` and `delete_at` raise `IndexError` for an
index out of range.

### Stacks and queues

```python
from dsakit.stacks import ArrayStack, LinkedStack, TwoStacks
from dsakit.queues import ArrayQueue, CircularQueue, LinkedQueue

stack = ArrayStack(8)
stack.push(56)
stack.push(6)
stack.top()        # 6
stack.bottom()     # 56
stack.pop()        # 6

linked = LinkedStack()
for value in (78, 7, 12):
    linked.push(value)
linked.peek(1)     # 12 (positions count from the top, starting at 1)
list(linked)       # [12, 7, 78]

queue = CircularQueue(4)   # holds at most 3 elements
queue.enqueue(12)
queue.dequeue()    # 12
```

Pushing onto a full stack raises `StackOverflowError`; popping or reading
an empty one raises `StackUnderflowError`. Queues raise `QueueFullError`
and `QueueEmptyError` in the same situations. `ArrayQueue` never reuses
the slots it has dequeued from, so it reports full once `size` elements
have been enqueued in total. `TwoStacks(size)` shares `size` slots between
two stacks, `size // 2` for the first and the rest for the second.

### Expressions

```python
from dsakit.expressions import infix_to_postfix, is_balanced

infix_to_postfix("x-y/z-k*d")   # "xyz/-kd*-"
is_balanced("{[()]}")           # True
is_balanced("8)*(9")            # False
```

`infix_to_postfix` handles single-character operands and the operators
`+ - * /`; every other character is copied to the output as an operand.

### Graphs

```python
from dsakit.graphs import bfs, dfs

adjacency = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [1, 1, 0, 1, 1, 0, 0],
    [1, 0, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]
bfs(adjacency, 0)   # [0, 1, 2, 3, 4, 5, 6]
dfs(adjacency, 6)   # visiting order from node 6
```

Both raise `ValueError` for a matrix that is not square and `IndexError`
for a start node out of range.

### Trees

```python
from dsakit.binary_tree import Node, in_order
from dsakit import bst, avl

root = Node(20)
for key in (3, 28, 1, 4, 30, 26):
    bst.insert(root, key)
in_order(root)            # [1, 3, 4, 20, 26, 28, 30]
bst.is_bst(root)          # True
bst.search(root, 26)      # the Node holding 26
root = bst.delete(root, 3)

avl_root = None
for key in (1, 2, 4, 5, 6, 3):
    avl_root = avl.insert(avl_root, key)
avl.pre_order(avl_root)
```

Inserting a key that is already present leaves either tree unchanged.

## Command-line programs

A number-guessing game: guess a number between 1 and 100 and get told to
go higher or lower. `--secret N` fixes the number instead of picking a
random one. The program exits with status 1 if input ends before the
number is guessed.

```
dsakit-guess
dsakit-guess --secret 42
```

An interactive, menu-driven stack (1 push, 2 pop, 3 display, 4 exit). It
asks for the stack size first unless `--size` is given.

```
dsakit-stack
dsakit-stack --size 5
```

## What it does not do

The structures hold values in memory only; nothing is saved to disk.
There is no deletion for AVL trees and no graph representation other than
an adjacency matrix.
# bstlab

A small, unbalanced binary search tree library with two interactive console programs.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Programs

### `bstlab-digits`

```
bstlab-digits [--seed N]
```

This program:

1. Asks how many numbers to insert. The amount must be at least 1.
2. Generates that many random integers in the range 0–999, prints them and inserts each one into a tree. `--seed` makes the sequence repeatable.
3. Prints the requested count and the node count.
4. Lists the values in ascending order, then in descending order.
5. Asks for one value to delete, removes it and prints the tree again in ascending order. If the value is not in the tree, it prints `Value not found in tree` and exits with status 1.

### `bstlab-routers`

```
bstlab-routers
```

This program asks how many Wi-Fi routers to enter. For each router it asks for:

- the brand name
- the number of Ethernet ports, which may not be more than 32
- whether the router supports 5 GHz (`yes`/`no`)

Routers are ordered first by brand name, then by port count, then by the 5G mark. The program prints the tree in both orders. It then asks for a router to delete and reports whether the router was found. It prints the tree once more.

### Input rules

Both programs are strict about input. Each answer must be a single, non-empty line that fits the expected length. Numbers must be plain non-negative decimal integers below 65535, with no sign, spaces or leading zeros. Any other input, or a router with invalid data, ends the program with exit status 1.

## Library use

### `bstlab.tree.BinaryTree`

`BinaryTree` takes a `precedes(a, b)` function that returns true when `a` belongs before `b`. An item that does not precede an existing node goes to that node's right, so equal items keep their insertion order.

```python
from bstlab.tree import BinaryTree

tree = BinaryTree(lambda a, b: a < b)
for value in (5, 3, 8, 1):
    tree.insert(value)

len(tree)                 # 4
list(tree)                # [1, 3, 5, 8]
list(tree.ascending())    # [1, 3, 5, 8]
list(tree.descending())   # [8, 5, 3, 1]
tree.extract(3)           # 3
tree.clear()
```

`extract` removes the first node equal to the item and returns the stored value. It raises `KeyError` if there is no such node.

### `bstlab.wifi`

- `Router(vendor, port_count, has_5g)` is a frozen record. The vendor name is cut to 19 characters.
- `FiveG` has the members `IS_5G`, `NOT_5G` and `UNDEFINED`.
- `Router.check()` raises `InvalidPortCount` when there are more than 32 ports. It raises `Invalid5GMark` when the mark is `UNDEFINED`. Both are subclasses of `RouterError`.
- `compare`, `compare_counts` and `precedes` define the router ordering used by the tree.
- `parse_5g_mark` maps `yes` and `no` to a mark. Any other text maps to `UNDEFINED`.
- `read_5g_mark` and `read_router` prompt on the console and read the answers.

### `bstlab.prompts`

- `read_line(stream, buffer_size)` reads one bounded, non-empty line.
- `read_int(message, buffer_size, stream, out)` prompts for and validates a number as described under the input rules.

Both raise `InputError`, a subclass of `ValueError`, when the input is rejected.

## Limitations

Trees live only in memory. Nothing is saved between runs. The tree does no balancing.
# leafstack

A small console game built on AVL trees and stacks.

Each line of an input file holds whitespace-separated integers. Reading of a
line stops at the first token that does not start with an integer. Every line
becomes an AVL tree of its distinct numbers, and every node of the tree that
lacks a child is pushed onto a stack in post-order.

Rounds are then played while any tree is non-empty. The pair whose stack top is
smallest pops its top, and the pair whose stack top is largest (an empty stack
counts as the largest) either pops its top or, if its stack is empty, leaves the
game. After every departure the remaining trees are shown as a row of letters.
Each letter comes from the tree's sum: the total of the nodes reachable from
the root through nodes that have both children, mapped onto `A`–`Z`.

At the end the game prints a framed box with the final letter ("Son karakter")
and the line number of the tree it came from ("AVL No").

## Installation

```
pip install .
```

## Usage

```
leafstack [path] [--lines N]
```

- `path` — the input file, `veri.txt` in the current directory by default.
- `--lines N` — how many pairs to build, one per line (default 500). Pairs
  past the last line of the file stay empty.

When writing to a terminal, the screen is cleared after each row of letters.
If the file cannot be opened, `File could not be opened.` is written to
standard error and the command exits with status 1; it also exits with status 1
if no line yields a non-empty tree.

## Library use

```python
from leafstack.game import load_pairs, play, format_result

with open("veri.txt") as handle:
    pairs = load_pairs(handle, 500)

result = play(pairs, on_frame=print)
print(format_result(result), end="")
```

`play` consumes the stacks of the pairs it is given and returns a `GameResult`
with `letter` and `index`; it raises `ValueError` when no pair holds a
non-empty tree. Each `Pair` has `tree`, `stack`, `index` and a `letter`
property.

The building blocks are also usable on their own:

- `leafstack.avl.AVLTree` — an AVL tree of unique integers with `insert`,
  `remove` (raises `KeyError` for a missing item), `find` (returns `None` for a
  missing item), `empty`, `clear`, `postorder`, `insert_leaves_to`, `sum`,
  `len()` and `in`.
- `leafstack.stack.Stack` — an integer stack with `push`, `pop`, `top`,
  `empty` and `len()`; `pop` and `top` raise `IndexError` when empty.
- `leafstack.letters.to_ascii` — maps an integer onto the character codes of
  `A` to `Z` (65–90 for non-negative values).

## Running the tests

```
pip install .[test]
pytest
```
"""The leaf-stack elimination game played over a list of AVL tree / stack pairs."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Optional

from leafstack.avl import AVLTree
from leafstack.letters import to_ascii
from leafstack.stack import Stack

LINE_COUNT = 500
DEFAULT_DATA_FILE = "veri.txt"
BOX_WIDTH = 25

_INT_PREFIX = re.compile(r"[+-]?\d+")


@dataclass(eq=False)
class Pair:
    """A tree, the stack of its leaves, and the 1-based position it was loaded at."""

    tree: AVLTree = field(default_factory=AVLTree)
    stack: Stack = field(default_factory=Stack)
    index: int = 0

    @property
    def letter(self) -> str:
        """The character the tree's inner-node sum maps to."""
        return chr(to_ascii(self.tree.sum()))


@dataclass(frozen=True)
class GameResult:
    """The final character and the number of the tree it came from."""

    letter: str
    index: int


def _read_ints(line: str) -> Iterator[int]:
    """Yield the leading integers of ``line``, stopping at the first non-integer."""
    for token in line.split():
        match = _INT_PREFIX.match(token)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(token):
            return


def load_pairs(lines: Iterable[str], count: int) -> list[Pair]:
    """Build ``count`` pairs, one per line; pairs past the last line stay empty."""
    pairs = [Pair(index=position) for position in range(1, count + 1)]
    for pair, line in zip(pairs, lines):
        for number in _read_ints(line):
            pair.tree.insert(number)
        pair.tree.insert_leaves_to(pair.stack)
    return pairs


def _stack_key(pair: Pair) -> tuple[int, int]:
    # Empty stacks rank above every non-empty one.
    if pair.stack.empty():
        return (1, 0)
    return (0, pair.stack.top())


def _frame(pairs: Sequence[Pair]) -> str:
    return "".join(pair.letter for pair in pairs)


def play(
    pairs: Iterable[Pair],
    on_frame: Optional[Callable[[str], None]] = None,
) -> GameResult:
    """Run the game until no pair with a non-empty tree is left.

    Each round the pair with the smallest stack top and the pair with the
    largest (empty stacks counting as largest) either pop their top or, when
    their stack is empty, leave the game. After every departure ``on_frame``
    receives the letters of the pairs still in play. The stacks of the given
    pairs are consumed.
    """
    remaining = list(pairs)
    winner: Optional[Pair] = None

    def drop(position: int) -> None:
        nonlocal winner
        winner = remaining[-1]
        del remaining[position]
        if on_frame is not None:
            on_frame(_frame(remaining))

    while any(not pair.tree.empty() for pair in remaining):
        keys = [_stack_key(pair) for pair in remaining]
        lowest, highest = min(keys), max(keys)
        min_position = keys.index(lowest)
        max_position = len(keys) - 1 - keys[::-1].index(highest)
        min_pair = remaining[min_position]
        max_pair = remaining[max_position]

        if min_pair.stack.empty():
            # Every stack is empty: the first pair leaves, then the last one.
            size = len(remaining)
            drop(min_position)
            if size > 1:
                drop(len(remaining) - 1)
            continue

        min_pair.stack.pop()
        if max_pair.stack.empty():
            drop(max_position)
        else:
            max_pair.stack.pop()

    if winner is None:
        raise ValueError("no pair holds a non-empty tree")
    return GameResult(letter=winner.letter, index=winner.index)


def format_result(result: GameResult) -> str:
    """Render the result as the framed summary box."""
    border = "=" * BOX_WIDTH
    blank = "|" + "|".rjust(BOX_WIDTH - 1)
    lines = [
        border,
        blank,
        f"|  Son karakter: {result.letter}" + "|".rjust(7),
        f"|  AVL No      : {result.index}" + "|".rjust(5),
        blank,
        border,
    ]
    return "\n".join(lines) + "\n"


def _clear_screen() -> None:
    if not sys.stdout.isatty():
        return
    if os.name == "nt":
        subprocess.run(["cmd", "/c", "cls"], check=False)
    else:
        sys.stdout.write("\033[2J\033[H")
        sys.stdout.flush()


def _show_frame(frame: str) -> None:
    sys.stdout.write(frame)
    sys.stdout.flush()
    _clear_screen()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the data file, play the game and print the result box."""
    parser = argparse.ArgumentParser(prog="leafstack", description=__doc__)
    parser.add_argument("path", nargs="?", default=DEFAULT_DATA_FILE)
    parser.add_argument("--lines", type=int, default=LINE_COUNT)
    args = parser.parse_args(argv)

    try:
        with open(args.path, encoding="utf-8") as handle:
            pairs = load_pairs(handle, args.lines)
    except OSError:
        sys.stderr.write("File could not be opened.\n")
        return 1

    try:
        result = play(pairs, _show_frame)
    except ValueError as error:
        sys.stderr.write(f"{error}\n")
        return 1

    sys.stdout.write(format_result(result))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
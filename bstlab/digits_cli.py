"""Command that fills a tree with random numbers, prints it and removes one value."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from bstlab.prompts import InputError, read_int
from bstlab.tree import BinaryTree

MAX_RANDOM_VALUE = 1000


def generate_values(count: int, rng: Optional[random.Random] = None) -> list[int]:
    """Return ``count`` random integers in the range 0..999."""
    rng = random.Random() if rng is None else rng
    return [rng.randrange(MAX_RANDOM_VALUE) for _ in range(count)]


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Insert random numbers into a binary search tree and print them."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for the random number generator"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive session; return the process exit status."""
    args = _parse_args(argv)
    tree: BinaryTree[int] = BinaryTree(lambda a, b: a < b)

    try:
        amount = read_int("Enter amount of numbers to insert into the tree\n")
    except InputError as exc:
        print(exc)
        return 1
    if amount <= 0:
        print("Uncorrect data enteded. Minimal amount of brances is 1.\n")
        return 1

    print("Generated random numbers: \n")
    for value in generate_values(amount, random.Random(args.seed)):
        print(f"{value} ", end="")
        tree.insert(value)

    print(f"\n{amount} - entered count, {len(tree)} result vertex count\n")

    print("Printing tree elements by increasing values\n")
    for value in tree.ascending():
        print(value)

    print("Printing tree elements by decreasing values\n")
    for value in tree.descending():
        print(value)

    try:
        key = read_int("Which value needs to be deleted?\n")
    except InputError as exc:
        print(exc)
        return 1
    try:
        tree.extract(key)
    except KeyError:
        print("Value not found in tree")
        return 1
    print("Value deleted from tree succesfully\n")
    for value in tree.ascending():
        print(value)

    tree.clear()
    print("Tree fully deleted succesfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
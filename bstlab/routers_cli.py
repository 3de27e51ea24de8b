"""Command that builds a tree of routers from console input and removes one."""

from __future__ import annotations

from typing import Optional, Sequence

from bstlab.prompts import InputError, read_int
from bstlab.tree import BinaryTree
from bstlab.wifi import MAX_INT_LENGTH, Router, RouterError, precedes, read_router


def _print_router(router: Router) -> None:
    print(f"{router}\n\n ", end="")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive session; return the process exit status."""
    tree: BinaryTree[Router] = BinaryTree(precedes)

    try:
        amount = read_int(
            "Enter amount of routers to insert into the tree: ", MAX_INT_LENGTH
        )
    except InputError as exc:
        print(exc)
        return 1
    if amount <= 0:
        print("Uncorrect data entered. Minimal amount is 1.")
        return 1

    for number in range(1, amount + 1):
        print(f"\nRouter {number}:")
        try:
            router = read_router()
        except InputError as exc:
            print(exc)
            return 1
        except RouterError:
            return 1
        tree.insert(router)

    print(f"\n{amount} - entered count, {len(tree)} result vertex count\n")

    print("Printing tree elements by increasing values:")
    for router in tree.ascending():
        _print_router(router)

    print("\nPrinting tree elements by decreasing values:")
    for router in tree.descending():
        _print_router(router)

    print("\nEnter data for router to delete:")
    try:
        target = read_router()
    except InputError as exc:
        print(exc)
        return 1
    except RouterError:
        print("Error initializing router data.")
        return 1

    try:
        tree.extract(target)
    except KeyError:
        print("\nRouted not found in tree")
    else:
        print("\nRouter deleted from tree successfully")

    print("\nTree after deleting element:")
    for router in tree.ascending():
        _print_router(router)

    tree.clear()
    print("\nTree fully deleted successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
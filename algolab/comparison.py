"""Count comparisons made when searching a linked list versus a binary search tree."""

from __future__ import annotations

import argparse
import csv
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

DEFAULT_RUNS = 200
DEFAULT_SIZE = 500
VALUE_RANGE = 500
CSV_HEADER = ("Procurado", "Comparacoes_ABB", "Comparacoes_Lista")


@dataclass(slots=True)
class _ListNode:
    value: int
    next: Optional["_ListNode"] = None


@dataclass(slots=True)
class _TreeNode:
    value: int
    left: Optional["_TreeNode"] = None
    right: Optional["_TreeNode"] = None


class LinkedList:
    """Singly linked list that inserts at the head."""

    def __init__(self) -> None:
        self._head: Optional[_ListNode] = None
        self._size = 0

    def insert(self, value: int) -> None:
        """Insert ``value`` at the front of the list."""
        self._head = _ListNode(value, self._head)
        self._size += 1

    def search(self, number: int) -> tuple[bool, int]:
        """Return whether ``number`` is present and how many comparisons it took."""
        comparisons = 0
        for value in self:
            comparisons += 1
            if value == number:
                return True, comparisons
        return False, comparisons

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class BinarySearchTree:
    """Unbalanced binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self._root: Optional[_TreeNode] = None
        self._size = 0

    def insert(self, value: int) -> None:
        """Insert ``value`` into the tree."""
        new = _TreeNode(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def search(self, number: int) -> tuple[bool, int]:
        """Return whether ``number`` is present and how many nodes were visited."""
        comparisons = 0
        node = self._root
        while node is not None:
            comparisons += 1
            if node.value == number:
                return True, comparisons
            node = node.left if number < node.value else node.right
        return False, comparisons

    def __iter__(self) -> Iterator[int]:
        """Yield the values in order."""
        stack: list[_TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size


@dataclass(frozen=True)
class ComparisonResult:
    """Outcome of one search in both structures."""

    target: int
    tree_comparisons: int
    list_comparisons: int


def run_comparison(
    runs: int = DEFAULT_RUNS,
    size: int = DEFAULT_SIZE,
    rng: Optional[random.Random] = None,
) -> list[ComparisonResult]:
    """Grow both structures by ``size`` random values per run and search each once.

    The structures keep their contents from one run to the next.
    """
    rng = rng if rng is not None else random.Random()
    linked = LinkedList()
    tree = BinarySearchTree()
    results = []
    for _ in range(runs):
        for _ in range(size):
            number = rng.randrange(VALUE_RANGE)
            linked.insert(number)
            tree.insert(number)
        target = rng.randrange(VALUE_RANGE)
        _, tree_comparisons = tree.search(target)
        _, list_comparisons = linked.search(target)
        results.append(ComparisonResult(target, tree_comparisons, list_comparisons))
    return results


def write_csv(results: Iterable[ComparisonResult], path) -> None:
    """Write the results as CSV with a header row."""
    with Path(path).open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for result in results:
            writer.writerow(
                (result.target, result.tree_comparisons, result.list_comparisons)
            )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compare search cost in a linked list and a binary search tree."
    )
    parser.add_argument("-o", "--output", default="dados_comparacao.csv")
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    results = run_comparison(args.runs, args.size, random.Random(args.seed))
    try:
        write_csv(results, args.output)
    except OSError:
        print("Erro ao abrir arquivo pra escrita!")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
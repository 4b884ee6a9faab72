"""Huffman compression into a single ``.huff`` file.

Layout of a compressed file: two big-endian header bytes holding 3 bits of
trailing padding and 13 bits of serialized-tree length, then the tree in
pre-order (internal nodes as ``*``, leaves as their byte, with ``*`` and
``\\`` escaped by a backslash), then the packed code bits.
"""

from __future__ import annotations

import argparse
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ALPHABET_SIZE = 256
INTERNAL_SYMBOL = ord("*")
ESCAPE = ord("\\")
OUTPUT_NAME = "compactado.huff"

_BLUE = "\033[1;34m"
_GREEN = "\033[1;32m"
_RED = "\033[31;31m"
_RESET = "\033[0m"
_CLEAR = "\033[2J\033[H"

_INFORMATION_LINES = (
    "\t\t\t===================================",
    "\t\t\t\t    Informações",
    "\t\t\t===================================",
    "",
    "\t\t\tCompactador de arquivos por codificação de Huffman.",
    "",
)

_BANNER_LINES = (
    "",
    "",
    "",
    "\tHUFFMAN",
    "",
    "",
    "",
)

_MENU_LINES = (
    "\t\t\t=============================",
    "\t\t\t\tMenu Principal",
    "\t\t\t=============================",
    "",
    "\t\t\tSelecione o que deseja fazer:",
    "\t\t\t1. Compactar arquivo",
    "\t\t\t2. Descompactar arquivo",
    "\t\t\t3. Sair",
)


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry the byte they stand for."""

    symbol: int
    frequency: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def frequency_table(data: bytes) -> list[int]:
    """Count how often each byte value occurs."""
    table = [0] * ALPHABET_SIZE
    for byte in data:
        table[byte] += 1
    return table


def _insert_ordered(queue: list[HuffmanNode], node: HuffmanNode) -> None:
    # A node goes to the front only if strictly lighter than the front;
    # otherwise it goes before the first later node at least as heavy.
    if not queue or node.frequency < queue[0].frequency:
        queue.insert(0, node)
        return
    position = next(
        (i for i in range(1, len(queue)) if queue[i].frequency >= node.frequency),
        len(queue),
    )
    queue.insert(position, node)


def build_tree(frequencies: Sequence[int]) -> Optional[HuffmanNode]:
    """Build the Huffman tree for a 256-entry frequency table.

    Returns None when every frequency is zero.
    """
    queue: list[HuffmanNode] = []
    for symbol, count in enumerate(frequencies):
        if count > 0:
            _insert_ordered(queue, HuffmanNode(symbol, count))
    while len(queue) > 1:
        first = queue.pop(0)
        second = queue.pop(0)
        parent = HuffmanNode(
            INTERNAL_SYMBOL, first.frequency + second.frequency, first, second
        )
        _insert_ordered(queue, parent)
    return queue[0] if queue else None


def tree_height(node: Optional[HuffmanNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return 1 + max(tree_height(node.left), tree_height(node.right))


def build_codes(root: Optional[HuffmanNode]) -> dict[int, str]:
    """Map each byte in the tree to its code, ``0`` for left and ``1`` for right."""
    codes: dict[int, str] = {}
    if root is None:
        return codes
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf():
            codes[node.symbol] = path
            continue
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))
    return codes


def padding_bits(bit_count: int) -> int:
    """Bits needed to fill the last byte."""
    return (8 - bit_count % 8) % 8


def _needs_escape(symbol: int) -> bool:
    return symbol in (INTERNAL_SYMBOL, ESCAPE)


def serialized_size(root: Optional[HuffmanNode]) -> int:
    """Length in bytes of the pre-order serialization of the tree."""
    if root is None:
        return 0
    if root.is_leaf():
        return 2 if _needs_escape(root.symbol) else 1
    return 1 + serialized_size(root.left) + serialized_size(root.right)


def serialize_tree(root: Optional[HuffmanNode]) -> bytes:
    """Serialize the tree in pre-order, escaping ``*`` and ``\\`` leaves."""
    out = bytearray()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            if _needs_escape(node.symbol):
                out.append(ESCAPE)
            out.append(node.symbol)
            continue
        out.append(INTERNAL_SYMBOL)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return bytes(out)


def encode(data: bytes, codes: Mapping[int, str]) -> str:
    """Concatenate the code of every byte of ``data``."""
    try:
        return "".join(codes[byte] for byte in data)
    except KeyError as exc:
        raise ValueError(f"no code for byte {exc.args[0]}") from None


def pack_bits(bits: str) -> bytes:
    """Pack a string of ``0``/``1`` into bytes, most significant bit first."""
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start:start + 8]
        out.append(int(chunk.ljust(8, "0"), 2))
    return bytes(out)


def compress(data: bytes) -> bytes:
    """Compress ``data`` into the ``.huff`` format."""
    root = build_tree(frequency_table(data))
    bits = encode(data, build_codes(root))
    header = (padding_bits(len(bits)) << 13) | serialized_size(root)
    return header.to_bytes(2, "big") + serialize_tree(root) + pack_bits(bits)


def compress_file(source, destination) -> bytes:
    """Compress the file ``source`` into ``destination`` and return what was written."""
    compressed = compress(Path(source).read_bytes())
    Path(destination).write_bytes(compressed)
    return compressed


def _colored_block(color: str, lines: Sequence[str]) -> str:
    """Join ``lines`` into one block wrapped in ``color`` and a reset code."""
    return color + "\n".join(lines) + "\n" + _RESET


def _summary(compressed: bytes) -> str:
    """Describe the header and payload of a compressed file."""
    header = int.from_bytes(compressed[:2], "big")
    padding = header >> 13
    tree_size = header & 0x1FFF
    payload = len(compressed) - 2 - tree_size
    bit_count = payload * 8 - padding
    return (
        f"Tamanho real esperado do código em bytes: {payload} bytes\n"
        f"Bits totais: {bit_count} | Bits lixo no final: {padding}\n"
        f"Tamanho da árvore: {tree_size} "
    )


def _compress_interactively(directory: Path) -> None:
    name = input(_GREEN + "Digite o nome do arquivo a ser compactado: ").strip()
    print(_RESET, end="")
    try:
        compressed = compress_file(directory / name, directory / OUTPUT_NAME)
    except OSError as exc:
        print(f"Erro ao abrir o arquivo: {exc}")
        return
    print(_summary(compressed))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Huffman file compressor.")
    parser.add_argument("-d", "--directory", default=".")
    parser.add_argument("--delay", type=float, default=3.0)
    args = parser.parse_args(argv)
    directory = Path(args.directory)

    print(_colored_block(_BLUE, _INFORMATION_LINES), end="")
    time.sleep(args.delay)
    print(_CLEAR, end="")
    print(_colored_block(_BLUE, _BANNER_LINES), end="")

    menu = _colored_block(_GREEN, _MENU_LINES)
    while True:
        print(menu, end="")
        try:
            choice = input().strip()
        except EOFError:
            return 0
        if choice == "1":
            try:
                _compress_interactively(directory)
            except EOFError:
                return 0
        elif choice == "2":
            print("Descompactar arquivo ainda não implementado.")
        elif choice == "3":
            print(_RED + "Saindo...")
            return 0
        else:
            print("Opção inválida.")


if __name__ == "__main__":
    raise SystemExit(main())
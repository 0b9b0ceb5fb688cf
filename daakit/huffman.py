"""Huffman coding trees built with an array-backed binary min-heap."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = ["HuffmanNode", "build_huffman", "huffman_codes"]

INTERNAL_SYMBOL = "$"


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry the symbol ``$``."""

    symbol: str
    frequency: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def _sift_down(heap: list[HuffmanNode], root: int) -> None:
    size = len(heap)
    while True:
        smallest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and heap[left].frequency < heap[smallest].frequency:
            smallest = left
        if right < size and heap[right].frequency < heap[smallest].frequency:
            smallest = right
        if smallest == root:
            return
        heap[root], heap[smallest] = heap[smallest], heap[root]
        root = smallest


def _extract_min(heap: list[HuffmanNode]) -> HuffmanNode:
    top = heap[0]
    last = heap.pop()
    if heap:
        heap[0] = last
        _sift_down(heap, 0)
    return top


def _insert(heap: list[HuffmanNode], node: HuffmanNode) -> None:
    heap.append(node)
    slot = len(heap) - 1
    while slot and node.frequency < heap[(slot - 1) // 2].frequency:
        heap[slot] = heap[(slot - 1) // 2]
        slot = (slot - 1) // 2
    heap[slot] = node


def build_huffman(symbols: Iterable[str], frequencies: Iterable[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly merging the two rarest nodes.

    The first node taken from the heap becomes the left child.
    """
    symbol_list = list(symbols)
    frequency_list = list(frequencies)
    if len(symbol_list) != len(frequency_list):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbol_list:
        raise ValueError("at least one symbol is required")
    if any(freq < 0 for freq in frequency_list):
        raise ValueError("frequencies must not be negative")

    heap = [HuffmanNode(sym, freq) for sym, freq in zip(symbol_list, frequency_list)]
    for root in range(len(heap) // 2 - 1, -1, -1):
        _sift_down(heap, root)

    while len(heap) > 1:
        left = _extract_min(heap)
        right = _extract_min(heap)
        _insert(
            heap,
            HuffmanNode(INTERNAL_SYMBOL, left.frequency + right.frequency, left, right),
        )
    return heap[0]


def _walk(root: HuffmanNode) -> Iterator[tuple[str, str]]:
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            yield node.symbol, code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))


def huffman_codes(root: HuffmanNode) -> list[tuple[str, str]]:
    """Return ``(symbol, code)`` for every leaf, left to right; 0 is left, 1 right."""
    return list(_walk(root))
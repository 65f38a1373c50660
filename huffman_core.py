# filename: huffman_core.py

import heapq
import itertools
import logging
from collections.abc import Mapping

from huffman_errors import EmptyAlphabetError, ReservedSymbolError

logger = logging.getLogger(__name__)

EMPTY_SYMBOL = ""
INTERNAL_SYMBOL = "*"


class HuffmanNode:
    def __init__(self, symbol, count, left=None, right=None):
        self.symbol = symbol
        self.count = count
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.count})"
        return f"HuffmanNode({self.symbol!r}, {self.count}, {self.left!r}, {self.right!r})"


class HuffmanLogic:
    """Builds Huffman trees and derives codebooks from them.

    Internal nodes carry ``internal_symbol`` in place of a real symbol, so
    that marker is not available as an alphabet symbol.
    """

    def __init__(self, internal_symbol=INTERNAL_SYMBOL):
        if internal_symbol == EMPTY_SYMBOL:
            raise ValueError("internal_symbol must be a non-empty string")
        self.internal_symbol = internal_symbol

    def build_tree(self, counts):
        """Merge the two lightest nodes until a single root remains.

        ``counts`` is a mapping ``{symbol: count}`` or an iterable of
        ``(symbol, count)`` pairs. Empty symbols are ignored, zero counts are
        kept. Equal weights leave the queue in the order they entered it, and
        a merged node queues behind existing nodes of the same weight.
        """
        if isinstance(counts, Mapping):
            counts = counts.items()

        order = itertools.count()
        priority_queue = []
        for symbol, count in counts:
            if symbol == EMPTY_SYMBOL:
                continue
            if symbol == self.internal_symbol:
                raise ReservedSymbolError(symbol)
            if count < 0:
                raise ValueError(f"negative count {count} for symbol {symbol!r}")
            priority_queue.append((count, next(order), HuffmanNode(symbol, count)))

        if not priority_queue:
            raise EmptyAlphabetError()

        heapq.heapify(priority_queue)
        leaves = len(priority_queue)

        while len(priority_queue) > 1:
            _, _, left = heapq.heappop(priority_queue)
            _, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(self.internal_symbol, left.count + right.count, left, right)
            heapq.heappush(priority_queue, (merged.count, next(order), merged))

        root = priority_queue[0][2]
        logger.debug("built tree: %d leaves, %d merges, weight %d", leaves, leaves - 1, root.count)
        return root

    def create_branch(self, nodes):
        """Perform one merge round in place on ``nodes``.

        Does nothing when fewer than two nodes are given.
        """
        if len(nodes) < 2:
            return

        # Stable descending sort: the two lowest weights end up at the tail.
        nodes.sort(key=lambda node: node.count, reverse=True)
        first = nodes.pop()
        second = nodes.pop()
        nodes.append(HuffmanNode(self.internal_symbol, first.count + second.count, first, second))

    def generate_codes(self, root):
        """Return ``(node, codeword)`` for every node of the tree.

        The traversal is depth first with an explicit stack, left subtree
        first. The root's codeword is the empty string.
        """
        stack = [(root, "")]
        result = []

        while stack:
            node, code = stack.pop()
            result.append((node, code))
            if node.right is not None:
                stack.append((node.right, code + "1"))
            if node.left is not None:
                stack.append((node.left, code + "0"))

        return result

    def build_dictionary(self, result_list):
        """Keep the entries that name a real symbol: ``{symbol: codeword}``."""
        return {
            node.symbol: code
            for node, code in result_list
            if node.symbol != EMPTY_SYMBOL and node.symbol != self.internal_symbol
        }

    def codebook(self, root):
        dictionary = self.build_dictionary(self.generate_codes(root))
        logger.debug("codebook has %d entries", len(dictionary))
        return dictionary

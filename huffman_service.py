# filename: huffman_service.py

import logging
import math
from collections import namedtuple

from huffman_core import HuffmanLogic, INTERNAL_SYMBOL
from huffman_errors import UncodedSymbolError
from huffman_tokenizer import characters_of, count_tokens, split_tokens, vocabulary_entries

logger = logging.getLogger(__name__)

EncodingResult = namedtuple("EncodingResult", ["bits", "codebook", "counts", "tree"])
CodeStatistics = namedtuple("CodeStatistics", ["total", "entropy", "average_length", "encoded_length"])


def encode_token(token, dictionary):
    try:
        return dictionary[token]
    except KeyError:
        raise UncodedSymbolError(token) from None


def encode_tokens(tokens, dictionary):
    return "".join(encode_token(token, dictionary) for token in tokens)


def code_statistics(counts, codebook):
    """Entropy and average code length, both in bits per token."""
    total = sum(counts.values())
    if total == 0:
        return CodeStatistics(0, 0.0, 0.0, 0)

    encoded_length = sum(count * len(codebook[symbol]) for symbol, count in counts.items() if count)
    entropy = -sum(
        (count / total) * math.log2(count / total) for count in counts.values() if count
    )
    return CodeStatistics(total, entropy, encoded_length / total, encoded_length)


class HuffmanService:
    def __init__(self, internal_symbol=INTERNAL_SYMBOL, pad_single_symbol=False):
        self.logic = HuffmanLogic(internal_symbol)
        self.pad_single_symbol = pad_single_symbol

    def build_codebook(self, counts):
        tree = self.logic.build_tree(counts)
        codebook = self.logic.codebook(tree)
        if self.pad_single_symbol and tree.is_leaf:
            # A lone leaf sits at depth 0; give it one bit so it still takes space.
            codebook = {symbol: "0" for symbol in codebook}
        return tree, codebook

    def compress(self, text, vocabulary=None):
        if vocabulary is None:
            vocabulary = characters_of(text)
        else:
            vocabulary = vocabulary_entries(vocabulary)

        tokens = split_tokens(text, vocabulary)
        counts = count_tokens(tokens, vocabulary)
        tree, codebook = self.build_codebook(counts)
        bits = encode_tokens(tokens, codebook)

        logger.debug("encoded %d tokens into %d bits", len(tokens), len(bits))
        return EncodingResult(bits, codebook, counts, tree)

    def encode(self, text, vocabulary=None):
        return self.compress(text, vocabulary).bits

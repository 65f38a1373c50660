# filename: huffman_tokenizer.py

import logging

from huffman_errors import UnrecognizedInputError

logger = logging.getLogger(__name__)


def vocabulary_entries(vocabulary):
    # Non-empty, first occurrence wins, vocabulary order kept.
    return list(dict.fromkeys(token for token in vocabulary if token))


def characters_of(text):
    """Distinct characters of ``text`` in order of first appearance."""
    return list(dict.fromkeys(text))


def split_tokens(text, vocabulary):
    """Cut ``text`` into vocabulary tokens, longest match first.

    Equal-length candidates are tried in vocabulary order. Raises
    ``UnrecognizedInputError`` with the unmatched remainder when no
    candidate prefixes what is left of the text.
    """
    candidates = sorted(vocabulary_entries(vocabulary), key=len, reverse=True)
    tokens = []
    position = 0

    while position < len(text):
        for candidate in candidates:
            if text.startswith(candidate, position):
                tokens.append(candidate)
                position += len(candidate)
                break
        else:
            raise UnrecognizedInputError(text[position:])

    return tokens


def count_tokens(tokens, vocabulary):
    counts = dict.fromkeys(vocabulary_entries(vocabulary), 0)
    for token in tokens:
        if token not in counts:
            raise UnrecognizedInputError(token)
        counts[token] += 1
    return counts


def tokenize(text, vocabulary):
    """Return ``{token: occurrences}`` for every vocabulary entry."""
    vocabulary = vocabulary_entries(vocabulary)
    tokens = split_tokens(text, vocabulary)
    counts = count_tokens(tokens, vocabulary)
    logger.debug("tokenized %d characters into %d tokens over %d symbols", len(text), len(tokens), len(counts))
    return counts

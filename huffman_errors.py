# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised while building or applying a code."""


class EmptyAlphabetError(HuffmanError, ValueError):
    def __init__(self):
        super().__init__("cannot build a Huffman tree from an empty alphabet")


class ReservedSymbolError(HuffmanError, ValueError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} is reserved for internal nodes")


class UnrecognizedInputError(HuffmanError, ValueError):
    def __init__(self, remainder):
        self.remainder = remainder
        super().__init__(f"Unknown prefix: {remainder}")


class UncodedSymbolError(HuffmanError, KeyError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self):
        # KeyError would repr() the whole message otherwise
        return f"Could not encode symbol {self.symbol!r}"

"""
Approximate tokenizer for token-based chunking.
Splits on whitespace and keeps punctuation as single-character tokens.
Not aligned with any model vocabulary.
"""

from typing import List

WHITESPACE = frozenset(" \t\n")
PUNCTUATION = frozenset(".,;:!?()[]{}")


def tokenize(text: str) -> List[str]:
    """
    Split text into tokens.

    Whitespace ends the current run and produces no token. Each character in
    PUNCTUATION ends the current run and is emitted as its own token.
    """
    tokens: List[str] = []
    current: List[str] = []

    for char in text:
        if char in WHITESPACE:
            if current:
                tokens.append("".join(current))
                current = []
        elif char in PUNCTUATION:
            if current:
                tokens.append("".join(current))
                current = []
            tokens.append(char)
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def token_count(text: str) -> int:
    """Return the number of approximate tokens in text."""
    return len(tokenize(text))

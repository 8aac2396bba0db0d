"""String-relation predicates.

Both predicates compare characters exactly as given: no case folding and no
whitespace/punctuation stripping.
"""

from __future__ import annotations

from collections import Counter


def is_palindrome(text: str) -> bool:
    """True when `text` reads the same forward and backward."""

    return text == text[::-1]


def is_anagram(first: str, second: str) -> bool:
    """True when both strings hold the same multiset of characters."""

    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)

"""Tests for palindrome/anagram predicates."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from core.services.text_relations import is_anagram, is_palindrome


class TestPalindrome:
    @pytest.mark.parametrize("text", ["racecar", "", "a", "abba", "ñoñ"])
    def test_palindromes(self, text) -> None:
        assert is_palindrome(text) is True

    @pytest.mark.parametrize("text", ["hello", "ab", "Racecar", "race car"])
    def test_not_palindromes(self, text) -> None:
        assert is_palindrome(text) is False


class TestAnagram:
    @pytest.mark.parametrize(
        ("first", "second"),
        [("arc", "car"), ("", ""), ("listen", "silent"), ("aab", "aba")],
    )
    def test_anagrams(self, first, second) -> None:
        assert is_anagram(first, second) is True

    @pytest.mark.parametrize(
        ("first", "second"),
        [("cat", "dog"), ("Arc", "car"), ("aab", "abb"), ("ab", "abc"), ("a", "")],
    )
    def test_not_anagrams(self, first, second) -> None:
        assert is_anagram(first, second) is False


@pytest.mark.property
class TestProperties:
    @given(st.text())
    def test_palindrome_invariant_under_reversal(self, text) -> None:
        assert is_palindrome(text) == is_palindrome(text[::-1])

    @given(st.text())
    def test_text_plus_reverse_is_palindrome(self, text) -> None:
        assert is_palindrome(text + text[::-1])

    @given(st.text(), st.text())
    def test_anagram_is_symmetric(self, x, y) -> None:
        assert is_anagram(x, y) == is_anagram(y, x)

    @given(st.text())
    def test_anagram_is_reflexive(self, x) -> None:
        assert is_anagram(x, x)

    @given(st.text(), st.randoms())
    def test_shuffled_text_is_anagram(self, x, rnd) -> None:
        chars = list(x)
        rnd.shuffle(chars)
        assert is_anagram(x, "".join(chars))

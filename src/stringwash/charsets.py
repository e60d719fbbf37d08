"""Character sets used as membership tests for washing."""

from __future__ import annotations

import unicodedata
from typing import Callable, FrozenSet, Iterable, Tuple, Union

Predicate = Callable[[str], bool]
CharacterSetLike = Union["CharacterSet", str, Iterable[str], Predicate]

_NEWLINE_CHARS = frozenset("\n\x0b\x0c\r\x85\u2028\u2029")


class CharacterSet:
    """Immutable set of Unicode scalar values.

    Membership is tested one code point at a time. A set is made of explicit
    characters, predicates, or both; ``a | b`` builds the union.
    """

    __slots__ = ("_chars", "_predicates")

    def __init__(
        self,
        characters: Iterable[str] = (),
        predicates: Iterable[Predicate] = (),
    ) -> None:
        chars = frozenset(characters)
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise TypeError(f"CharacterSet members must be single characters, got {char!r}")
        self._chars: FrozenSet[str] = chars
        self._predicates: Tuple[Predicate, ...] = tuple(predicates)

    @classmethod
    def characters_in(cls, text: str) -> "CharacterSet":
        return cls(text)

    @classmethod
    def from_predicate(cls, predicate: Predicate) -> "CharacterSet":
        return cls(predicates=[predicate])

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        if char in self._chars:
            return True
        return any(predicate(char) for predicate in self._predicates)

    def union(self, other: CharacterSetLike) -> "CharacterSet":
        other_set = as_character_set(other)
        return CharacterSet(
            self._chars | other_set._chars,
            self._predicates + other_set._predicates,
        )

    def __or__(self, other: CharacterSetLike) -> "CharacterSet":
        return self.union(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterSet):
            return NotImplemented
        return self._chars == other._chars and set(self._predicates) == set(other._predicates)

    def __hash__(self) -> int:
        return hash((self._chars, frozenset(self._predicates)))

    def contains_all(self, text: str) -> bool:
        """True when every character of ``text`` is a member (vacuously for "")."""
        return all(char in self for char in text)

    def __repr__(self) -> str:
        return f"CharacterSet(chars={sorted(self._chars)!r}, predicates={len(self._predicates)})"


def _is_whitespace(char: str) -> bool:
    return char == "\t" or unicodedata.category(char) == "Zs"


WHITESPACES = CharacterSet.from_predicate(_is_whitespace)
NEWLINES = CharacterSet(_NEWLINE_CHARS)
WHITESPACES_AND_NEWLINES = CharacterSet(_NEWLINE_CHARS, [_is_whitespace])


def as_character_set(value: CharacterSetLike) -> CharacterSet:
    """Coerce a str, iterable of characters or predicate into a CharacterSet."""
    if isinstance(value, CharacterSet):
        return value
    if isinstance(value, str):
        return CharacterSet.characters_in(value)
    if callable(value):
        return CharacterSet.from_predicate(value)
    try:
        members = list(value)
    except TypeError:
        raise TypeError(f"Cannot use {type(value).__name__} as a character set") from None
    return CharacterSet(members)


__all__ = [
    "CharacterSet",
    "CharacterSetLike",
    "NEWLINES",
    "WHITESPACES",
    "WHITESPACES_AND_NEWLINES",
    "as_character_set",
]

"""Trimming and whitespace normalization."""

from __future__ import annotations

from typing import Iterable, List, Union

from stringwash.charsets import (
    NEWLINES,
    WHITESPACES_AND_NEWLINES,
    CharacterSet,
    CharacterSetLike,
    as_character_set,
)
from stringwash.modes import WashMode

_LINE_BREAK = CharacterSet.characters_in("\n")
_MAX_NEWLINE_RUN = 2


def wash(
    text: str,
    mode: Union[WashMode, str] = WashMode.leading_and_trailing,
    character_set: CharacterSetLike = WHITESPACES_AND_NEWLINES,
) -> str:
    """Wash ``text`` according to ``mode``.

    With no mode given this trims whitespace and newlines from both ends.
    ``input_line`` and ``input_text`` always work on whitespace and newlines
    and ignore ``character_set``.
    """
    mode = WashMode(mode)
    if mode is WashMode.input_line:
        return collapse_line(text)
    if mode is WashMode.input_text:
        lines = [collapse_line(line) for line in split_on(text, NEWLINES)]
        return trim(collapse_blank_lines("\n".join(lines)), _LINE_BREAK)

    charset = as_character_set(character_set)
    if mode is WashMode.leading:
        return trim_leading(text, charset)
    if mode is WashMode.trailing:
        return trim_trailing(text, charset)
    if mode is WashMode.leading_and_trailing:
        return trim(text, charset)
    return "".join(char for char in text if char not in charset)


def trim(text: str, character_set: CharacterSetLike) -> str:
    charset = as_character_set(character_set)
    return trim_trailing(trim_leading(text, charset), charset)


def trim_leading(text: str, character_set: CharacterSetLike) -> str:
    """Drop the longest prefix made only of characters in ``character_set``."""
    charset = as_character_set(character_set)
    for index, char in enumerate(text):
        if char not in charset:
            return text[index:]
    return ""


def trim_trailing(text: str, character_set: CharacterSetLike) -> str:
    """Drop the longest suffix made only of characters in ``character_set``."""
    charset = as_character_set(character_set)
    for index in range(len(text) - 1, -1, -1):
        if text[index] not in charset:
            return text[: index + 1]
    return ""


def split_on(text: str, character_set: CharacterSetLike) -> List[str]:
    """Split at every member of ``character_set``, keeping empty fragments."""
    charset = as_character_set(character_set)
    parts: List[str] = []
    start = 0
    for index, char in enumerate(text):
        if char in charset:
            parts.append(text[start:index])
            start = index + 1
    parts.append(text[start:])
    return parts


def collapse_line(line: str) -> str:
    """Collapse whitespace and newline runs to single spaces and strip the ends."""
    return " ".join(part for part in split_on(line, WHITESPACES_AND_NEWLINES) if part)


def collapse_blank_lines(text: str) -> str:
    """Cap every run of three or more "\\n" at two."""
    out: List[str] = []
    run = 0
    for char in text:
        if char == "\n":
            run += 1
            if run > _MAX_NEWLINE_RUN:
                continue
        else:
            run = 0
        out.append(char)
    return "".join(out)


class TextWasher:
    """Callable washer bound to a mode and character set."""

    __slots__ = ("_mode", "_character_set")

    def __init__(
        self,
        mode: Union[WashMode, str] = WashMode.leading_and_trailing,
        character_set: CharacterSetLike = WHITESPACES_AND_NEWLINES,
    ) -> None:
        self._mode = WashMode(mode)
        self._character_set = as_character_set(character_set)

    @property
    def mode(self) -> WashMode:
        return self._mode

    @property
    def character_set(self) -> CharacterSet:
        return self._character_set

    def wash(self, text: str) -> str:
        return wash(text, self.mode, self.character_set)

    __call__ = wash

    def wash_many(self, texts: Iterable[str]) -> List[str]:
        return [self.wash(text) for text in texts]

    def __repr__(self) -> str:
        return f"TextWasher(mode={self.mode.value!r})"


__all__ = [
    "TextWasher",
    "collapse_blank_lines",
    "collapse_line",
    "split_on",
    "trim",
    "trim_leading",
    "trim_trailing",
    "wash",
]

"""Wash mode selector."""

from __future__ import annotations

from enum import Enum
from typing import Optional

# camelCase spellings, including the historical "occurencesOf"
_ALIASES = {
    "leadingAndTrailing": "leading_and_trailing",
    "occurrencesOf": "occurrences_of",
    "occurencesOf": "occurrences_of",
    "inputLine": "input_line",
    "inputText": "input_text",
}


class WashMode(str, Enum):
    leading = "leading"
    trailing = "trailing"
    leading_and_trailing = "leading_and_trailing"
    occurrences_of = "occurrences_of"
    input_line = "input_line"
    input_text = "input_text"

    @classmethod
    def _missing_(cls, value: object) -> Optional["WashMode"]:
        if isinstance(value, str) and value in _ALIASES:
            return cls(_ALIASES[value])
        return None

    @property
    def uses_character_set(self) -> bool:
        return self not in (WashMode.input_line, WashMode.input_text)

"""String trimming and whitespace normalization."""

from stringwash.charsets import (
    NEWLINES,
    WHITESPACES,
    WHITESPACES_AND_NEWLINES,
    CharacterSet,
    as_character_set,
)
from stringwash.config import StringwashConfig, WashProfile, load_config
from stringwash.errors import ConfigError, ProfileNotFoundError, StringwashError
from stringwash.modes import WashMode
from stringwash.normalize import (
    TextWasher,
    collapse_blank_lines,
    collapse_line,
    split_on,
    trim,
    trim_leading,
    trim_trailing,
    wash,
)

__all__ = [
    "CharacterSet",
    "ConfigError",
    "NEWLINES",
    "ProfileNotFoundError",
    "StringwashConfig",
    "StringwashError",
    "TextWasher",
    "WHITESPACES",
    "WHITESPACES_AND_NEWLINES",
    "WashMode",
    "WashProfile",
    "as_character_set",
    "collapse_blank_lines",
    "collapse_line",
    "load_config",
    "split_on",
    "trim",
    "trim_leading",
    "trim_trailing",
    "wash",
]

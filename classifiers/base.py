"""
Base pieces shared by the classifier modules.
"""
from collections import UserString
from dataclasses import dataclass

import regex

# Unicode "Alphabetic" property: letters plus alphabetic marks (e.g. Arabic harakat)
_ALPHABETIC = regex.compile(r"\p{Alphabetic}")


@dataclass
class ClassificationResult:
    has_persian_char: bool
    is_persian: bool
    persian_percentage: int  # 0..100, truncated
    is_relevant: bool = False
    alphabetic_length: int = 0
    persian_count: int = 0


def as_text(text) -> str:
    """Accept str and str-like objects; bytes must be decoded by the caller."""
    if isinstance(text, str):
        return text
    if isinstance(text, UserString):
        return str(text)
    if isinstance(text, (bytes, bytearray, memoryview)):
        raise TypeError("expected decoded text, got bytes; decode before classifying")
    raise TypeError(f"expected text, got {type(text).__name__}")


def alphabetic_only(text: str) -> str:
    """Drop digits, whitespace, punctuation, symbols and emoji. Order is kept."""
    return "".join(_ALPHABETIC.findall(text))


class BaseClassifier:
    """Shared config handling for text classifiers."""

    def __init__(self, config: dict):
        self.config = config or {}

    def _get_percentage(self, key: str, default: int) -> int:
        value = self.config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{key} must be an integer, got {value!r}")
        if not 0 <= value <= 100:
            raise ValueError(f"{key} must be within 0..100, got {value}")
        return value

    def _get_flag(self, key: str, default: bool) -> bool:
        value = self.config.get(key, default)
        if not isinstance(value, bool):
            raise ValueError(f"{key} must be true or false, got {value!r}")
        return value

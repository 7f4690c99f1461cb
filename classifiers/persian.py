"""
Persian classifier: Unicode-block checks over the Arabic block (U+0600..U+06FF).

This is script detection, not language detection: Arabic and Urdu text
sharing the block is reported as Persian too.

Non-alphabetic chars (digits, spaces, " « , ، and emoji) are dropped before
judging how Persian a text is, so punctuation never dilutes the percentage.
"""
import regex

from .base import BaseClassifier, ClassificationResult, alphabetic_only, as_text

# Compiled once at import; read-only afterwards
PERSIAN_CHAR = regex.compile(r"[\u0600-\u06FF]")
PERSIAN_STR = regex.compile(r"^[\u0600-\u06FF]|\p{P}+$")


def has_persian_char(text) -> bool:
    """Checks if a text has at least one Persian char in it."""
    return PERSIAN_CHAR.search(as_text(text)) is not None


def is_persian_str(text) -> bool:
    """Checks if a text is in Persian."""
    return PERSIAN_STR.search(alphabetic_only(as_text(text))) is not None


def _count_persian(letters: str) -> int:
    return len(PERSIAN_CHAR.findall(letters))


def persian_percentage(text) -> int:
    """
    How much of the text is in the Persian alphabet, 0..100.
    Text with no letters at all counts as fully Persian (100).
    """
    letters = alphabetic_only(as_text(text))
    if not letters:
        return 100
    return _count_persian(letters) * 100 // len(letters)


class PersianClassifier(BaseClassifier):
    """
    Runs all three checks and decides whether the text should be routed
    as Persian content.
    """

    def __init__(self, config: dict):
        super().__init__(config)
        self.min_persian_percentage = self._get_percentage("min_persian_percentage", 50)
        self.require_persian_char = self._get_flag("require_persian_char", True)

    def classify(self, text) -> ClassificationResult:
        text = as_text(text)
        letters = alphabetic_only(text)
        percentage = persian_percentage(text)
        has_char = has_persian_char(text)

        # Letter-free texts score 100 by convention; don't route those as Persian
        is_relevant = percentage >= self.min_persian_percentage and (
            has_char or not self.require_persian_char
        )
        return ClassificationResult(
            has_persian_char=has_char,
            is_persian=is_persian_str(text),
            persian_percentage=percentage,
            is_relevant=is_relevant,
            alphabetic_length=len(letters),
            persian_count=_count_persian(letters),
        )

"""
Persian content classifier facade.

Usage:
    from classifiers import Classifier, persian_percentage
    c = Classifier(config["classification"])
    result = c.classify(text)
    if result.is_relevant: ...
"""
import logging

from .base import ClassificationResult
from .persian import PersianClassifier, has_persian_char, is_persian_str, persian_percentage

__all__ = [
    "Classifier",
    "ClassificationResult",
    "has_persian_char",
    "is_persian_str",
    "persian_percentage",
]

logger = logging.getLogger(__name__)


class Classifier:
    def __init__(self, config: dict):
        self.fa = PersianClassifier(config or {})
        logger.debug(
            f"Classifier ready: min_persian_percentage={self.fa.min_persian_percentage}, "
            f"require_persian_char={self.fa.require_persian_char}"
        )

    def classify(self, text) -> ClassificationResult:
        return self.fa.classify(text)

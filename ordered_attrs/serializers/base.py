# ==============================================
# Serializer (Abstract Base Class)
# ==============================================
#
# PURPOSE:
#   The contract every codec attached to an ordered field must
#   implement. Fields accept any subclass, so a different
#   ordering policy can be swapped in per attribute.
#
# CLASS: Serializer (ABC)
# -----------------------
#   Abstract methods:
#   -----------------
#   - serialize(values) -> list[str]
#       Ordered, caller-visible values -> what the store keeps.
#
#   - deserialize(values) -> list[str]
#       Whatever the store hands back (any order) -> ordered values.
#
#   Both accept None and return [] for None or empty input.
#
#   Shared helpers:
#   ---------------
#   - sanitize(values) -> list[str]
#       as_text() every value and strip its markup, except for the
#       EMPTY_SENTINEL value which is passed through untouched.
#
# ==============================================

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from ..sanitizer import HtmlSanitizer

TOKEN_DELIMITER = "~"
EMPTY_SENTINEL = TOKEN_DELIMITER * 3


class Serializer(ABC):
    """Converts between caller-ordered values and their persisted form."""

    def __init__(self, sanitizer: Optional[HtmlSanitizer] = None):
        self.sanitizer = sanitizer or HtmlSanitizer()

    @abstractmethod
    def serialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        """Convert ordered values into the form handed to the store."""

    @abstractmethod
    def deserialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        """Recover ordered values from the store's (unordered) values."""

    def sanitize(self, values: Iterable[Any]) -> List[str]:
        """
        Strip markup from every value.

        Args:
            values: Raw values, converted with as_text()

        Returns:
            Sanitized values in the same order
        """
        sanitized = []
        for value in values:
            text = self.as_text(value)
            sanitized.append(text if text == EMPTY_SENTINEL else self.sanitizer.sanitize(text))
        return sanitized

    @staticmethod
    def as_text(value: Any) -> str:
        """None becomes "", bytes are decoded as UTF-8, anything else goes through str()."""
        if value is None:
            return ""
        if isinstance(value, (bytes, bytearray)):
            return bytes(value).decode("utf-8", errors="replace")
        return str(value)

    @staticmethod
    def as_list(values: Optional[Iterable[Any]]) -> List[Any]:
        """Normalize None to [] and a lone string (or bytes) to a one-element list."""
        if values is None:
            return []
        if isinstance(values, (str, bytes, bytearray)):
            return [values]
        return list(values)

    @classmethod
    def as_strings(cls, values: Optional[Iterable[Any]]) -> List[str]:
        """Convert store-native elements (e.g. RDF literals) into plain strings."""
        return [cls.as_text(value) for value in cls.as_list(values)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

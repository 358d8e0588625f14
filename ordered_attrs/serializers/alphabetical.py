# ==============================================
# AlphabeticalSerializer
# ==============================================
#
# PURPOSE:
#   Drop-in replacement for InputOrderSerializer for attributes
#   that should always read back alphabetized (subjects, keywords)
#   instead of in the order they were entered.
#
#   Values are stored as plain sanitized strings, no index prefix,
#   so existing unprefixed data can be read without migration.
#
# ORDERING:
#   Case-insensitive first, case-sensitive to break ties:
#     ["banana", "Apple", "apple"] -> ["Apple", "apple", "banana"]
#
# ==============================================

from typing import Any, Iterable, List, Optional

from .base import Serializer


def _alphabetical_key(value: str):
    return (value.casefold(), value)


class AlphabeticalSerializer(Serializer):
    """Keeps values in alphabetical order regardless of input or storage order."""

    def serialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        return sorted(self.sanitize(self.as_list(values)), key=_alphabetical_key)

    def deserialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        return sorted(self.as_strings(values), key=_alphabetical_key)

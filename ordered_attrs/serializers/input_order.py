# ==============================================
# InputOrderSerializer
# ==============================================
#
# PURPOSE:
#   Preserve the order values were given in, no matter what order
#   the persistence layer hands them back in.
#
# WHY THIS CLASS EXISTS:
#   Some stores keep multi-valued properties as sets (RDF triples,
#   Fedora Commons). Whatever order the user typed the creators of
#   a work in is lost on the way back. We take liberties with the
#   stored values: every value is prefixed with its position so the
#   order can be rebuilt on read.
#
# ENCODED FORMAT:
# ---------------
#   "<index>~<payload>"     e.g. ["Clotho", "Lachesis"] -> ["0~Clotho", "1~Lachesis"]
#
#   - Only the FIRST "~" is structural, payloads may contain "~".
#   - Indexes are compared as STRINGS: "0" < "10" < "2".
#     Existing data depends on this; don't switch to numeric.
#   - A value without "~" decodes to itself with index "0".
#
# CLASS: InputOrderSerializer(Serializer)
# ---------------------------------------
#   - serialize(values) -> list[str]
#   - deserialize(values) -> list[str]
#
#   Static helpers:
#   ---------------
#   - encode(index, value) -> str
#   - get_index(value) -> str
#   - get_value(value) -> str
#   - sort(values) -> list[str]
#
# ==============================================

import logging
from typing import Any, Iterable, List, Optional

from .base import Serializer, TOKEN_DELIMITER

logger = logging.getLogger(__name__)

FALLBACK_INDEX = "0"


class InputOrderSerializer(Serializer):
    """
    Encodes each value's position into the value itself.

    Example:
        >>> serializer = InputOrderSerializer()
        >>> serializer.serialize(["Clotho", "Lachesis", "Atropos"])
        ['0~Clotho', '1~Lachesis', '2~Atropos']
        >>> serializer.deserialize(["2~Atropos", "1~Lachesis", "0~Clotho"])
        ['Clotho', 'Lachesis', 'Atropos']
    """

    def serialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        """
        Prefix every value with its position.

        Args:
            values: Ordered values (None is treated as empty)

        Returns:
            Encoded values, in input order
        """
        values = self.as_list(values)
        if not values:
            return []

        encoded = [self.encode(index, value) for index, value in enumerate(self.sanitize(values))]
        logger.debug("Encoded %d values", len(encoded))
        return encoded

    def deserialize(self, values: Optional[Iterable[Any]]) -> List[str]:
        """
        Restore the original order of encoded values.

        Args:
            values: Encoded values in any order (None is treated as empty)

        Returns:
            Decoded values sorted by their index token
        """
        values = self.as_strings(values)
        if not values:
            return []

        decoded = [self.get_value(value) for value in self.sort(values)]
        logger.debug("Decoded %d values", len(decoded))
        return decoded

    @staticmethod
    def encode(index: int, value: str) -> str:
        """Build the composite "<index>~<value>" token."""
        return f"{index}{TOKEN_DELIMITER}{value}"

    @staticmethod
    def get_index(value: str) -> str:
        """
        Extract the index token, or "0" if the value cannot be parsed.
        The token is returned as a string and compared as one.
        """
        tokens = value.split(TOKEN_DELIMITER, 1)
        if len(tokens) == 2:
            return tokens[0]
        logger.debug("No index token in %r, decoding as-is with index %s", value, FALLBACK_INDEX)
        return FALLBACK_INDEX

    @staticmethod
    def get_value(value: str) -> str:
        """Extract the payload, or the whole value if it cannot be parsed."""
        tokens = value.split(TOKEN_DELIMITER, 1)
        if len(tokens) == 2:
            return tokens[1]
        return value

    @classmethod
    def sort(cls, values: Iterable[str]) -> List[str]:
        """Stable sort by index token; ties keep their incoming order."""
        return sorted(values, key=cls.get_index)

# ==============================================
# SERIALIZERS
# ==============================================
#
# Codecs that sit between an ordered attribute and a store that
# does not keep order.
#
# Modules:
# --------
# - base.py          → Serializer ABC + shared sanitization step
# - input_order.py   → InputOrderSerializer (default, keeps input order)
# - alphabetical.py  → AlphabeticalSerializer (always alphabetized)
#
# Registry:
# ---------
# - get_serializer(name) -> Serializer
# - available_serializers() -> list[str]
#
# ==============================================

from typing import Dict, List, Type

from ..errors import ConfigurationError
from .alphabetical import AlphabeticalSerializer
from .base import EMPTY_SENTINEL, TOKEN_DELIMITER, Serializer
from .input_order import InputOrderSerializer

SERIALIZERS: Dict[str, Type[Serializer]] = {
    "input_order": InputOrderSerializer,
    "alphabetical": AlphabeticalSerializer,
}


def get_serializer(name: str) -> Serializer:
    """
    Build a serializer by its registry name.

    Args:
        name: One of available_serializers()

    Returns:
        A new serializer instance

    Raises:
        ConfigurationError: If the name is not registered
    """
    try:
        serializer_class = SERIALIZERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown serializer {name!r}; expected one of {', '.join(available_serializers())}"
        ) from None
    return serializer_class()


def available_serializers() -> List[str]:
    return sorted(SERIALIZERS)


__all__ = [
    "Serializer",
    "InputOrderSerializer",
    "AlphabeticalSerializer",
    "TOKEN_DELIMITER",
    "EMPTY_SENTINEL",
    "get_serializer",
    "available_serializers",
]

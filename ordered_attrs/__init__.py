# ==============================================
# ordered_attrs
# ==============================================
#
# Keep multi-valued attributes in the order they were given,
# even when the store underneath loses that order.
#
# Package Structure:
#
# ordered_attrs/
# ├── serializers/   # Codecs: InputOrderSerializer, AlphabeticalSerializer
# ├── sanitizer.py   # HTML stripping applied before encoding
# ├── fields.py      # OrderedField descriptor + ordered() decorator
# ├── errors.py      # OrderedAttrsError, ConfigurationError
# ├── config.py      # Configuration management (.env / environment)
# ├── testing.py     # Assertion helper for host-record tests
# └── cli.py         # Command line entry point
#
# ==============================================

from .errors import ConfigurationError, OrderedAttrsError
from .fields import OrderedField, is_ordered, ordered, ordered_fields
from .serializers import (
    AlphabeticalSerializer,
    InputOrderSerializer,
    Serializer,
    available_serializers,
    get_serializer,
)

__version__ = "0.1.0"

__all__ = [
    "OrderedField",
    "ordered",
    "ordered_fields",
    "is_ordered",
    "Serializer",
    "InputOrderSerializer",
    "AlphabeticalSerializer",
    "get_serializer",
    "available_serializers",
    "OrderedAttrsError",
    "ConfigurationError",
]

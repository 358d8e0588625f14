# ==============================================
# Ordered Fields
# ==============================================
#
# PURPOSE:
#   Bind a serializer to an attribute of a host class, so callers
#   only ever see ordered values while the underlying accessor
#   (the "store") only ever sees serialized ones.
#
#     record.creators = ["Clotho", "Lachesis"]
#       -> OrderedField.__set__ -> serializer.serialize -> accessor
#     record.creators
#       -> accessor -> serializer.deserialize -> OrderedField.__get__
#
# CLASS: OrderedField
# -------------------
#   Data descriptor. Holds its name, serializer and the accessor it
#   wraps; no per-instance state of its own.
#
#   Storage:
#   --------
#   - accessor given      → delegate to accessor.__get__/__set__
#                           (property with setter, __slots__ member, ...)
#   - no accessor         → keep serialized values in the instance __dict__
#
# FUNCTIONS:
# ----------
# - ordered(*attributes, serializer=InputOrderSerializer)
#     Class decorator wrapping existing attributes. Fails at
#     decoration time (ConfigurationError) if an attribute has no
#     usable accessor.
#
# - is_ordered(obj_or_cls, name) -> bool
# - ordered_fields(obj_or_cls) -> frozenset[str]
#
# USAGE:
# ------
#   @ordered("creators")
#   class Work:
#       def __init__(self):
#           self._creators = []
#
#       @property
#       def creators(self):
#           return self._creators
#
#       @creators.setter
#       def creators(self, values):
#           self._creators = list(reversed(values))
#
# ==============================================

import logging
from typing import Any, FrozenSet, Optional, Type, Union

from .errors import ConfigurationError
from .serializers import InputOrderSerializer, Serializer

logger = logging.getLogger(__name__)

_MISSING = object()

SerializerSpec = Union[Serializer, Type[Serializer]]


def _resolve_serializer(serializer: SerializerSpec) -> Serializer:
    if isinstance(serializer, type) and issubclass(serializer, Serializer):
        return serializer()
    if isinstance(serializer, Serializer):
        return serializer
    raise ConfigurationError(
        f"{serializer!r} is not a Serializer; subclass ordered_attrs.serializers.Serializer"
    )


class OrderedField:
    """
    Descriptor that serializes on write and deserializes on read.

    Args:
        serializer: Serializer instance or class (default InputOrderSerializer)
        accessor: Data descriptor holding the persisted values, or None
            to keep them in the instance __dict__
        default: Raw persisted value returned for instances that were
            never assigned
    """

    def __init__(self, serializer: SerializerSpec = InputOrderSerializer,
                 accessor: Any = None, default: Any = _MISSING):
        self.serializer = _resolve_serializer(serializer)
        self.accessor = accessor
        self.default = default
        self.name: Optional[str] = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return self.serializer.deserialize(self._read(obj, objtype))

    def __set__(self, obj, values):
        self._write(obj, self.serializer.serialize(values))

    def __delete__(self, obj):
        if self.accessor is not None:
            self.accessor.__delete__(obj)
            return
        try:
            del obj.__dict__[self.name]
        except KeyError:
            raise AttributeError(self._missing_message(obj)) from None

    def _read(self, obj, objtype):
        if self.accessor is not None:
            return self.accessor.__get__(obj, objtype)
        try:
            return obj.__dict__[self.name]
        except KeyError:
            if self.default is not _MISSING:
                return self.default
            raise AttributeError(self._missing_message(obj)) from None

    def _write(self, obj, persisted):
        if self.accessor is not None:
            self.accessor.__set__(obj, persisted)
        else:
            obj.__dict__[self.name] = persisted

    def _missing_message(self, obj) -> str:
        return f"{type(obj).__name__!r} object has no attribute {self.name!r}"

    def __repr__(self) -> str:
        return f"OrderedField(name={self.name!r}, serializer={self.serializer!r})"


def _find_attribute(cls, name):
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return _MISSING


def _is_annotated(cls, name) -> bool:
    for klass in cls.__mro__:
        if name in getattr(klass, "__dataclass_fields__", {}):
            return True
        try:
            annotations = getattr(klass, "__annotations__", {})
        except NameError:
            continue
        if name in annotations:
            return True
    return False


def _build_field(cls, name: str, serializer: SerializerSpec) -> OrderedField:
    attribute = _find_attribute(cls, name)

    if isinstance(attribute, OrderedField):
        # Re-ordering an inherited field: swap the serializer, keep the storage
        return OrderedField(serializer, accessor=attribute.accessor, default=attribute.default)

    if isinstance(attribute, property):
        if attribute.fset is None:
            raise ConfigurationError(f"{cls.__name__}.{name} is a read-only property")
        return OrderedField(serializer, accessor=attribute)

    if attribute is not _MISSING and hasattr(type(attribute), "__get__"):
        if not hasattr(type(attribute), "__set__"):
            raise ConfigurationError(
                f"{cls.__name__}.{name} is not an attribute (found {type(attribute).__name__})"
            )
        return OrderedField(serializer, accessor=attribute)

    if attribute is not _MISSING:
        return OrderedField(serializer, default=attribute)

    if _is_annotated(cls, name):
        return OrderedField(serializer)

    raise ConfigurationError(
        f"{cls.__name__} has no accessor for {name!r}; define a property, "
        f"a slot or an annotated attribute first"
    )


def ordered(*attributes: str, serializer: SerializerSpec = InputOrderSerializer):
    """
    Class decorator that keeps the given attributes in order.

    Args:
        *attributes: Names of the attributes to order
        serializer: Serializer instance or class used for every named
            attribute; pass AlphabeticalSerializer to auto-alphabetize

    Returns:
        A decorator returning the same class with the attributes wrapped

    Raises:
        ConfigurationError: No attributes given, serializer is not a
            Serializer, or an attribute has no usable accessor
    """
    if not attributes:
        raise ConfigurationError("ordered() needs at least one attribute name")
    for name in attributes:
        if not isinstance(name, str) or not name.isidentifier():
            raise ConfigurationError(f"Invalid attribute name: {name!r}")
    _resolve_serializer(serializer)

    def decorate(cls):
        # Resolve every name before touching the class
        fields = [(name, _build_field(cls, name, serializer)) for name in attributes]
        for name, field in fields:
            field.__set_name__(cls, name)
            setattr(cls, name, field)
            logger.debug("Ordering %s.%s with %r", cls.__name__, name, field.serializer)
        return cls

    return decorate


def ordered_fields(obj_or_cls) -> FrozenSet[str]:
    """Names of the ordered attributes of a class or of an instance's class."""
    cls = obj_or_cls if isinstance(obj_or_cls, type) else type(obj_or_cls)
    names = set()
    for name in {key for klass in cls.__mro__ for key in vars(klass)}:
        if isinstance(_find_attribute(cls, name), OrderedField):
            names.add(name)
    return frozenset(names)


def is_ordered(obj_or_cls, name: str) -> bool:
    """True if ``name`` is an ordered attribute of the class or instance."""
    return name in ordered_fields(obj_or_cls)

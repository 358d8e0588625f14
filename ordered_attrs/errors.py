# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Exception types raised by ordered_attrs.
#
#   The codecs never raise for malformed data (they fall back
#   instead), so the only failures are misuse of the library
#   when a host class is being set up.
#
# CLASSES:
# --------
# - OrderedAttrsError(Exception)
#     Base class for everything this package raises.
#
# - ConfigurationError(OrderedAttrsError)
#     Raised at attach time: attribute without an underlying
#     accessor, read-only accessor, unknown serializer name,
#     bad environment value.
#
# ==============================================


class OrderedAttrsError(Exception):
    """Base error for the ordered_attrs package."""


class ConfigurationError(OrderedAttrsError):
    """The library was configured or attached incorrectly."""

# ==============================================
# Testing helpers
# ==============================================
#
# Assertions for projects that put ordered attributes on their
# own record classes.
#
#   from ordered_attrs.testing import assert_ordered_attributes
#
#   def test_work_orders_creators():
#       assert_ordered_attributes(Work(), "creators")
#
# ==============================================

from .fields import ordered_fields


def assert_ordered_attributes(obj_or_cls, *expected: str) -> None:
    """
    Assert that exactly the given attributes are ordered.

    Args:
        obj_or_cls: Record instance or class under test
        *expected: Names that should be ordered (order does not matter)

    Raises:
        AssertionError: If the ordered attributes differ
    """
    actual = sorted(ordered_fields(obj_or_cls))
    wanted = sorted(set(expected))
    assert actual == wanted, (
        f"Expected that {obj_or_cls!r} would have the following ordered attributes:\n"
        f"{wanted!r}.\n"
        f"Actual: {actual!r}"
    )

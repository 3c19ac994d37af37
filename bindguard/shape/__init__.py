"""Structural shapes and the optional mapping of the values they capture.

A shape describes the expected form of a value, like the patterns of the ``match``
statement, but as an ordinary object that can be passed around.
:func:`if_matches` tests a value against a shape and maps the captured parts of the
value when it matches.
"""

from ._if_matches import if_matches
from ._shape import (
    ANY,
    Absent,
    Anything,
    Capture,
    Captures,
    Equal,
    InstanceOf,
    IsFailure,
    IsSuccess,
    Items,
    OneOf,
    Present,
    Shape,
    as_shape,
)

__all__ = [
    "ANY",
    "Absent",
    "Anything",
    "Capture",
    "Captures",
    "Equal",
    "InstanceOf",
    "IsFailure",
    "IsSuccess",
    "Items",
    "OneOf",
    "Present",
    "Shape",
    "as_shape",
    "if_matches",
]

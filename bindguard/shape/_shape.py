from __future__ import annotations

import abc
import keyword
from collections.abc import Mapping, Sequence
from typing import Any, Optional

import attrs

from .._exceptions import ShapeError
from ..outcome import Success, Failure

type Captures = dict[str, Any]


class Shape(abc.ABC):
    """Describes the expected form of a value.

    A shape can capture parts of the value it matches under a name.
    """

    @abc.abstractmethod
    def match(self, value: Any) -> Optional[Captures]:
        """Test a value against the shape.

        Returns:
            The values captured by the shape, indexed by name, if the value matches.
            None if the value doesn't match.
        """

        raise NotImplementedError

    @abc.abstractmethod
    def names(self) -> frozenset[str]:
        """Return the names captured by the shape when it matches."""

        raise NotImplementedError


def as_shape(obj: Any) -> Shape:
    """Convert an object into a shape.

    Shapes are returned unchanged, tuples and lists are converted into
    :class:`Items` and any other object into :class:`Equal`.
    """

    if isinstance(obj, Shape):
        return obj
    if isinstance(obj, (tuple, list)):
        return Items(*obj)
    return Equal(obj)


def _disjoint_names(shapes: Sequence[Shape]) -> frozenset[str]:
    names: set[str] = set()
    for shape in shapes:
        duplicated = names & shape.names()
        if duplicated:
            raise ShapeError(f"Names {sorted(duplicated)} are captured more than once")
        names |= shape.names()
    return frozenset(names)


def _merge(
    shapes: Sequence[Shape], values: Sequence[Any]
) -> Optional[Captures]:
    captures: Captures = {}
    for shape, value in zip(shapes, values, strict=True):
        result = shape.match(value)
        if result is None:
            return None
        captures |= result
    return captures


@attrs.frozen(repr=False)
class Anything(Shape):
    """Matches any value without capturing it."""

    def match(self, value: Any) -> Captures:
        return {}

    def names(self) -> frozenset[str]:
        return frozenset()

    def __repr__(self) -> str:
        return "ANY"


ANY = Anything()


@attrs.frozen
class Capture(Shape):
    """Captures the value under `name` if it matches `inner`."""

    name: str = attrs.field()
    inner: Shape = attrs.field(default=ANY, converter=as_shape)

    @name.validator  # type: ignore
    def _validate_name(self, attribute, value):
        if not isinstance(value, str):
            raise TypeError(f"Capture name must be a string, got {value!r}")
        if not value.isidentifier() or keyword.iskeyword(value):
            raise ShapeError(f"Invalid capture name {value!r}")
        if value == "_":
            raise ShapeError("Can't capture '_', use ANY to match without capturing")

    def __attrs_post_init__(self):
        if self.name in self.inner.names():
            raise ShapeError(f"Name {self.name!r} is captured more than once")

    def match(self, value: Any) -> Optional[Captures]:
        captures = self.inner.match(value)
        if captures is None:
            return None
        return captures | {self.name: value}

    def names(self) -> frozenset[str]:
        return self.inner.names() | {self.name}


@attrs.frozen
class Equal(Shape):
    """Matches values equal to `expected`."""

    expected: Any

    def match(self, value: Any) -> Optional[Captures]:
        if value == self.expected:
            return {}
        return None

    def names(self) -> frozenset[str]:
        return frozenset()


@attrs.frozen
class Present(Shape):
    """Matches an optional value that is not None and whose value matches `inner`."""

    inner: Shape = attrs.field(default=ANY, converter=as_shape)

    def match(self, value: Any) -> Optional[Captures]:
        if value is None:
            return None
        return self.inner.match(value)

    def names(self) -> frozenset[str]:
        return self.inner.names()


@attrs.frozen
class Absent(Shape):
    """Matches None."""

    def match(self, value: Any) -> Optional[Captures]:
        return {} if value is None else None

    def names(self) -> frozenset[str]:
        return frozenset()


@attrs.frozen
class IsSuccess(Shape):
    """Matches a :class:`Success` whose value matches `inner`."""

    inner: Shape = attrs.field(default=ANY, converter=as_shape)

    def match(self, value: Any) -> Optional[Captures]:
        if not isinstance(value, Success):
            return None
        return self.inner.match(value.value)

    def names(self) -> frozenset[str]:
        return self.inner.names()


@attrs.frozen
class IsFailure(Shape):
    """Matches a :class:`Failure` whose error matches `inner`."""

    inner: Shape = attrs.field(default=ANY, converter=as_shape)

    def match(self, value: Any) -> Optional[Captures]:
        if not isinstance(value, Failure):
            return None
        return self.inner.match(value.error)

    def names(self) -> frozenset[str]:
        return self.inner.names()


def _shapes(objs: Sequence[Any]) -> tuple[Shape, ...]:
    return tuple(as_shape(obj) for obj in objs)


@attrs.frozen(init=False)
class Items(Shape):
    """Matches a sequence with exactly one item per shape.

    As with the ``match`` statement, strings and bytes are not considered sequences.
    """

    items: tuple[Shape, ...]

    def __init__(self, *items: Any):
        self.__attrs_init__(_shapes(items))
        _disjoint_names(self.items)

    def match(self, value: Any) -> Optional[Captures]:
        if not isinstance(value, Sequence) or isinstance(
            value, (str, bytes, bytearray)
        ):
            return None
        if len(value) != len(self.items):
            return None
        return _merge(self.items, value)

    def names(self) -> frozenset[str]:
        return _disjoint_names(self.items)


@attrs.frozen(init=False)
class InstanceOf(Shape):
    """Class pattern: matches instances of `cls` and their parts.

    Positional shapes are matched against the attributes listed in the
    ``__match_args__`` of the class, keyword shapes against the attributes of the
    same name.
    """

    cls: type
    positional: tuple[Shape, ...]
    attributes: Mapping[str, Shape]

    def __init__(self, cls: type, /, *positional: Any, **attributes: Any):
        self.__attrs_init__(
            cls,
            _shapes(positional),
            {name: as_shape(obj) for name, obj in attributes.items()},
        )
        match_args = getattr(cls, "__match_args__", ())
        if len(positional) > len(match_args):
            raise ShapeError(
                f"{cls.__qualname__} accepts {len(match_args)} positional "
                f"sub-shapes, got {len(positional)}"
            )
        duplicated = set(match_args[: len(positional)]) & set(attributes)
        if duplicated:
            raise ShapeError(f"Attributes {sorted(duplicated)} are matched twice")
        _disjoint_names(self._all_shapes())

    def _all_shapes(self) -> tuple[Shape, ...]:
        return self.positional + tuple(self.attributes.values())

    def _attribute_names(self) -> tuple[str, ...]:
        match_args = getattr(self.cls, "__match_args__", ())
        return tuple(match_args[: len(self.positional)]) + tuple(self.attributes)

    def match(self, value: Any) -> Optional[Captures]:
        if not isinstance(value, self.cls):
            return None
        parts = []
        for name in self._attribute_names():
            try:
                parts.append(getattr(value, name))
            except AttributeError:
                return None
        return _merge(self._all_shapes(), parts)

    def names(self) -> frozenset[str]:
        return _disjoint_names(self._all_shapes())


@attrs.frozen(init=False)
class OneOf(Shape):
    """Matches if any of the alternatives matches.

    The first matching alternative provides the captures, so all alternatives must
    capture the same names.
    """

    alternatives: tuple[Shape, ...]

    def __init__(self, *alternatives: Any):
        if not alternatives:
            raise ShapeError("At least one alternative is required")
        self.__attrs_init__(_shapes(alternatives))
        expected = self.alternatives[0].names()
        for alternative in self.alternatives[1:]:
            if alternative.names() != expected:
                raise ShapeError(
                    f"Alternatives must capture the same names, got "
                    f"{sorted(expected)} and {sorted(alternative.names())}"
                )

    def match(self, value: Any) -> Optional[Captures]:
        for alternative in self.alternatives:
            captures = alternative.match(value)
            if captures is not None:
                return captures
        return None

    def names(self) -> frozenset[str]:
        return self.alternatives[0].names()

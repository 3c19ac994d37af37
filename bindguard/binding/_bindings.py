from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional

from ._bind import bind
from .._exceptions import FrozenBindingError, UnboundNameError, with_note


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Bindings:
    """Namespace of variables created by :meth:`bind`.

    Variables are read as attributes or items.
    A variable can only be reassigned if it was bound with ``mutable=True``.

    Example:
        .. code-block:: python

            scope = Bindings()
            scope.bind("x", 42, otherwise=return_())
            scope.bind("y", None, otherwise=lambda: 0, mutable=True)
            scope.y += scope.x
    """

    __slots__ = ("_values", "_mutable")

    def __init__(self) -> None:
        object.__setattr__(self, "_values", {})
        object.__setattr__(self, "_mutable", set())

    def bind(
        self,
        name: str,
        source: Any = MISSING,
        /,
        *,
        otherwise: Callable[[], Any],
        on_failure: Optional[Callable[[Any], object]] = None,
        mutable: bool = False,
    ) -> Any:
        """Create a variable from the value held by `source`.

        The semantics are the ones of :func:`bindguard.bind`.
        On success, the value is bound to `name`.
        On failure, if the escape action returns instead of leaving the scope, the
        value it returns is bound to `name`.
        In both cases, a previous variable with the same name is shadowed by the new
        one.

        Args:
            name: Name of the variable to create.
            source: The value to extract from.
                If omitted, the current value of the variable `name` is used.
            otherwise: Escape action called when there is no value.
            on_failure: Optional handler called with the failure payload before the
                escape action.
            mutable: Whether the new variable can be reassigned.

        Returns:
            The value bound to `name`.

        Raises:
            UnboundNameError: if `source` is omitted and `name` is not bound.
        """

        if source is MISSING:
            source = self[name]
        value = bind(source, otherwise=otherwise, on_failure=on_failure)
        self._values[name] = value
        if mutable:
            self._mutable.add(name)
        else:
            self._mutable.discard(name)
        return value

    def is_mutable(self, name: str) -> bool:
        if name not in self._values:
            raise UnboundNameError(f"Variable {name!r} is not bound")
        return name in self._mutable

    def __getitem__(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise UnboundNameError(f"Variable {name!r} is not bound") from None

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise with_note(
                UnboundNameError(f"Variable {name!r} is not bound"),
                "Variables must be created with Bindings.bind",
            )
        if name not in self._mutable:
            raise FrozenBindingError(f"Variable {name!r} is not mutable")
        self._values[name] = value

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except UnboundNameError as error:
            raise AttributeError(str(error), name=name, obj=self) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        variables = ", ".join(
            f"{'mut ' if name in self._mutable else ''}{name}={value!r}"
            for name, value in self._values.items()
        )
        return f"Bindings({variables})"

"""Optional values: ``Maybe[T]`` is either ``Some(value)`` or ``Nothing()``.

``Maybe`` replaces ``None`` sentinels with an explicit container. Callers
chain combinators (``map``, ``flat_map``, ``map_or``) and only leave the
container through a safe accessor (``unwrap_or``, ``match``) or the
deliberately unsafe ``unwrap``.

Example:
    name = from_optional(env.get("USER")).map(str.title).unwrap_or("Anonymous")
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Final, TypeIs, final

from maybe_result.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "Maybe",
    "Nothing",
    "Some",
    "from_optional",
    "is_nothing",
    "is_some",
    "nothing",
    "some",
]

log = logging.getLogger(__name__)

_VARIANTS: Final[frozenset[str]] = frozenset({"Some", "Nothing"})


class Maybe[T](abc.ABC):
    """A value that may or may not exist.

    ``Maybe`` is sealed: ``Some`` and ``Nothing`` are its only subclasses and
    defining another one raises ``TypeError``. Instances are immutable and
    every combinator returns a new instance.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(
                f"Maybe is sealed; cannot subclass it as {cls.__qualname__!r}"
            )

    @abc.abstractmethod
    def is_some(self) -> bool:
        """Return True if this is a ``Some``.

        Prefer the combinators over testing and extracting by hand. To have a
        type checker narrow the variant, use the module-level ``is_some()``.
        """

    def is_nothing(self) -> bool:
        """Return True if this is a ``Nothing``."""
        return not self.is_some()

    def match[U, V](self, some: Callable[[T], U], nothing: Callable[[], V]) -> U | V:
        """Dispatch to exactly one handler based on the variant.

        Both handlers are required, so every call site covers both cases.
        Like ``unwrap_or`` except the fallback is computed, which lets it
        close over the caller's scope.

        Example:
            Some(10).match(some=lambda v: v * 2, nothing=lambda: 0)  # 20
        """
        if isinstance(self, Some):
            return some(self.value)
        return nothing()

    @abc.abstractmethod
    def contains(self, value: T) -> bool:
        """Return True if this is a ``Some`` whose value equals ``value``."""

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            UnwrapError: If this is a ``Nothing``.
        """

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Return the contained value, raising ``UnwrapError(message)`` if absent."""

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the contained value, or ``default`` for ``Nothing``."""

    @abc.abstractmethod
    def to_optional(self) -> T | None:
        """Return the contained value, or ``None`` for ``Nothing``."""

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Maybe[U]:
        """Apply ``fn`` to the contained value.

        ``Nothing`` passes through and ``fn`` is not called.

        Example:
            Some("string").map(len)  # Some(6)
            Nothing().map(len)  # Nothing()
        """

    @abc.abstractmethod
    def map_or[U](self, fn: Callable[[T], U], default: U) -> Maybe[U]:
        """Apply ``fn`` to the contained value, or wrap ``default``.

        The result is always a ``Some``, so chained calls stay inside the
        container.

        Example:
            Some("string").map_or(len, 10)  # Some(6)
            Nothing().map_or(len, 10)  # Some(10)
        """

    @abc.abstractmethod
    def flat_map[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Apply a ``Maybe``-returning ``fn`` without double wrapping.

        Example:
            Some("string").flat_map(lambda s: Some(len(s)))  # Some(6)
            Nothing().flat_map(lambda s: Some(len(s)))  # Nothing()
        """


@final
@dataclass(frozen=True, slots=True, repr=False)
class Some[T](Maybe[T]):
    """The present variant, holding exactly one value."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> bool:
        return True

    def contains(self, value: T) -> bool:
        return bool(self.value == value)

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        del message
        return self.value

    def unwrap_or(self, default: T) -> T:
        del default
        return self.value

    def to_optional(self) -> T | None:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Maybe[U]:
        return Some(fn(self.value))

    def map_or[U](self, fn: Callable[[T], U], default: U) -> Maybe[U]:
        del default
        return Some(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return fn(self.value)


@final
@dataclass(frozen=True, slots=True, repr=False)
class Nothing[T](Maybe[T]):
    """The absent variant. No value is ever reachable from it."""

    def __repr__(self) -> str:
        return "Nothing()"

    def is_some(self) -> bool:
        return False

    def contains(self, value: T) -> bool:
        del value
        return False

    def unwrap(self) -> T:
        log.debug("unwrap() called on Nothing")
        raise UnwrapError("Unwrap called on Nothing value", variant="Nothing")

    def expect(self, message: str) -> T:
        log.debug("expect() called on Nothing: %s", message)
        raise UnwrapError(message, variant="Nothing")

    def unwrap_or(self, default: T) -> T:
        return default

    def to_optional(self) -> T | None:
        return None

    def map[U](self, fn: Callable[[T], U]) -> Maybe[U]:
        del fn
        return Nothing()

    def map_or[U](self, fn: Callable[[T], U], default: U) -> Maybe[U]:
        del fn
        return Some(default)

    def flat_map[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        del fn
        return Nothing()


def some[T](value: T) -> Maybe[T]:
    """Wrap ``value`` in a ``Some``."""
    return Some(value)


def nothing[T]() -> Maybe[T]:
    """Return a ``Nothing``."""
    return Nothing()


def from_optional[T](value: T | None) -> Maybe[T]:
    """Lift a native optional: ``None`` becomes ``Nothing()``, anything else ``Some``."""
    if value is None:
        return Nothing()
    return Some(value)


def is_some[T](maybe: Maybe[T]) -> TypeIs[Some[T]]:
    """Narrowing guard: True if ``maybe`` is a ``Some``."""
    return maybe.is_some()


def is_nothing[T](maybe: Maybe[T]) -> TypeIs[Nothing[T]]:
    """Narrowing guard: True if ``maybe`` is a ``Nothing``."""
    return maybe.is_nothing()

"""Operation outcomes: ``Result[T, E]`` is either ``Ok(value)`` or ``Err(error)``.

The error side carries plain data (a message, an error code, an exception
object), so failures become a predictable part of the data flow rather than
something to catch.

Example:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return err(f"not a number: {raw!r}")
        return ok(int(raw))

    port = parse_port(raw).map_err(str.upper).unwrap_or(8080)
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Final, TypeIs, final

from maybe_result.config import render_payload
from maybe_result.errors import UnwrapError
from maybe_result.maybe import Maybe, Nothing, Some

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Err", "Ok", "Result", "err", "is_err", "is_ok", "ok"]

log = logging.getLogger(__name__)

_VARIANTS: Final[frozenset[str]] = frozenset({"Ok", "Err"})


class Result[T, E](abc.ABC):
    """The outcome of an operation: a produced value or an error value.

    ``Result`` is sealed: ``Ok`` and ``Err`` are its only subclasses. The
    combinators mirror ``Maybe`` with ``Ok`` in the role of ``Some`` and
    ``Err`` in the role of ``Nothing``; ``map_err`` works on the error side.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(
                f"Result is sealed; cannot subclass it as {cls.__qualname__!r}"
            )

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True if this is an ``Ok``.

        To have a type checker narrow the variant, use the module-level
        ``is_ok()``.
        """

    def is_err(self) -> bool:
        """Return True if this is an ``Err``."""
        return not self.is_ok()

    def match[U, F](self, ok: Callable[[T], U], err: Callable[[E], F]) -> U | F:
        """Dispatch to exactly one handler based on the variant.

        Example:
            Err("Cow").match(ok=lambda n: n**2, err=len)  # 3
        """
        if isinstance(self, Ok):
            return ok(self.value)
        return err(self.unwrap_err())

    @abc.abstractmethod
    def contains(self, value: T | E) -> bool:
        """Compare ``value`` with whichever payload this variant holds.

        Unlike ``Maybe.contains`` this looks at the error side too:
        ``Err(30).contains(30)`` is True.
        """

    @abc.abstractmethod
    def ok(self) -> Maybe[T]:
        """Project onto the success side: ``Some(value)`` or ``Nothing()``."""

    @abc.abstractmethod
    def err(self) -> Maybe[E]:
        """Project onto the error side: ``Some(error)`` or ``Nothing()``."""

    @abc.abstractmethod
    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            UnwrapError: If this is an ``Err``. The message contains the
                rendered error and ``payload`` is the error itself.
        """

    @abc.abstractmethod
    def expect(self, message: str) -> T:
        """Like ``unwrap`` but prefixes the error message with ``message``."""

    @abc.abstractmethod
    def unwrap_err(self) -> E:
        """Return the error value, raising ``UnwrapError`` for an ``Ok``."""

    @abc.abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value, or ``default`` for an ``Err``."""

    @abc.abstractmethod
    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; an ``Err`` passes through."""

    @abc.abstractmethod
    def map_or[U](self, fn: Callable[[T], U], default: U) -> Result[U, E]:
        """Apply ``fn`` to the success value, or return ``Ok(default)``.

        Example:
            Ok("string").map_or(len, 5)  # Ok(6)
            Err("Error").map_or(len, 5)  # Ok(5)
        """

    @abc.abstractmethod
    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the error value; an ``Ok`` passes through.

        Example:
            Err("string").map_err(lambda e: f"{e} and another error")
            # Err('string and another error')
        """

    @abc.abstractmethod
    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a ``Result``-returning ``fn`` to the success value.

        Example:
            Ok("string").flat_map(lambda s: Ok(len(s)))  # Ok(6)
            Err(42).flat_map(lambda s: Ok(len(s)))  # Err(42)
        """


@final
@dataclass(frozen=True, slots=True, repr=False)
class Ok[T, E](Result[T, E]):
    """The success variant."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> bool:
        return True

    def contains(self, value: T | E) -> bool:
        return bool(self.value == value)

    def ok(self) -> Maybe[T]:
        return Some(self.value)

    def err(self) -> Maybe[E]:
        return Nothing()

    def unwrap(self) -> T:
        return self.value

    def expect(self, message: str) -> T:
        del message
        return self.value

    def unwrap_err(self) -> E:
        rendered = render_payload(self.value)
        log.debug("unwrap_err() called on Ok: %s", rendered)
        raise UnwrapError(
            f"Unwrap error called on Ok value: {rendered}",
            variant="Ok",
            payload=self.value,
        )

    def unwrap_or(self, default: T) -> T:
        del default
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        return Ok(fn(self.value))

    def map_or[U](self, fn: Callable[[T], U], default: U) -> Result[U, E]:
        del default
        return Ok(fn(self.value))

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        del fn
        return Ok(self.value)

    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)


@final
@dataclass(frozen=True, slots=True, repr=False)
class Err[T, E](Result[T, E]):
    """The failure variant. ``error`` is plain data, not necessarily an exception."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> bool:
        return False

    def contains(self, value: T | E) -> bool:
        return bool(self.error == value)

    def ok(self) -> Maybe[T]:
        return Nothing()

    def err(self) -> Maybe[E]:
        return Some(self.error)

    def unwrap(self) -> T:
        rendered = render_payload(self.error)
        log.debug("unwrap() called on Err: %s", rendered)
        raise UnwrapError(
            rendered, variant="Err", payload=self.error
        ) from self._cause()

    def expect(self, message: str) -> T:
        rendered = render_payload(self.error)
        log.debug("expect() called on Err: %s", message)
        raise UnwrapError(
            f"{message}: {rendered}", variant="Err", payload=self.error
        ) from self._cause()

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        del fn
        return Err(self.error)

    def map_or[U](self, fn: Callable[[T], U], default: U) -> Result[U, E]:
        del fn
        return Ok(default)

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        return Err(fn(self.error))

    def flat_map[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        del fn
        return Err(self.error)

    def _cause(self) -> BaseException | None:
        # Exception payloads stay reachable through __cause__.
        return self.error if isinstance(self.error, BaseException) else None


def ok[T, E](value: T) -> Result[T, E]:
    """Wrap ``value`` in an ``Ok``."""
    return Ok(value)


def err[T, E](error: E) -> Result[T, E]:
    """Wrap ``error`` in an ``Err``."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """Narrowing guard: True if ``result`` is an ``Ok``."""
    return result.is_ok()


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Narrowing guard: True if ``result`` is an ``Err``."""
    return result.is_err()

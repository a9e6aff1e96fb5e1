"""Exception hierarchy for maybe-result."""

from __future__ import annotations

from typing import Any, Literal

VariantName = Literal["Nothing", "Err", "Ok"]

_UNWRAP_HINT = "Use unwrap_or(), map_or() or match() to handle both variants."


class MaybeResultError(Exception):
    """Base exception for all maybe-result errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when there is one."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(MaybeResultError):
    """Configuration validation or resolution failed."""


class UnwrapError(MaybeResultError):
    """A value was extracted from the empty side of a container.

    Raised by ``unwrap()``/``expect()`` on ``Nothing`` or ``Err`` and by
    ``unwrap_err()`` on ``Ok``. ``payload`` is the object held by the
    receiver (``None`` for ``Nothing``) so the cause is never lost.
    """

    def __init__(
        self,
        message: str,
        *,
        variant: VariantName,
        payload: Any = None,
        hint: str | None = _UNWRAP_HINT,
    ) -> None:
        super().__init__(message, hint=hint)
        self.variant = variant
        self.payload = payload

"""Configuration: how payloads are rendered into unwrap errors."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import logging
import os
from typing import TYPE_CHECKING, Any, Literal, get_args

from dotenv import dotenv_values, find_dotenv

from maybe_result.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

log = logging.getLogger(__name__)

PayloadFormat = Literal["str", "repr"]

_PAYLOAD_FORMATS: tuple[str, ...] = get_args(PayloadFormat)

ENV_PAYLOAD_FORMAT = "MAYBE_RESULT_PAYLOAD_FORMAT"


@dataclass(frozen=True)
class Config:
    """Immutable rendering configuration.

    The rendered payload is always complete; only its form is configurable.

    Example:
        with use_config(Config(payload_format="repr")):
            err("disk full").unwrap()  # UnwrapError: 'disk full'
    """

    payload_format: PayloadFormat = "str"

    def __post_init__(self) -> None:
        """Validate field values."""
        if self.payload_format not in _PAYLOAD_FORMATS:
            raise ConfigurationError(
                f"Unknown payload_format: {self.payload_format!r}",
                hint="Supported formats: 'str', 'repr'",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``MAYBE_RESULT_*`` variables.

        Values come from the process environment, then from the nearest
        ``.env`` file above the working directory. The file is read, never
        loaded into ``os.environ``.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        path = find_dotenv(usecwd=True)
        file_values = dotenv_values(path) if path else {}
        raw = os.environ.get(ENV_PAYLOAD_FORMAT)
        if raw is None:
            raw = file_values.get(ENV_PAYLOAD_FORMAT)
        fmt = (raw or "str").strip().lower()
        return cls(payload_format=fmt)  # type: ignore[arg-type]

    def render(self, payload: Any) -> str:
        """Render ``payload`` for inclusion in an error message. Never raises."""
        try:
            return repr(payload) if self.payload_format == "repr" else str(payload)
        except Exception:  # noqa: BLE001
            log.debug(
                "%s payload failed to render as %s", type(payload), self.payload_format
            )
        try:
            return repr(payload)
        except Exception:  # noqa: BLE001
            return f"<unprintable {type(payload).__name__} object>"


_override_var: ContextVar[Config | None] = ContextVar("config_override", default=None)
_env_config: Config | None = None


def get_config() -> Config:
    """Return the active Config: a ``use_config`` override, else the env one.

    An invalid environment falls back to the defaults with a warning, so
    rendering an error never raises a different one.
    """
    global _env_config  # noqa: PLW0603
    override = _override_var.get()
    if override is not None:
        return override
    if _env_config is None:
        try:
            _env_config = Config.from_env()
        except ConfigurationError as e:
            log.warning("Ignoring invalid maybe-result configuration: %s", e)
            _env_config = Config()
    return _env_config


def reset_config() -> None:
    """Forget the cached environment Config so the next lookup re-reads it."""
    global _env_config  # noqa: PLW0603
    _env_config = None


@contextmanager
def use_config(config: Config) -> Iterator[Config]:
    """Make ``config`` active for the current context."""
    token = _override_var.set(config)
    try:
        yield config
    finally:
        _override_var.reset(token)


def render_payload(payload: Any) -> str:
    """Render ``payload`` with the active Config."""
    return get_config().render(payload)

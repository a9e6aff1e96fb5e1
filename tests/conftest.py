"""Pytest configuration and fixtures.

Provides environment isolation, config cache resets, logging configuration
and the call-counting test double. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

from maybe_result.config import reset_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallCounter:
    """Callable test double that records every invocation.

    Wraps an optional ``fn``; without one it returns its single argument (or
    ``None`` when called with no arguments). Use it to prove a combinator
    calls its callback exactly once, or not at all.
    """

    fn: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.calls)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.fn is not None:
            return self.fn(*args)
        return args[0] if args else None


@pytest.fixture
def counter() -> CallCounter:
    """Return a fresh identity CallCounter (not autouse)."""
    return CallCounter()


@pytest.fixture
def make_counter():
    """Return a factory for CallCounters wrapping a function (not autouse)."""
    return CallCounter


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "maybe_result.config.dotenv_values",
            lambda *_args, **_kwargs: {},
        )


@pytest.fixture(autouse=True)
def isolate_env(request, monkeypatch):
    """Clear MAYBE_RESULT_* variables and the cached config for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("MAYBE_RESULT_"):
                monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def library_debug_logging():
    """Let caplog see the library's DEBUG records."""
    logging.getLogger("maybe_result").setLevel(logging.DEBUG)

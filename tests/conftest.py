# topmark:header:start
#
#   project      : Hueprint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Hueprint test suite.

Sets up TRACE logging for the whole run and isolates tests from the
developer's environment (log level, color variables, global color registry).

Notes:
    Build configs with `hueprint.config.model.MutableRenderConfig`, then
    `freeze()` into a `RenderConfig`. Do **not** mutate a frozen config; call
    `thaw()`, edit, and `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from hueprint.config import logging
from hueprint.palette.registry import PaletteRegistry

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_hueprint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level and color choice are not forced via env.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop environment variables.
    """
    monkeypatch.delenv("HUEPRINT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def clean_registry() -> Iterator[None]:
    """Drop colors registered by a test once it finishes."""
    yield
    PaletteRegistry.reset()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)

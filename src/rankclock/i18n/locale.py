"""Display locale binding.

The locale is resolved per call: an explicit ``locale=`` argument wins,
then the binding from the innermost :func:`use_locale` block, then the
configured default.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

DEFAULT_LOCALE = "en"

_default_locale: str = DEFAULT_LOCALE
_bound_locale: ContextVar[str | None] = ContextVar("_bound_locale", default=None)


def get_current_locale() -> str:
    """Locale bound in the current context, else the configured default."""
    bound = bound_locale()
    if bound is not None:
        return bound
    return _default_locale


def bound_locale() -> str | None:
    """Locale bound by the innermost :func:`use_locale`, or None outside one."""
    return _bound_locale.get()


def set_default_locale(identifier: str) -> None:
    """Set the fallback locale used outside any :func:`use_locale` block."""
    global _default_locale
    _default_locale = identifier


@contextmanager
def use_locale(identifier: str) -> Generator[str]:
    """Bind *identifier* as the current locale for the enclosed block."""
    token = _bound_locale.set(identifier)
    try:
        yield identifier
    finally:
        _bound_locale.reset(token)

"""Shared fixtures that keep the process locale deterministic."""

from __future__ import annotations

import locale
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

_GERMAN_LOCALE_NAMES = ("de_DE.UTF-8", "de_DE.utf8", "de_DE")


@pytest.fixture(autouse=True)
def c_numeric_locale() -> Generator[None, None, None]:
    """Run each test under the C numeric locale and restore the original."""
    original = locale.setlocale(locale.LC_NUMERIC)
    locale.setlocale(locale.LC_NUMERIC, "C")
    yield
    locale.setlocale(locale.LC_NUMERIC, original)


@pytest.fixture()
def numeric_conventions(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[..., None]:
    """Return a setter that fakes ``locale.localeconv`` separators.

    Works without any locale installed; ``locale.format_string`` reads the
    patched conventions when grouping.
    """

    def _apply(
        thousands_sep: str, decimal_point: str, grouping: list[int] | None = None
    ) -> None:
        conventions = {
            **locale.localeconv(),
            "thousands_sep": thousands_sep,
            "decimal_point": decimal_point,
            "grouping": grouping if grouping is not None else [3, 3, 0],
        }
        monkeypatch.setattr(locale, "localeconv", lambda: conventions)

    return _apply


@pytest.fixture()
def german_locale(c_numeric_locale: None) -> str:
    """Switch LC_NUMERIC to a German locale, skipping if none is installed."""
    for name in _GERMAN_LOCALE_NAMES:
        try:
            return locale.setlocale(locale.LC_NUMERIC, name)
        except locale.Error:
            continue
    pytest.skip("no German locale installed")

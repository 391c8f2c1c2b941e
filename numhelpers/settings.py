"""Runtime settings for number formatting.

Settings come from the environment (optionally seeded from a ``.env`` file):

- ``NUMHELPERS_LOCALE``: locale name for ``LC_NUMERIC`` (e.g. 'de_DE.UTF-8').
  Unset means the user's environment default.
"""

from __future__ import annotations

import locale
import logging
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from numhelpers.exceptions import LocaleActivationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "NUMHELPERS_LOCALE"


class FormatSettings(BaseModel):
    """Locale configuration for an application."""

    locale_name: str | None = Field(default=None, min_length=1)


def load_settings(env_file: str | Path | None = None) -> FormatSettings:
    """Build FormatSettings from environment variables.

    If *env_file* is given it is loaded first; variables already set in the
    environment take precedence over the file.
    """
    if env_file is not None:
        load_dotenv(env_file)

    values: dict[str, Any] = {}
    locale_name = os.environ.get(LOCALE_ENV_VAR, "").strip()
    if locale_name:
        values["locale_name"] = locale_name
    return FormatSettings.model_validate(values)


def activate_locale(settings: FormatSettings | None = None) -> str:
    """Switch the process ``LC_NUMERIC`` locale and return the active name.

    ``locale.setlocale`` is process-global; call this once at start-up.
    """
    settings = settings or FormatSettings()
    requested = settings.locale_name or ""
    try:
        active = locale.setlocale(locale.LC_NUMERIC, requested)
    except locale.Error as exc:
        logger.warning("Locale %r is not available", requested)
        msg = f"Locale {requested!r} is not available on this system"
        raise LocaleActivationError(msg) from exc
    logger.info("Number formatting locale set to %s", active)
    return active

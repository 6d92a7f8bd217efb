"""Runtime settings read from the environment (optionally via ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .i18n import CATALOGUES, DEFAULT_LANGUAGE, get_messages
from .utils.logging import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    language: str = DEFAULT_LANGUAGE
    log_level: str = "INFO"
    page_title: str = ""


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``env`` or the process environment.

    When reading the process environment a ``.env`` file is loaded first;
    variables already set take precedence over it.
    """

    if env is None:
        load_dotenv()
        env = os.environ

    language = env.get("AGESTATS_LANGUAGE", DEFAULT_LANGUAGE).strip().lower() or DEFAULT_LANGUAGE
    if language not in CATALOGUES:
        _LOGGER.warning("AGESTATS_LANGUAGE=%r is not supported, using %r", language, DEFAULT_LANGUAGE)
        language = DEFAULT_LANGUAGE

    log_level = env.get("AGESTATS_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(log_level), int):
        _LOGGER.warning("AGESTATS_LOG_LEVEL=%r is not a logging level, using INFO", log_level)
        log_level = "INFO"
    page_title = env.get("AGESTATS_PAGE_TITLE", "").strip() or get_messages(language).app_title

    return Settings(language=language, log_level=log_level, page_title=page_title)

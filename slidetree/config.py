"""Environment driven settings and logging bootstrap."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "SLIDETREE_"


@dataclass(slots=True)
class Settings:
    """Runtime defaults used by the renderer and the diff formatters."""

    log_level: str = "WARNING"
    default_font_family: str = "Arial"
    default_font_size_pt: float = 11.0
    default_text_color: str = "#000000"
    default_background_color: str = "#ffffff"
    diff_context_lines: int = 3


def load_settings(
    *, use_dotenv: bool = True, dotenv_path: Optional[str] = None
) -> Settings:
    """Build :class:`Settings` from ``SLIDETREE_*`` environment variables.

    Values already present in the environment win over the ``.env`` file.
    """

    if use_dotenv:
        load_dotenv(dotenv_path)
    defaults = Settings()
    return Settings(
        log_level=_env_str("LOG_LEVEL", defaults.log_level).upper(),
        default_font_family=_env_str(
            "DEFAULT_FONT_FAMILY", defaults.default_font_family
        ),
        default_font_size_pt=_env_float(
            "DEFAULT_FONT_SIZE_PT", defaults.default_font_size_pt
        ),
        default_text_color=_env_str(
            "DEFAULT_TEXT_COLOR", defaults.default_text_color
        ),
        default_background_color=_env_str(
            "DEFAULT_BACKGROUND_COLOR", defaults.default_background_color
        ),
        diff_context_lines=_env_int(
            "DIFF_CONTEXT_LINES", defaults.diff_context_lines
        ),
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic handler to the root logger at ``level``."""

    resolved = (level or load_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------
def _env_str(name: str, default: str) -> str:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc

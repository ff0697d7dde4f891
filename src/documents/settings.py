"""Environment-driven parser settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ParserSettings:
    log_level: str = "WARNING"
    report_unknown_fragments: bool = True


def build_settings_from_env() -> ParserSettings:
    """Read ``CONTENT_*`` variables (a ``.env`` file is honoured)."""

    log_level = (os.getenv("CONTENT_LOG_LEVEL") or "WARNING").upper()
    report_unknown = (os.getenv("CONTENT_REPORT_UNKNOWN_FRAGMENTS") or "true").strip().lower()
    return ParserSettings(log_level=log_level, report_unknown_fragments=report_unknown not in _FALSY)


def configure_logging(settings: ParserSettings | None = None) -> None:
    resolved = settings or build_settings_from_env()
    logging.basicConfig(level=resolved.log_level)


__all__ = ["ParserSettings", "build_settings_from_env", "configure_logging"]

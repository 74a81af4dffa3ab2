"""Logging setup: default console sink or an external YAML dictConfig."""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
HANDLER_NAME = "hello.console"
LEVEL_ENV = "HELLO_LOG_LEVEL"
CONFIG_ENV = "HELLO_LOG_CONFIG"

LOGGER = logging.getLogger(__name__)


class LoggingConfigError(RuntimeError):
    """Raised when an external logging config file cannot be used."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot use logging config {path}: {reason}")


@dataclass(frozen=True)
class LoggingSettings:
    """Logging level and optional config file path for one process."""

    level: int = logging.INFO
    config_path: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingSettings":
        env = os.environ if environ is None else environ
        level_name = (env.get(LEVEL_ENV) or "").strip().upper()
        level = logging.getLevelName(level_name) if level_name else logging.INFO
        if not isinstance(level, int):
            level = logging.INFO
        raw_path = (env.get(CONFIG_ENV) or "").strip()
        return cls(level=level, config_path=Path(raw_path) if raw_path else None)


def load_logging_config(path: Path) -> Dict[str, Any]:
    """Read a YAML file holding a ``logging.config.dictConfig`` mapping."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoggingConfigError(path, str(exc)) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LoggingConfigError(path, f"invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise LoggingConfigError(path, "top-level value must be a mapping")
    data.setdefault("version", 1)
    data.setdefault("disable_existing_loggers", False)
    return data


def _install_default_handler(level: int) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if any(handler.get_name() == HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def _apply_config_file(path: Path) -> None:
    config = load_logging_config(path)
    try:
        logging.config.dictConfig(config)
    except (ValueError, TypeError, AttributeError, ImportError) as exc:
        raise LoggingConfigError(path, f"rejected by dictConfig: {exc}") from exc


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """Configure the root logger once per process.

    A config file from ``HELLO_LOG_CONFIG`` wins over the default sink. A file
    that cannot be applied is reported as a warning and the default sink is
    used instead.
    """

    settings = settings or LoggingSettings.from_env()
    if settings.config_path is None:
        _install_default_handler(settings.level)
        return

    try:
        _apply_config_file(settings.config_path)
    except LoggingConfigError as exc:
        # Handlers dictConfig built before rejecting the file stay open.
        _install_default_handler(settings.level)
        LOGGER.warning("logging_config_fallback path=%s error=%s", exc.path, exc.reason)

# relinstall_core/config.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import os

DEFAULT_DOWNLOAD_TIMEOUT = 30
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class InstallerConfig:
    pubkey_file: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None
    download_timeout: float = DEFAULT_DOWNLOAD_TIMEOUT
    ignore_ownership: bool = True

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)


def _to_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Invalid boolean setting: {value!r}")


def load_config(config: dict | None = None) -> InstallerConfig:
    """
    Resolve installer settings.

    Precedence: explicit ``config`` dict, then RELINSTALL_* environment
    variables, then defaults.
    """
    config = config or {}

    pubkey_file = config.get("pubkey_file") or os.getenv("RELINSTALL_PUBKEY_FILE") or None

    log_level = str(config.get("log_level") or os.getenv("RELINSTALL_LOG_LEVEL", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    log_file = config.get("log_file") or os.getenv("RELINSTALL_LOG_FILE") or None

    raw_timeout = config.get("download_timeout")
    if raw_timeout is None:
        raw_timeout = os.getenv("RELINSTALL_DOWNLOAD_TIMEOUT", DEFAULT_DOWNLOAD_TIMEOUT)
    try:
        download_timeout = float(raw_timeout)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid download timeout: {raw_timeout!r}") from e
    if download_timeout <= 0:
        raise ValueError(f"Download timeout must be positive: {download_timeout}")

    raw_ignore = config.get("ignore_ownership")
    if raw_ignore is None:
        raw_ignore = os.getenv("RELINSTALL_IGNORE_OWNERSHIP", "1")
    ignore_ownership = _to_bool(raw_ignore)

    return InstallerConfig(
        pubkey_file=pubkey_file,
        log_level=log_level,
        log_file=log_file,
        download_timeout=download_timeout,
        ignore_ownership=ignore_ownership,
    )

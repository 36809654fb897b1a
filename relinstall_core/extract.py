# relinstall_core/extract.py

from __future__ import annotations
from pathlib import Path
from typing import Callable

from .archive import unpack_archive
from .logger import get_logger
from .semver import extract_semver

log = get_logger("relinstall.extract")


def extract_release(
    archive_path,
    destination,
    unpack: Callable[..., object] = unpack_archive,
    ignore_ownership: bool = True,
) -> str:
    """
    Unpack a downloaded release archive and report the version it holds.

    The version is read from the archive's file name and returned in its
    canonical ``vMAJOR.MINOR.PATCH[-PRE]`` form. Unpack or parse failures
    propagate unchanged.
    """
    filename = Path(archive_path).name
    log.info(f"[EXTRACT] extracting: {filename} -> {destination}")

    unpack(archive_path, destination, ignore_ownership=ignore_ownership)

    version = extract_semver(filename).canonical()
    log.info(f"[EXTRACT] installed {version}")
    return version

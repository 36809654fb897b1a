"""
relinstall_core.errors
----------------------
Error taxonomy for the installer core. Every error raised by this package
derives from InstallerError so callers can stop an install step with a single
except clause while still telling the failure kinds apart.
"""

from __future__ import annotations
from typing import Optional


class InstallerError(Exception):
    pass


class ParseError(InstallerError, ValueError):
    """A string does not carry a usable semantic version."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class FileAccessError(InstallerError):
    """A file the installer needs could not be opened or read."""

    def __init__(self, path, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"cannot access {path}{detail}")
        self.path = str(path)
        self.cause = cause


class KeyringError(InstallerError):
    """The trusted release key could not be loaded (a build defect)."""


class SignatureError(InstallerError):
    """A detached signature did not verify against the trusted keyring."""


class ManifestError(InstallerError):
    pass


class DigestError(InstallerError):
    pass


class ArchiveError(InstallerError):
    pass


class DownloadError(InstallerError):
    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status = status

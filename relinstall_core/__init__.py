"""
relinstall Core Package
=======================
Building blocks shared by the release installer.

Provides:
- Semantic version extraction from release file names
- Detached OpenPGP signature verification against the pinned release key
- Manifest digests, tar unpacking and download helpers
"""

from .errors import (
    InstallerError,
    ParseError,
    FileAccessError,
    KeyringError,
    SignatureError,
    ManifestError,
    DigestError,
    ArchiveError,
    DownloadError,
)
from .semver import SemVerInfo, extract_semver
from .keyring import TrustedKey
from .verify import SignatureVerifier, pgp_verify
from .extract import extract_release

__version__ = "0.1.0"

__all__ = [
    "InstallerError",
    "ParseError",
    "FileAccessError",
    "KeyringError",
    "SignatureError",
    "ManifestError",
    "DigestError",
    "ArchiveError",
    "DownloadError",
    "SemVerInfo",
    "extract_semver",
    "TrustedKey",
    "SignatureVerifier",
    "pgp_verify",
    "extract_release",
]

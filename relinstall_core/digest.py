"""
relinstall_core.digest
----------------------
Streaming SHA-256 digests and the release manifest that lists them.

Manifest lines follow the ``sha256sum`` layout::

    <64 hex chars>  <filename>
    <64 hex chars> *<filename>     (binary-mode marker)
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict
import hashlib
import hmac
import re

from .errors import DigestError, FileAccessError, ManifestError
from .logger import get_logger

log = get_logger("relinstall.digest")

# 64KB chunks for memory-efficient hashing
CHUNK_SIZE = 65536

MANIFEST_LINE_RE = re.compile(r"^([0-9a-fA-F]{64})\s+\*?(\S.*?)\s*$")


def sha256_file(path) -> bytes:
    """Return the raw SHA-256 digest of the file at ``path``."""
    hasher = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            while chunk := f.read(CHUNK_SIZE):
                hasher.update(chunk)
    except OSError as e:
        raise FileAccessError(path, e) from e
    return hasher.digest()


def parse_manifest(path) -> Dict[str, str]:
    """Map file name -> lowercase hex digest for every entry in a manifest."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileAccessError(path, e) from e
    except UnicodeDecodeError as e:
        raise ManifestError(f"manifest {path} is not valid UTF-8") from e

    entries: Dict[str, str] = {}
    for lineno, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        m = MANIFEST_LINE_RE.match(stripped)
        if m is None:
            raise ManifestError(f"manifest {path}:{lineno}: malformed entry {line!r}")
        digest, filename = m.groups()
        entries[filename] = digest.lower()
    return entries


def verify_digest(manifest_path, file_path) -> str:
    """
    Compare ``file_path`` against its entry in ``manifest_path``.

    Returns the hex digest on success; raises DigestError when the file is
    not listed or its content differs.
    """
    name = Path(file_path).name
    entries = parse_manifest(manifest_path)
    expected = entries.get(name)
    if expected is None:
        raise DigestError(f"{name} is not listed in manifest {manifest_path}")

    actual = sha256_file(file_path).hex()
    if not hmac.compare_digest(actual, expected):
        log.warning(f"[DIGEST] {name}: expected {expected} got {actual}")
        raise DigestError(f"digest mismatch for {name}: expected {expected}, got {actual}")

    log.info(f"[DIGEST] {name}: {actual} ok")
    return actual

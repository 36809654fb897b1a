"""
relinstall_core.verify
----------------------
Detached OpenPGP signature verification for downloaded release manifests.

A manifest is trusted only when its detached signature was made by a key in
the trusted keyring over the exact manifest bytes. Hashing and the signature
check both happen inside PGPy; no separately computed digest is consulted.
"""

from __future__ import annotations
from contextlib import ExitStack
from functools import lru_cache
from typing import Optional
import threading

import pgpy

from .config import load_config
from .errors import FileAccessError, SignatureError
from .keyring import TrustedKey
from .logger import get_logger

log = get_logger("relinstall.verify")


def _open(stack: ExitStack, path):
    try:
        return stack.enter_context(open(path, "rb"))
    except OSError as e:
        raise FileAccessError(path, e) from e


def _read(f, path) -> bytes:
    try:
        return f.read()
    except OSError as e:
        raise FileAccessError(path, e) from e


class SignatureVerifier:
    """
    Verifies detached signatures against one TrustedKey.

    The keyring is parsed on first use and then shared read-only between
    calls and threads. A failed parse is not cached.
    """

    def __init__(self, trusted_key: TrustedKey):
        self.trusted_key = trusted_key
        self._keyring: Optional[pgpy.PGPKeyring] = None
        self._lock = threading.Lock()

    @property
    def keyring(self) -> pgpy.PGPKeyring:
        if self._keyring is None:
            with self._lock:
                if self._keyring is None:
                    self._keyring = self.trusted_key.load()
        return self._keyring

    def verify(self, signature_path, manifest_path) -> None:
        """
        Check ``signature_path`` as a detached signature over ``manifest_path``.

        Raises FileAccessError, KeyringError or SignatureError; returns None
        when the manifest is authentic.
        """
        with ExitStack() as stack:
            sf = _open(stack, signature_path)
            mf = _open(stack, manifest_path)
            keyring = self.keyring

            blob = _read(sf, signature_path)
            try:
                sig = pgpy.PGPSignature.from_blob(blob)
                signer = sig.signer
            except Exception as e:
                raise SignatureError(f"malformed signature {signature_path}: {e}") from e

            if not signer:
                raise SignatureError(f"signature {signature_path} does not name its signing key")

            data = _read(mf, manifest_path)

            try:
                with keyring.key(signer) as key:
                    result = key.verify(data, sig)
            except KeyError as e:
                log.warning(f"[VERIFY] {manifest_path}: signer {signer} is not trusted")
                raise SignatureError(
                    f"signature {signature_path} was made by untrusted key {signer}"
                ) from e
            except Exception as e:
                raise SignatureError(f"cannot verify {manifest_path} with {signature_path}: {e}") from e

            if not result:
                log.warning(f"[VERIFY] {manifest_path}: bad signature from {signer}")
                raise SignatureError(
                    f"signature {signature_path} does not match {manifest_path}"
                )

        log.info(f"[VERIFY] {manifest_path}: good signature from {signer}")


@lru_cache(maxsize=1)
def default_verifier() -> SignatureVerifier:
    """Process-wide verifier for the configured release key."""
    return SignatureVerifier(TrustedKey.from_config(load_config()))


def pgp_verify(signature_path, manifest_path, verifier: Optional[SignatureVerifier] = None) -> None:
    (verifier or default_verifier()).verify(signature_path, manifest_path)

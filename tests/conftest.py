import pgpy
import pytest
from pgpy.constants import (
    CompressionAlgorithm, HashAlgorithm, KeyFlags, PubKeyAlgorithm, SymmetricKeyAlgorithm,
)

from relinstall_core.keyring import TrustedKey
from relinstall_core.verify import SignatureVerifier

MANIFEST = (
    b"5f2a0c1e9d8b7a6f5e4d3c2b1a0f9e8d7c6b5a4f3e2d1c0b9a8f7e6d5c4b3a2f  "
    b"myapp-linux-amd64-v1.2.3.tar.gz\n"
)


def new_signing_key(name: str) -> pgpy.PGPKey:
    key = pgpy.PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
    uid = pgpy.PGPUID.new(name, email="release@example.org")
    key.add_uid(
        uid,
        usage={KeyFlags.Sign, KeyFlags.Certify},
        hashes=[HashAlgorithm.SHA256],
        ciphers=[SymmetricKeyAlgorithm.AES256],
        compression=[CompressionAlgorithm.Uncompressed],
    )
    return key


@pytest.fixture(scope="session")
def release_key():
    return new_signing_key("Release Signing Key")


@pytest.fixture(scope="session")
def rogue_key():
    return new_signing_key("Someone Else")


@pytest.fixture
def trusted_key(release_key):
    return TrustedKey(pubkey=str(release_key.pubkey), source="test")


@pytest.fixture
def verifier(trusted_key):
    return SignatureVerifier(trusted_key)


@pytest.fixture
def signed_manifest(tmp_path, release_key):
    manifest = tmp_path / "manifest.txt"
    manifest.write_bytes(MANIFEST)
    signature = tmp_path / "manifest.txt.asc"
    signature.write_text(str(release_key.sign(MANIFEST)))
    return signature, manifest

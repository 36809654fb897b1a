"""
relinstall_core.keyring
-----------------------
The release trust anchor: one ASCII-armored OpenPGP public key.

The release signing key is compiled into the package as ``PUBKEY``. A
deployment may point the installer at another key file through
``RELINSTALL_PUBKEY_FILE``. Either way the key is an explicit, read-only
value handed to the verifier; nothing else is ever trusted.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

import pgpy

from .errors import KeyringError
from .logger import get_logger

log = get_logger("relinstall.keyring")

# relinstall release signing <release@relinstall.invalid>
# fingerprint B900 8B25 699D 9A27 9819  4E62 9BFB 7368 1B69 C4A3
PUBKEY = """\
-----BEGIN PGP PUBLIC KEY BLOCK-----

mQGNBGrUIHwBDADNSvhBwZw0QEsOuIMjI2WRzM01+g/WAp6beyQyVgwiCTJFfzY+
WUUGgvUj6SaMQ659pT4XhYR4M61RZV+RGi8S4lhDcLbRb26uab/KUXZlMIKxBNH8
GnXrqKLnSXJkVYfsfSATmIVabSCr6zfQvGY8RE3lnn0LJoavg2bsLILHCo/m52uj
o2y1UULgyXAYEODX0AiZzbbDgbgsFrEH0Fx/v9iiqW909RU8riGnQ/PhsdhsC3wI
E2mXKUsm7RrUOWHUEJu3O1+eKj7oR2+Fu0bJWP50Wk/a9gS/1BCjxKxTqkXWZ9Ms
IrQszgY7qN/wWFGsQZHdYMhLJubqHBclUeBeY+/YfuT5iDol21LFcnBP9kZng2Wz
cZJiIDfWQk4kY0JEJzFbbbZJrKUS3CbkWy1a08jdGEyeDJH5ij9avdw1ZlNyBSuu
cp7HwZ+33VgBWCD6N7b1ZwfOkDvtrpqAkNnhBQRoIp/LqxitcCARBiSKxReSfLAR
nwD6QyZ3PlWQRysAEQEAAbQ3cmVsaW5zdGFsbCByZWxlYXNlIHNpZ25pbmcgPHJl
bGVhc2VAcmVsaW5zdGFsbC5pbnZhbGlkPokBzgQTAQoAOBYhBLkAiyVpnZonmBlO
Ypv7c2gbacSjBQJq1CB8AhsDBQsJCAcCBhUKCQgLAgQWAgMBAh4BAheAAAoJEJv7
c2gbacSjxGQL/3z8J0Qv407rGqcfWvbpsUX8MqkSWMs+oq4XikmLrFJPWqW+mPZO
/Rf+s/L73RVyEJi/9uV9wr1iItYuIHyAN4tH9Q5jkoCsMEA95qikK7ZGBfkB1hh5
o8tMy3D4YRvteExxD704x8L8Ms83xJXbz0x/zNEdvyGOdIuAmLaT9Y9mpJ1yIyPQ
EDCHGQWLNYTFAeTsbkFvtxaWmmjsUV68mgGOdKBcAx6PjM86OEA2kdOeOPoIf2W3
gqirocQAcE4xIu5AKbrkTRFkANuqOCc1AASl9hP3vdwVB6ootDXuyyLGS/fIn24H
HD9+YH0qMKv26k2jRHJTS6mc4pV9E/bD2Px0mocbTnsRrMF244SKeavisl/g5pWY
aYXrLsq8u9iogdTfd6LFJdyQisZ6EtCOVKabajyymH4e+hXTmLTHBjLI8gyuZcz5
i3ziH3uElxpn/JtesC6KvGTKpGGncrNPC/mVb80e2Ve/Dx070FlD305Y4Q/qi+zq
hNiP2iw6VV9Meg==
=hk/G
-----END PGP PUBLIC KEY BLOCK-----
"""


@dataclass(frozen=True)
class TrustedKey:
    pubkey: str
    source: str = "<inline>"

    @classmethod
    def bundled(cls) -> "TrustedKey":
        return cls(pubkey=PUBKEY, source="bundled")

    @classmethod
    def from_file(cls, path) -> "TrustedKey":
        try:
            text = Path(path).read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise KeyringError(f"cannot read trusted key {path}: {e}") from e
        return cls(pubkey=text, source=str(path))

    @classmethod
    def from_config(cls, cfg) -> "TrustedKey":
        if cfg.pubkey_file:
            return cls.from_file(cfg.pubkey_file)
        return cls.bundled()

    def load(self) -> pgpy.PGPKeyring:
        """Parse the armored key text into a keyring; KeyringError if it is unusable."""
        keyring = pgpy.PGPKeyring()
        try:
            loaded = keyring.load(self.pubkey)
        except Exception as e:
            raise KeyringError(f"trusted key from {self.source} is malformed: {e}") from e
        if not loaded:
            raise KeyringError(f"trusted key from {self.source} contains no keys")

        log.debug(f"[KEYRING] loaded {len(loaded)} key(s) from {self.source}")
        return keyring

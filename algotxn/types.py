"""Basic value types shared by transactions."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes

PUBLIC_KEY_LENGTH = 32
CHECKSUM_LENGTH = 4
ADDRESS_STRING_LENGTH = 58


def _sha512_256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(data)
    return digest.finalize()


def _checksum(public_key: bytes) -> bytes:
    return _sha512_256(public_key)[-CHECKSUM_LENGTH:]


@dataclass(frozen=True)
class Address:
    """An account address: a 32-byte public key."""

    public_key: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.public_key, (bytes, bytearray, memoryview)):
            raise TypeError("address public key must be bytes")
        key = bytes(self.public_key)
        if len(key) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"address public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(key)}"
            )
        object.__setattr__(self, "public_key", key)

    @classmethod
    def from_string(cls, text: str) -> Address:
        """Parse the checksummed base32 form of an address."""
        if len(text) != ADDRESS_STRING_LENGTH:
            raise ValueError(f"invalid address length: {len(text)}")
        try:
            raw = base64.b32decode(text + "=" * 6)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"invalid address encoding: {text}") from exc
        key, checksum = raw[:PUBLIC_KEY_LENGTH], raw[PUBLIC_KEY_LENGTH:]
        if checksum != _checksum(key):
            raise ValueError(f"invalid address checksum: {text}")
        return cls(key)

    def __str__(self) -> str:
        raw = self.public_key + _checksum(self.public_key)
        return base64.b32encode(raw).decode("ascii").rstrip("=")
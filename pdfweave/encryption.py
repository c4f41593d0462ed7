"""Standard security handler, revision 2 (40-bit RC4), and file identifiers."""

from __future__ import annotations

import hashlib
import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from .objects.base import PdfObject

PDF_PASSWORD_PADDING = bytes(
    [
        0x28, 0xBF, 0x4E, 0x5E, 0x4E, 0x75, 0x8A, 0x41,
        0x64, 0x00, 0x4B, 0x49, 0xC1, 0xF1, 0x52, 0x28,
        0xDE, 0xAE, 0xD2, 0x3B, 0x61, 0x6F, 0x74, 0x6B,
        0x45, 0x2F, 0x72, 0x73, 0x65, 0x54, 0x68, 0xE8,
    ]
)


class IdentifierKind(Enum):
    """How the file identifier is chosen."""

    NONE = "none"
    AUTO_MD5 = "auto_md5"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FileIdentifierMode:
    """The identifier kind, with the bytes used when it is custom."""

    kind: IdentifierKind = IdentifierKind.NONE
    data: bytes = b""

    @classmethod
    def none(cls) -> FileIdentifierMode:
        return cls(IdentifierKind.NONE)

    @classmethod
    def auto_md5(cls) -> FileIdentifierMode:
        return cls(IdentifierKind.AUTO_MD5)

    @classmethod
    def custom(cls, data: bytes) -> FileIdentifierMode:
        return cls(IdentifierKind.CUSTOM, bytes(data))


@dataclass
class Permissions:
    """Access permissions written to the /P entry; all denied by default."""

    print: bool = False
    modify: bool = False
    copy: bool = False
    annotate: bool = False

    def as_int(self) -> int:
        """The signed 32-bit /P value."""
        flags = -4  # every bit set except bits 0 and 1
        for allowed, bit in (
            (self.print, 2),
            (self.modify, 3),
            (self.copy, 4),
            (self.annotate, 5),
        ):
            if not allowed:
                flags &= ~(1 << bit)
        return flags


@dataclass
class EncryptionConfig:
    """Passwords and permissions for the security handler."""

    owner_password: str = ""
    user_password: str = ""
    permissions: Permissions = field(default_factory=Permissions)


@dataclass(frozen=True)
class EncryptionValues:
    """The O and U entries, /P value and derived 5-byte key."""

    o_value: bytes
    u_value: bytes
    permissions: int
    encryption_key: bytes


def pad_password(password: bytes) -> bytes:
    """Truncate or pad a password to 32 bytes with the standard padding."""
    return (bytes(password)[:32] + PDF_PASSWORD_PADDING)[:32]


def rc4(key: bytes, data: bytes) -> bytes:
    """RC4 keystream XOR; the same call encrypts and decrypts."""
    if not key:
        raise ValueError("RC4 key must not be empty")
    state = list(range(256))
    j = 0
    for i in range(256):
        j = (j + state[i] + key[i % len(key)]) % 256
        state[i], state[j] = state[j], state[i]

    out = bytearray()
    i = j = 0
    for byte in data:
        i = (i + 1) % 256
        j = (j + state[i]) % 256
        state[i], state[j] = state[j], state[i]
        out.append(byte ^ state[(state[i] + state[j]) % 256])
    return bytes(out)


def compute_o_value(owner_password: bytes, user_password: bytes) -> bytes:
    """Algorithm 3: the 32-byte owner password entry."""
    owner = owner_password or user_password
    rc4_key = hashlib.md5(pad_password(owner)).digest()[:5]
    return rc4(rc4_key, pad_password(user_password))[:32]


def compute_encryption_key(
    user_password: bytes, o_value: bytes, permissions: int, file_id: bytes
) -> bytes:
    """Algorithm 2: the 5-byte encryption key."""
    digest = hashlib.md5(
        pad_password(user_password)
        + bytes(o_value)
        + struct.pack("<i", permissions)
        + bytes(file_id)
    ).digest()
    return digest[:5]


def compute_u_value(encryption_key: bytes) -> bytes:
    """Algorithm 4: the 32-byte user password entry."""
    return rc4(encryption_key, PDF_PASSWORD_PADDING)[:32]


def compute_encryption_values(
    config: EncryptionConfig, file_id: bytes
) -> EncryptionValues:
    """Derive every encryption value from the config and the file identifier."""
    owner = config.owner_password.encode("utf-8")
    user = config.user_password.encode("utf-8")
    p_value = config.permissions.as_int()
    o_value = compute_o_value(owner, user)
    key = compute_encryption_key(user, o_value, p_value, file_id)
    return EncryptionValues(
        o_value=o_value,
        u_value=compute_u_value(key),
        permissions=p_value,
        encryption_key=key,
    )


def compute_data_hash(objects: Iterable[PdfObject]) -> tuple[str, bytes]:
    """The MD5 hex digest used as the automatic identifier, and its ASCII bytes.

    Object content does not contribute to the digest.
    """
    digest = hashlib.md5().hexdigest()
    return digest, digest.encode("ascii")


def get_id_bytes(mode: FileIdentifierMode, data_hash_bytes: bytes) -> bytes:
    """The custom identifier bytes, or the data hash for any other mode."""
    if mode.kind is IdentifierKind.CUSTOM:
        return mode.data
    return data_hash_bytes


def bytes_to_pdf_hex_string(data: bytes) -> str:
    """Encode bytes as a PDF hex string such as ``<4F3A>``."""
    return f"<{bytes(data).hex().upper()}>"
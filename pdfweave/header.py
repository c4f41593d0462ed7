"""The file header that opens every PDF."""

from __future__ import annotations

from typing import BinaryIO

from .features import Version

_BINARY_MARKER = "âãÏÓ\r\n".encode("utf-8")


def write_header(version: Version, file: BinaryIO) -> None:
    """Write the version line and the binary marker comment to ``file``."""
    file.write(b"%PDF-" + version.as_bytes() + b"\r\n" + _BINARY_MARKER)
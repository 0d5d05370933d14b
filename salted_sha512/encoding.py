# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Hex conversions for salts and hashes.

Assumptions:
- Output is lowercase, two characters per byte, no prefix or separators
- Input may be upper or lower case but nothing else
- bytes.fromhex is too lenient on its own (it skips whitespace)
"""
import re

from salted_sha512.errors import EncodingError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def hex_encode(data: bytes) -> str:
    """Encode raw bytes as lowercase hex."""
    return bytes(data).hex()


def hex_decode(value: str, field: str = "value") -> bytes:
    """Decode a hex string into raw bytes.

    Args:
        value: Hex digits
        field: Name of the field being decoded, used in error messages

    Returns:
        bytes: Decoded bytes

    Raises:
        EncodingError: If value is not a string, has odd length or
            contains a non-hex character
    """
    if not isinstance(value, str):
        raise EncodingError(
            f"{field} must be a hex string, got {type(value).__name__}",
            field=field,
        )
    if len(value) % 2:
        raise EncodingError(
            f"{field} has odd length ({len(value)} hex digits)", field=field
        )
    if not _HEX_RE.fullmatch(value):
        raise EncodingError(f"{field} contains non-hex characters", field=field)
    return bytes.fromhex(value)

# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
One-way digest functions.

Only SHA-512 is provided. The protocol exists so the generic salted
credential can be composed with a digest instead of inheriting one.
"""
import hashlib
from typing import Protocol, runtime_checkable


@runtime_checkable
class DigestFunction(Protocol):
    name: str
    digest_size: int

    def digest(self, data: bytes) -> bytes:
        ...


class SHA512Digest:
    """SHA-512 from hashlib (64-byte output)."""

    name = "SHA-512"
    digest_size = 64

    def digest(self, data: bytes) -> bytes:
        return hashlib.sha512(data).digest()


sha512 = SHA512Digest()

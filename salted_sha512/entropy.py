# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Cryptographically secure random byte sources.

Assumptions:
- The default source is the OS CSPRNG via the secrets module
- The random module is never used for salts
- A starved entropy pool blocks; no timeout is applied
"""
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class EntropySource(Protocol):
    """Anything that can hand out uniformly random bytes."""

    def random_bytes(self, n: int) -> bytes:
        ...


class SystemEntropySource:
    """Entropy source backed by secrets.token_bytes."""

    def random_bytes(self, n: int) -> bytes:
        """Return n random bytes.

        Args:
            n: Number of bytes (must be non-negative)

        Returns:
            bytes: Uniformly random bytes over the full 0-255 range

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"Cannot draw {n} random bytes")
        return secrets.token_bytes(n)


system_entropy = SystemEntropySource()

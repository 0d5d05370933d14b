# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

This module provides test fixtures that are shared across the test suite.

Assumptions:
- Tests run with unsalted credentials DISABLED by default (production-like)
- Tests that need unsalted credentials use the allow_unsalted fixture
- Deterministic entropy is only ever used through the fixed_entropy fixture
"""
import hashlib

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line("markers", "hypothesis: property-based tests")
    config.addinivalue_line("markers", "timing: timing side-channel regression tests")


class FixedEntropySource:
    """Entropy source returning a preset byte string and counting calls."""

    def __init__(self, data: bytes):
        self.data = data
        self.calls = []

    def random_bytes(self, n: int) -> bytes:
        self.calls.append(n)
        return self.data[:n]


class FailingEntropySource:
    """Entropy source that always fails."""

    def random_bytes(self, n: int) -> bytes:
        raise OSError("entropy pool unavailable")


@pytest.fixture
def known_salt():
    """A fixed 64-byte salt covering 0x00..0x3f."""
    return bytes(range(64))


@pytest.fixture
def fixed_entropy(known_salt):
    """Entropy source that always yields known_salt.
    
    Returns:
        FixedEntropySource: Records the size of every request
    """
    return FixedEntropySource(known_salt)


@pytest.fixture
def failing_entropy():
    return FailingEntropySource()


@pytest.fixture
def known_credential(known_salt):
    """Salt and hash for the passphrase "Sneaky!" computed with hashlib.
    
    Returns:
        tuple: (salt, hash) as raw bytes
    """
    return known_salt, hashlib.sha512(known_salt + b"Sneaky!").digest()


@pytest.fixture
def allow_unsalted(monkeypatch):
    """Enable empty (legacy unsalted) salts for the duration of a test."""
    from salted_sha512.config import settings
    
    monkeypatch.setattr(settings, "allow_unsalted", True)


@pytest.fixture
def short_entropy():
    """Entropy source that hands back fewer bytes than requested."""
    return FixedEntropySource(b"\x00" * 8)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Start and finish every test with structlog unconfigured and no bound context."""
    import structlog
    
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

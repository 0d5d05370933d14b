# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Unit tests for constant-time comparison.

Assumptions:
- Equal inputs compare True, anything else False
- Elapsed time does not depend on where the first difference is
"""
import time

import pytest


@pytest.mark.unit
def test_equal_values():
    from salted_sha512.compare import constant_time_equal
    
    assert constant_time_equal(b"", b"") is True
    assert constant_time_equal(bytes(range(64)), bytes(range(64))) is True


@pytest.mark.unit
@pytest.mark.parametrize("offset", [0, 1, 31, 62, 63])
def test_single_byte_difference(offset):
    from salted_sha512.compare import constant_time_equal
    
    expected = bytes(range(64))
    candidate = bytearray(expected)
    candidate[offset] ^= 0x01
    
    assert constant_time_equal(expected, bytes(candidate)) is False


@pytest.mark.unit
def test_length_mismatch():
    """Test differing lengths never compare equal, even with zero padding."""
    from salted_sha512.compare import constant_time_equal
    
    assert constant_time_equal(b"abc", b"abcd") is False
    assert constant_time_equal(b"abc\x00", b"abc") is False
    assert constant_time_equal(b"", b"\x00") is False


@pytest.mark.unit
@pytest.mark.timing
def test_timing_independent_of_mismatch_offset():
    """Test elapsed time does not track the first mismatching byte.
    
    Assumptions:
    - The minimum over many trials filters scheduler noise
    - An early-exit comparison would be many times faster at offset 0
    """
    from salted_sha512.compare import constant_time_equal
    
    expected = bytes(range(64))
    candidates = {}
    for offset in (0, 16, 32, 48, 63):
        candidate = bytearray(expected)
        candidate[offset] ^= 0xFF
        candidates[offset] = bytes(candidate)
    
    best = {offset: float("inf") for offset in candidates}
    for _ in range(300):
        for offset, candidate in candidates.items():
            start = time.perf_counter_ns()
            for _ in range(20):
                constant_time_equal(expected, candidate)
            best[offset] = min(best[offset], time.perf_counter_ns() - start)
    
    fastest = min(best.values())
    slowest = max(best.values())
    assert slowest / fastest < 1.5, best


@pytest.mark.unit
@pytest.mark.timing
def test_match_timing_independent_of_mismatch_offset(known_credential):
    """Test match takes the same time wherever the stored hash differs.
    
    Assumptions:
    - Each stored hash differs from the real one at a single offset
    - Hashing the candidate costs the same for every credential
    """
    from salted_sha512 import SaltedSHA512
    
    salt, hash_ = known_credential
    credentials = {}
    for offset in (0, 16, 32, 48, 63):
        stored = bytearray(hash_)
        stored[offset] ^= 0xFF
        credentials[offset] = SaltedSHA512.from_bytes(salt, bytes(stored))
    
    best = {offset: float("inf") for offset in credentials}
    for _ in range(300):
        for offset, credential in credentials.items():
            start = time.perf_counter_ns()
            for _ in range(20):
                credential.match("Sneaky!")
            best[offset] = min(best[offset], time.perf_counter_ns() - start)
    
    assert all(not credential.match("Sneaky!") for credential in credentials.values())
    fastest = min(best.values())
    slowest = max(best.values())
    assert slowest / fastest < 1.5, best

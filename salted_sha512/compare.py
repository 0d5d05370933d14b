# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Constant-time byte comparison.

Assumptions:
- Every byte position is visited, whatever the content
- Running time depends only on the longer of the two lengths
- == on bytes stops at the first difference and must not be used here
"""


def constant_time_equal(expected: bytes, candidate: bytes) -> bool:
    """Compare two byte strings without an early exit.

    Both inputs are walked to the length of the longer one, missing
    positions reading as zero; a length difference is folded into the
    accumulator instead of returning early.

    Args:
        expected: Stored value
        candidate: Freshly computed value

    Returns:
        bool: True if both byte strings are identical
    """
    expected = bytes(expected)
    candidate = bytes(candidate)
    width = max(len(expected), len(candidate))
    left = expected.ljust(width, b"\x00")
    right = candidate.ljust(width, b"\x00")

    result = len(expected) ^ len(candidate)
    for x, y in zip(left, right):
        result |= x ^ y
    return result == 0

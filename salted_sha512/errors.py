# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Exceptions raised while constructing credentials.

Assumptions:
- Errors surface synchronously at construction time
- A wrong passphrase is never an error (match returns False)
- Entropy source failures are not wrapped
"""
from typing import Optional


class ConfigurationError(ValueError):
    """Raised when construction arguments are missing, invalid or ambiguous."""
    pass


class EncodingError(ConfigurationError):
    """Raised when a hex-encoded field is malformed.

    Subclasses ConfigurationError so callers catching the broader error
    also catch malformed hex.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

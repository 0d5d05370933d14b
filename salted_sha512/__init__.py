# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Salted SHA-512 passphrase hashing and verification.

Example:
    >>> from salted_sha512 import generate, validate
    >>> salt_hex, hash_hex = generate("Sneaky!")
    >>> validate("Sneaky!", salt_hex, hash_hex)
    True
"""
import logging

from salted_sha512.api import (
    generate,
    generate_record,
    generate_salted_sha512,
    validate,
    validate_record,
    validate_salted_sha512,
)
from salted_sha512.credential import (
    ALGORITHM,
    HASH_LENGTH,
    SALT_LENGTH,
    Challenge,
    Generate,
    SaltedDigestCredential,
    SaltedSHA512,
    construct,
)
from salted_sha512.errors import ConfigurationError, EncodingError
from salted_sha512.records import CredentialRecord

__version__ = "1.0.0"

logging.getLogger("salted_sha512").addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHM",
    "HASH_LENGTH",
    "SALT_LENGTH",
    "Challenge",
    "ConfigurationError",
    "CredentialRecord",
    "EncodingError",
    "Generate",
    "SaltedDigestCredential",
    "SaltedSHA512",
    "construct",
    "generate",
    "generate_record",
    "generate_salted_sha512",
    "validate",
    "validate_record",
    "validate_salted_sha512",
]

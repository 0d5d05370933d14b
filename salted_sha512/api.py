# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Convenience functions for generating and validating credentials.

Assumptions:
- generate returns hex so results can be stored directly
- validate raises only for malformed stored values, never for a wrong passphrase
"""
from typing import Tuple

from salted_sha512.credential import Passphrase, SaltedSHA512
from salted_sha512.records import CredentialRecord


def generate(passphrase: Passphrase) -> Tuple[str, str]:
    """Hash a passphrase with a new random salt.
    
    Args:
        passphrase: Plain text passphrase (str or bytes)
        
    Returns:
        Tuple[str, str]: (salt_hex, hash_hex), 128 lowercase hex digits each
    """
    credential = SaltedSHA512.from_passphrase(passphrase)
    return credential.salt_hex(), credential.hash_hex()


def validate(passphrase: Passphrase, salt_hex: str, hash_hex: str) -> bool:
    """Check a passphrase against a stored salt and hash.
    
    Args:
        passphrase: Candidate passphrase
        salt_hex: Stored salt as hex
        hash_hex: Stored hash as hex
        
    Returns:
        bool: True if the passphrase matches
        
    Raises:
        EncodingError: If salt_hex or hash_hex is not valid hex
        ConfigurationError: If the decoded salt or hash has the wrong length
    """
    return SaltedSHA512.from_hex(salt_hex, hash_hex).match(passphrase)


def generate_record(passphrase: Passphrase) -> CredentialRecord:
    """Hash a passphrase and return the storable record."""
    return CredentialRecord.from_credential(SaltedSHA512.from_passphrase(passphrase))


def validate_record(passphrase: Passphrase, record: CredentialRecord) -> bool:
    return record.to_credential().match(passphrase)


generate_salted_sha512 = generate
validate_salted_sha512 = validate

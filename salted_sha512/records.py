# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Storage schema for salt/hash pairs.

Assumptions:
- Records hold hex only; raw bytes never leave the credential
- Hex is normalized to lowercase
- A record can carry an empty salt, but loading it still obeys allow_unsalted
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from salted_sha512.credential import ALGORITHM, HASH_LENGTH, SALT_LENGTH, SaltedSHA512
from salted_sha512.encoding import hex_decode


class CredentialRecord(BaseModel):
    """Persistable form of a SaltedSHA512 credential."""
    
    model_config = ConfigDict(frozen=True)
    
    algorithm: Literal["SHA-512"] = ALGORITHM
    salt_hex: str
    hash_hex: str
    
    @field_validator("salt_hex")
    @classmethod
    def check_salt_hex(cls, value: str) -> str:
        salt = hex_decode(value, "salt_hex")
        if len(salt) not in (0, SALT_LENGTH):
            raise ValueError(f"salt_hex must encode {SALT_LENGTH} bytes")
        return value.lower()
    
    @field_validator("hash_hex")
    @classmethod
    def check_hash_hex(cls, value: str) -> str:
        if len(hex_decode(value, "hash_hex")) != HASH_LENGTH:
            raise ValueError(f"hash_hex must encode {HASH_LENGTH} bytes")
        return value.lower()
    
    @classmethod
    def from_credential(cls, credential: SaltedSHA512) -> "CredentialRecord":
        return cls(salt_hex=credential.salt_hex(), hash_hex=credential.hash_hex())
    
    def to_credential(self) -> SaltedSHA512:
        """Load the record as a challenge credential.
        
        Raises:
            ConfigurationError: If the salt is empty and unsalted credentials
                are disabled
        """
        return SaltedSHA512.from_hex(self.salt_hex, self.hash_hex)

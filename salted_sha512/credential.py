# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Salted SHA-512 credentials.

A credential is built in one of two modes:
- Generation: a passphrase is hashed with a fresh 64-byte random salt
- Challenge: a stored salt/hash pair is loaded to check a later passphrase

Assumptions:
- Credentials are immutable once constructed
- hash == SHA-512(salt || passphrase_bytes), salt first
- Text passphrases are encoded as UTF-8
- A caller can never supply the salt in generation mode
- Empty salts (legacy unsalted scheme) are accepted only when configured
"""
from dataclasses import InitVar, dataclass
from typing import Any, Optional, Union

from salted_sha512.compare import constant_time_equal
from salted_sha512.config import settings
from salted_sha512.digest import DigestFunction, sha512
from salted_sha512.encoding import hex_decode, hex_encode
from salted_sha512.entropy import EntropySource, system_entropy
from salted_sha512.errors import ConfigurationError, EncodingError
from salted_sha512.logging_utils import log_credential_event, log_security_event

ALGORITHM = "SHA-512"
SALT_LENGTH = 64
HASH_LENGTH = 64

Passphrase = Union[str, bytes]

_BYTES_LIKE = (bytes, bytearray, memoryview)
_CHALLENGE_OPTIONS = ("salt", "salt_hex", "hash", "hash_hex")
_KNOWN_OPTIONS = frozenset(("passphrase",) + _CHALLENGE_OPTIONS)


@dataclass(frozen=True)
class Generate:
    """Construction variant: hash a passphrase with a new random salt."""
    passphrase: Passphrase


@dataclass(frozen=True)
class Challenge:
    """Construction variant: load a previously stored salt and hash."""
    salt: bytes
    hash: bytes


def _reject(reason: str, **context: Any) -> ConfigurationError:
    log_security_event("credential_rejected", reason=reason, **context)
    return ConfigurationError(reason)


def _decode(value: Any, field: str) -> bytes:
    try:
        return hex_decode(value, field)
    except EncodingError as e:
        log_security_event("credential_rejected", reason=str(e), field=field)
        raise


def _passphrase_bytes(passphrase: Any) -> bytes:
    if isinstance(passphrase, str):
        return passphrase.encode("utf-8")
    if isinstance(passphrase, _BYTES_LIKE):
        return bytes(passphrase)
    raise _reject(
        f"passphrase must be str or bytes, got {type(passphrase).__name__}"
    )


@dataclass(frozen=True, eq=False, repr=False)
class SaltedDigestCredential:
    """A salt and hash bound to one digest function.

    Not tied to SHA-512; SaltedSHA512 wraps it with fixed parameters.
    """
    digest: DigestFunction
    salt: bytes
    hash: bytes

    @classmethod
    def generate(
        cls,
        digest: DigestFunction,
        passphrase: bytes,
        salt_length: int,
        entropy: EntropySource,
    ) -> "SaltedDigestCredential":
        """Draw a fresh salt and hash passphrase with it.

        Errors raised by the entropy source propagate unchanged.
        """
        salt = bytes(entropy.random_bytes(salt_length))
        if len(salt) != salt_length:
            raise _reject(
                f"entropy source returned {len(salt)} bytes, expected {salt_length}"
            )
        return cls(digest=digest, salt=salt, hash=digest.digest(salt + passphrase))

    def compute(self, passphrase: bytes) -> bytes:
        return self.digest.digest(self.salt + passphrase)

    def match(self, passphrase: bytes) -> bool:
        return constant_time_equal(self.hash, self.compute(passphrase))


@dataclass(frozen=True, eq=False, repr=False)
class SaltedSHA512:
    """Salted SHA-512 credential with a 512-bit random salt.

    Use the classmethods (or construct()) rather than the constructor:

        >>> gen = SaltedSHA512.from_passphrase("Sneaky!")
        >>> challenge = SaltedSHA512.from_hex(gen.salt_hex(), gen.hash_hex())
        >>> challenge.match("Sneaky!")
        True
    """
    credential: SaltedDigestCredential
    allow_unsalted: InitVar[Optional[bool]] = None

    def __post_init__(self, allow_unsalted: Optional[bool]):
        digest, salt, hash_ = self.credential.digest, self.credential.salt, self.credential.hash
        if digest.digest_size != HASH_LENGTH:
            raise _reject(
                f"digest {digest.name} produces "
                f"{digest.digest_size} bytes, expected {HASH_LENGTH}"
            )
        if not isinstance(salt, bytes) or not isinstance(hash_, bytes):
            raise _reject("salt and hash must be bytes")

        if allow_unsalted is None:
            allow_unsalted = settings.allow_unsalted
        if len(salt) == 0 and not allow_unsalted:
            raise _reject("empty salt rejected; unsalted credentials are disabled")
        if len(salt) not in (0, SALT_LENGTH):
            raise _reject(f"salt must be {SALT_LENGTH} bytes, got {len(salt)}")
        if len(hash_) != HASH_LENGTH:
            raise _reject(f"hash must be {HASH_LENGTH} bytes, got {len(hash_)}")

    @classmethod
    def create(
        cls,
        variant: Union[Generate, Challenge],
        entropy: Optional[EntropySource] = None,
        allow_unsalted: Optional[bool] = None,
    ) -> "SaltedSHA512":
        """Build a credential from a construction variant.

        Args:
            variant: Generate or Challenge
            entropy: Random byte source for generation (defaults to the OS CSPRNG)
            allow_unsalted: Accept an empty challenge salt (defaults to settings)

        Returns:
            SaltedSHA512: Ready credential

        Raises:
            ConfigurationError: If the variant carries invalid values
        """
        if isinstance(variant, Generate):
            credential = SaltedDigestCredential.generate(
                sha512,
                _passphrase_bytes(variant.passphrase),
                SALT_LENGTH,
                entropy or system_entropy,
            )
            created = cls(credential)
            log_credential_event("credential_generated", algorithm=ALGORITHM)
            return created

        if isinstance(variant, Challenge):
            salt, hash_ = variant.salt, variant.hash
            if not isinstance(salt, _BYTES_LIKE) or not isinstance(hash_, _BYTES_LIKE):
                raise _reject("salt and hash must be bytes")

            loaded = cls(
                SaltedDigestCredential(digest=sha512, salt=bytes(salt), hash=bytes(hash_)),
                allow_unsalted,
            )
            log_credential_event(
                "credential_loaded", algorithm=ALGORITHM, unsalted=not loaded.salt
            )
            return loaded

        raise _reject(f"unknown construction variant {type(variant).__name__}")

    @classmethod
    def from_passphrase(
        cls, passphrase: Passphrase, entropy: Optional[EntropySource] = None
    ) -> "SaltedSHA512":
        return cls.create(Generate(passphrase), entropy=entropy)

    @classmethod
    def from_bytes(cls, salt: bytes, hash: bytes) -> "SaltedSHA512":
        return cls.create(Challenge(salt, hash))

    @classmethod
    def from_hex(cls, salt_hex: str, hash_hex: str) -> "SaltedSHA512":
        return cls.create(
            Challenge(_decode(salt_hex, "salt_hex"), _decode(hash_hex, "hash_hex"))
        )

    # Accessors

    @property
    def salt(self) -> bytes:
        return self.credential.salt

    @property
    def hash(self) -> bytes:
        return self.credential.hash

    @property
    def algorithm(self) -> str:
        return ALGORITHM

    def salt_bytes(self) -> bytes:
        return self.credential.salt

    def salt_hex(self) -> str:
        return hex_encode(self.credential.salt)

    def hash_bytes(self) -> bytes:
        return self.credential.hash

    def hash_hex(self) -> str:
        return hex_encode(self.credential.hash)

    def algorithm_name(self) -> str:
        return ALGORITHM

    def match(self, passphrase: Passphrase) -> bool:
        """Check a candidate passphrase against the stored hash.

        Args:
            passphrase: Candidate passphrase (str or bytes)

        Returns:
            bool: True if it hashes to the stored value, False otherwise

        Assumptions:
        - Never raises for a wrong passphrase
        - Comparison time does not depend on where the hashes differ
        """
        if isinstance(passphrase, str):
            candidate = passphrase.encode("utf-8")
        elif isinstance(passphrase, _BYTES_LIKE):
            candidate = bytes(passphrase)
        else:
            return False
        matched = self.credential.match(candidate)
        log_credential_event("credential_matched", algorithm=ALGORITHM, matched=matched)
        return matched

    def __repr__(self) -> str:
        return f"<SaltedSHA512 algorithm={ALGORITHM} salt={self.salt_hex()[:8]}...>"


def _resolve_field(options: dict, name: str) -> Optional[bytes]:
    # Raw bytes are canonical; a hex form given alongside must agree.
    raw = options.get(name)
    hex_value = options.get(f"{name}_hex")

    if raw is not None and not isinstance(raw, _BYTES_LIKE):
        raise _reject(f"{name} must be bytes, got {type(raw).__name__}")
    decoded = _decode(hex_value, f"{name}_hex") if hex_value is not None else None

    if raw is not None and decoded is not None:
        if not constant_time_equal(bytes(raw), decoded):
            raise _reject(f"{name} and {name}_hex disagree")
    if raw is not None:
        return bytes(raw)
    return decoded


def construct(entropy: Optional[EntropySource] = None, **options: Any) -> SaltedSHA512:
    """Build a credential from keyword options.

    Accepts either passphrase=..., or salt/salt_hex together with
    hash/hash_hex.

    Args:
        entropy: Random byte source for generation mode
        **options: passphrase, salt, salt_hex, hash, hash_hex

    Returns:
        SaltedSHA512: Generation or challenge credential

    Raises:
        ConfigurationError: Missing, unknown or conflicting options
        EncodingError: Malformed hex option
    """
    unknown = sorted(set(options) - _KNOWN_OPTIONS)
    if unknown:
        raise _reject(f"unsupported options: {', '.join(unknown)}")

    if "passphrase" in options:
        supplied = [name for name in _CHALLENGE_OPTIONS if name in options]
        if supplied:
            raise _reject(
                f"cannot combine passphrase with {', '.join(supplied)}; "
                "salts are always generated"
            )
        return SaltedSHA512.create(Generate(options["passphrase"]), entropy=entropy)

    salt = _resolve_field(options, "salt")
    hash_ = _resolve_field(options, "hash")
    if salt is None or hash_ is None:
        raise _reject("supply a passphrase, or both a salt and a hash")

    return SaltedSHA512.create(Challenge(salt, hash_))

# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for salted_sha512.

Provides specialized logging functions for:
- Credential events (operational, debug level)
- Security events (rejected construction arguments)

Assumptions:
- All logs use structlog for structured output
- Passphrases, salts and hashes are never logged
- A failed match is an ordinary result, logged only as a debug event
"""
from typing import Any, Dict

from salted_sha512.logging_config import get_logger


SENSITIVE_FIELDS = {"passphrase", "password", "salt", "salt_hex", "hash", "hash_hex"}


def log_credential_event(event: str, **kwargs: Any) -> None:
    """Log a credential operational event.
    
    Args:
        event: Event name (e.g., "credential_generated", "credential_matched")
        **kwargs: Additional context (algorithm, mode, matched, etc.)
    """
    get_logger("salted_sha512.credential").debug(event, **_sanitize_data(kwargs))


def log_security_event(event: str, reason: str, **kwargs: Any) -> None:
    """Log a security event.
    
    Args:
        event: Security event type (e.g., "credential_rejected")
        reason: Why the event happened
        **kwargs: Additional context
        
    Assumptions:
    - Used for malformed or ambiguous construction arguments
    - Never used for a wrong passphrase
    """
    get_logger("salted_sha512.security").warning(event, reason=reason, **_sanitize_data(kwargs))


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact secret material from log context.
    
    Args:
        data: Dictionary that may contain sensitive data
        
    Returns:
        Dict: Copy with sensitive values replaced by "[REDACTED]"
    """
    if not data:
        return data
    
    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = _sanitize_data(value)
        else:
            sanitized[key] = value
    
    return sanitized

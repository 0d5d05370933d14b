# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for salted_sha512.

This module handles library configuration from environment variables.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.
    
    Assumptions:
    - Environment variables override defaults
    - Variables are prefixed with SALTED_SHA512_
    - Unsalted (empty salt) credentials are rejected unless ALLOW_UNSALTED is set
    """
    
    # Credentials
    allow_unsalted: bool = False
    
    # Logging
    log_level: str = "INFO"
    log_json: bool = True
    
    model_config = SettingsConfigDict(
        env_prefix="SALTED_SHA512_",
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()

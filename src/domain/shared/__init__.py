"""
Shared Domain Module

Shared domain concepts used across all subdomains (marketing, delivery).
Contains domain exceptions.

This module exports:
    - DomainException: Base exception for all domain errors
    - InvalidProjectError: Project update rule violations
    - InvalidCallbackError: Unusable callback settings
"""

from .exceptions import DomainException, InvalidCallbackError, InvalidProjectError

__all__ = [
    "DomainException",
    "InvalidProjectError",
    "InvalidCallbackError",
]

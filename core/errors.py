# core/errors.py
from __future__ import annotations


class PasswordToolError(ValueError):
    """Base class for errors raised by the password core."""


class ConfigurationError(PasswordToolError):
    """Options cannot produce a password (no source, bad length, ...)."""


class EmptyCharsetError(PasswordToolError):
    """A random draw was attempted against an empty pool."""

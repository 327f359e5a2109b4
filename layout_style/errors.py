"""Exceptions raised by the style model."""
from __future__ import annotations


class StyleError(Exception):
    """Base class for all errors raised by this library."""


class ConfigurationError(StyleError):
    """A required setting is missing or refers to something unknown (e.g. no font set)."""


class InvalidArgumentError(StyleError, ValueError):
    """A value object was constructed from arguments it cannot represent."""

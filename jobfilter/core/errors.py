"""Error hierarchy for the jobfilter package."""

from typing import Optional, Dict, Any, Sequence


class JobFilterError(Exception):
    """Base exception for all jobfilter errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


# Configuration Errors
class ConfigurationError(JobFilterError):
    """Error in filter or settings configuration."""


class PatternCompileError(ConfigurationError):
    """Regular expression text is not a valid pattern."""

    def __init__(self, message: str, pattern: Optional[str], position: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.pattern = pattern
        self.position = position


class UnknownVariantError(ConfigurationError):
    """Value type tag does not name a known variant."""

    def __init__(self, message: str, tag: Optional[str], known: Sequence[str] = (),
                 details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.tag = tag
        self.known = list(known)


# Data and Codec Errors
class CodecError(JobFilterError):
    """Data encoding/decoding error."""


class SerializationError(CodecError):
    """Data serialization error."""


class DeserializationError(CodecError):
    """Data deserialization error."""


# Catalog Errors
class CatalogError(JobFilterError):
    """Malformed item catalog."""

"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class MissingArgumentError(DomainError, ValueError):
    """Raised when a descriptor factory is called without a required argument."""


class UnknownKeywordError(DomainError, KeyError):
    """Raised when a descriptor is indexed with a keyword no field answers to."""

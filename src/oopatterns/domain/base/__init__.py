"""Domain base package - shared exceptions."""
from .exceptions import (
    DomainException,
    ValidationError,
    InvalidBoxError,
    OrderFormatError,
    PolicyPricingError,
    UnknownPolicyTypeError,
    ConfigurationError,
)

__all__ = [
    'DomainException',
    'ValidationError',
    'InvalidBoxError',
    'OrderFormatError',
    'PolicyPricingError',
    'UnknownPolicyTypeError',
    'ConfigurationError',
]

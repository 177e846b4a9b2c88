# src/oopatterns/domain/base/exceptions.py
from typing import Any, Optional, List, Sequence


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidBoxError(ValidationError):
    """Raised when a box or a box tree is malformed."""
    pass


class OrderFormatError(ValidationError):
    """Raised when an order document cannot be turned into a box tree."""
    def __init__(self, path: str, message: str):
        super().__init__(f"Invalid order node at {path}: {message}")
        self.path = path


class PolicyPricingError(DomainException):
    """Raised when a pricing step leaves the policy in an invalid state."""
    def __init__(self, policy_type: str, message: str):
        super().__init__(f"Pricing failed for {policy_type}: {message}")
        self.policy_type = policy_type


class UnknownPolicyTypeError(DomainException):
    """Raised when no pricing strategy is registered under a name."""
    def __init__(self, policy_type: str, available: Sequence[str] = ()):
        super().__init__(
            f"Unknown policy type '{policy_type}'. "
            f"Available: {', '.join(available) or 'none'}"
        )
        self.policy_type = policy_type
        self.available = list(available)


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None, details: Any = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
        self.details = details

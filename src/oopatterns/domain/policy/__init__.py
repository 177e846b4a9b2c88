"""Template method pattern: insurance policy pricing."""
from .insurance_policy import (
    STEP_ORDER,
    InsurancePolicy,
    PolicyQuote,
    PolicyState,
    PricingSteps,
    price_policy,
)
from .policy_types import (
    BUSINESS_OWNERS,
    COMMERCIAL_AUTO,
    POLICY_TYPES,
    available_policy_types,
    get_policy_steps,
)

__all__ = [
    "STEP_ORDER",
    "InsurancePolicy",
    "PolicyQuote",
    "PolicyState",
    "PricingSteps",
    "price_policy",
    "BUSINESS_OWNERS",
    "COMMERCIAL_AUTO",
    "POLICY_TYPES",
    "available_policy_types",
    "get_policy_steps",
]

"""Built-in policy pricing strategies."""
from typing import Dict, List

from oopatterns.domain.base.exceptions import UnknownPolicyTypeError
from oopatterns.domain.policy.insurance_policy import PolicyState, PricingSteps


def _commercial_auto_stage_one(state: PolicyState) -> None:
    state.temp_var = 100.0


def _commercial_auto_stage_two(state: PolicyState) -> None:
    state.premium = state.temp_var * 2


def _business_owners_stage_one(state: PolicyState) -> None:
    state.temp_var = 81082


def _business_owners_stage_two(state: PolicyState) -> None:
    state.premium = state.temp_var * 3


COMMERCIAL_AUTO = PricingSteps(
    policy_type="commercial_auto",
    stage_one=_commercial_auto_stage_one,
    stage_two=_commercial_auto_stage_two,
    description="Commercial auto: base 100, premium doubles it",
)

BUSINESS_OWNERS = PricingSteps(
    policy_type="business_owners",
    stage_one=_business_owners_stage_one,
    stage_two=_business_owners_stage_two,
    description="Business owners: base 81082, premium triples it",
)

POLICY_TYPES: Dict[str, PricingSteps] = {
    steps.policy_type: steps for steps in (COMMERCIAL_AUTO, BUSINESS_OWNERS)
}


def available_policy_types() -> List[str]:
    return sorted(POLICY_TYPES)


def get_policy_steps(policy_type: str) -> PricingSteps:
    """Look up a pricing strategy by name; dashes and case are ignored."""
    key = policy_type.strip().lower().replace("-", "_")
    try:
        return POLICY_TYPES[key]
    except KeyError:
        raise UnknownPolicyTypeError(policy_type, available_policy_types()) from None

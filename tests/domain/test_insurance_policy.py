"""Tests for insurance policy pricing."""
import math

import pytest

from oopatterns.domain.base.exceptions import (
    DomainException,
    PolicyPricingError,
    UnknownPolicyTypeError,
)
from oopatterns.domain.policy import (
    BUSINESS_OWNERS,
    COMMERCIAL_AUTO,
    STEP_ORDER,
    InsurancePolicy,
    PricingSteps,
    available_policy_types,
    get_policy_steps,
    price_policy,
)


class TestBuiltInPolicies:
    """Test the built-in policy types."""

    def test_commercial_auto(self):
        """Test that commercial auto doubles its base of 100."""
        quote = price_policy(COMMERCIAL_AUTO)
        assert quote.intermediate == 100
        assert quote.premium == 200

    def test_business_owners(self):
        """Test that business owners triples its base of 81082."""
        quote = price_policy(BUSINESS_OWNERS)
        assert quote.intermediate == 81082
        assert quote.premium == 243246

    def test_steps_run_in_fixed_order(self):
        assert price_policy(COMMERCIAL_AUTO).steps == STEP_ORDER
        assert STEP_ORDER == ("setup", "stage_one", "stage_two", "print_premium")

    def test_account_number_is_carried_to_quote(self):
        quote = InsurancePolicy(BUSINESS_OWNERS, account_number=42).price_policy()
        assert quote.account_number == 42
        assert quote.policy_type == "business_owners"

    def test_repeated_runs_start_from_setup(self):
        policy = InsurancePolicy(COMMERCIAL_AUTO)
        assert policy.price_policy().premium == policy.price_policy().premium == 200

    def test_quote_to_dict(self):
        assert price_policy(COMMERCIAL_AUTO, account_number=7).to_dict() == {
            "policy_type": "commercial_auto",
            "account_number": 7,
            "intermediate": 100,
            "premium": 200,
            "steps": list(STEP_ORDER),
        }


class TestCustomSteps:
    """Test the driver with custom pricing strategies."""

    def test_custom_steps_are_called_between_fixed_steps(self):
        calls = []

        def stage_one(state):
            calls.append(("stage_one", state.premium))
            state.temp_var = 5

        def stage_two(state):
            calls.append(("stage_two", state.temp_var))
            state.premium = state.temp_var + 1

        quote = price_policy(PricingSteps("custom", stage_one, stage_two))
        assert calls == [("stage_one", 0.0), ("stage_two", 5)]
        assert quote.premium == 6

    def test_stage_two_without_premium_yields_zero(self):
        quote = price_policy(PricingSteps("lazy", lambda s: None, lambda s: None))
        assert quote.premium == 0

    @pytest.mark.parametrize("premium", [-1, math.nan, math.inf, "200", None])
    def test_invalid_premium_rejected(self, premium):
        """Test that a step leaving an invalid premium fails the run."""
        def stage_two(state):
            state.premium = premium

        with pytest.raises(PolicyPricingError) as exc_info:
            price_policy(PricingSteps("broken", lambda s: None, stage_two))
        assert exc_info.value.policy_type == "broken"

    def test_step_errors_propagate(self):
        def stage_one(state):
            raise RuntimeError("rating table unavailable")

        with pytest.raises(RuntimeError, match="rating table unavailable"):
            price_policy(PricingSteps("failing", stage_one, lambda s: None))


class TestPolicyLookup:
    """Test lookup of policy types by name."""

    def test_available_policy_types_sorted(self):
        assert available_policy_types() == ["business_owners", "commercial_auto"]

    @pytest.mark.parametrize("name", ["commercial_auto", "commercial-auto", "COMMERCIAL_AUTO", " Commercial-Auto "])
    def test_lookup_normalizes_name(self, name):
        assert get_policy_steps(name) is COMMERCIAL_AUTO

    def test_unknown_policy_type(self):
        with pytest.raises(UnknownPolicyTypeError) as exc_info:
            get_policy_steps("marine")
        assert exc_info.value.available == ["business_owners", "commercial_auto"]
        assert "marine" in str(exc_info.value)
        assert isinstance(exc_info.value, DomainException)

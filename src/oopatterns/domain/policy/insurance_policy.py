"""
Insurance policy pricing with a fixed step sequence.

``InsurancePolicy.price_policy`` always runs ``setup``, ``stage_one``,
``stage_two`` and ``print_premium`` in that order. The two middle steps
come from a ``PricingSteps`` strategy; the driver owns everything else,
so a strategy can change how a premium is computed but not when.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Tuple

from oopatterns.domain.base.exceptions import PolicyPricingError
from oopatterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

STEP_ORDER: Tuple[str, ...] = ("setup", "stage_one", "stage_two", "print_premium")


@dataclass
class PolicyState:
    """Working values shared by the steps of one pricing run."""
    temp_var: float = 0.0
    premium: float = 0.0
    account_number: int = 0


@dataclass(frozen=True)
class PricingSteps:
    """The two customizable steps of a policy type."""
    policy_type: str
    stage_one: Callable[[PolicyState], None]
    stage_two: Callable[[PolicyState], None]
    description: str = ""


@dataclass(frozen=True)
class PolicyQuote:
    """Result of one pricing run."""
    policy_type: str
    intermediate: float
    premium: float
    account_number: int = 0
    steps: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "policy_type": self.policy_type,
            "account_number": self.account_number,
            "intermediate": self.intermediate,
            "premium": self.premium,
            "steps": list(self.steps),
        }


class InsurancePolicy:
    """Prices a policy by running its steps in the fixed order."""

    def __init__(self, steps: PricingSteps, account_number: int = 0):
        self._steps = steps
        self._account_number = account_number

    @property
    def policy_type(self) -> str:
        return self._steps.policy_type

    def price_policy(self) -> PolicyQuote:
        state = PolicyState(account_number=self._account_number)
        executed: List[str] = []

        self._setup(state)
        executed.append("setup")

        self._run_stage("stage_one", self._steps.stage_one, state)
        executed.append("stage_one")

        self._run_stage("stage_two", self._steps.stage_two, state)
        executed.append("stage_two")
        self._check_premium(state)

        self._print_premium(state)
        executed.append("print_premium")

        return PolicyQuote(
            policy_type=self.policy_type,
            intermediate=state.temp_var,
            premium=state.premium,
            account_number=state.account_number,
            steps=tuple(executed),
        )

    def _setup(self, state: PolicyState) -> None:
        logger.info("Inside InsurancePolicy::setup", policy_type=self.policy_type)
        state.temp_var = 0.0
        state.premium = 0.0

    def _run_stage(self, name: str, stage: Callable[[PolicyState], None], state: PolicyState) -> None:
        logger.info(f"Inside {self.policy_type}::{name}")
        stage(state)

    def _check_premium(self, state: PolicyState) -> None:
        premium = state.premium
        if isinstance(premium, bool) or not isinstance(premium, (int, float)):
            raise PolicyPricingError(self.policy_type, f"premium must be a number, got {premium!r}")
        if not math.isfinite(premium) or premium < 0:
            raise PolicyPricingError(self.policy_type, f"premium must be finite and non-negative, got {premium}")

    def _print_premium(self, state: PolicyState) -> None:
        logger.info(
            "Inside InsurancePolicy::printPremium",
            policy_type=self.policy_type,
            premium=state.premium,
        )


def price_policy(steps: PricingSteps, account_number: int = 0) -> PolicyQuote:
    """Run the fixed pricing sequence with ``steps``."""
    return InsurancePolicy(steps, account_number).price_policy()

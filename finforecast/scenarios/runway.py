"""
Runway Scenario Calculator

How many months the current cash lasts at the current net burn, under an
optimistic, base and pessimistic view of revenue growth.

Runway values are months. UNBOUNDED_RUNWAY_MONTHS is a sentinel, not a
literal month count, and it is reached two ways:

- Break-even: revenue covers burn, so cash never runs out.
- Cap: the company is still burning, but cash lasts longer than the
  sentinel. A 200-month runway is reported as 99.0.

`is_unbounded` and the `unbounded` map in `to_dict()` are true in both
cases. Compare the net burn (burn minus revenue) yourself when the two need
telling apart.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

logger = logging.getLogger(__name__)

UNBOUNDED_RUNWAY_MONTHS = 99.0


class RunwayScenario(Enum):
    """Growth assumption applied to revenue"""
    OPTIMISTIC = "optimistic"    # full growth rate on top of current revenue
    BASE = "base"                # flat revenue
    PESSIMISTIC = "pessimistic"  # revenue slips by half the growth rate


@dataclass
class RunwayScenarios:
    """Runway in months for each scenario"""
    optimistic: float
    base: float
    pessimistic: float

    def get(self, scenario: RunwayScenario) -> float:
        return getattr(self, scenario.value)

    def is_unbounded(self, scenario: RunwayScenario = RunwayScenario.BASE) -> bool:
        return self.get(scenario) >= UNBOUNDED_RUNWAY_MONTHS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "optimistic": self.optimistic,
            "base": self.base,
            "pessimistic": self.pessimistic,
            "unbounded": {
                scenario.value: self.is_unbounded(scenario)
                for scenario in RunwayScenario
            }
        }


def calculate_runway(
    cash: float,
    monthly_burn: float,
    monthly_revenue: float = 0.0
) -> float:
    """
    Months of runway for a single scenario.

    Returns 0 when there is no cash, and the unbounded sentinel when revenue
    covers burn. Finite runways are capped at the sentinel and rounded to
    one decimal.
    """
    if cash <= 0:
        return 0.0

    net_burn = monthly_burn - monthly_revenue
    if net_burn <= 0:
        return UNBOUNDED_RUNWAY_MONTHS

    return round(min(cash / net_burn, UNBOUNDED_RUNWAY_MONTHS), 1)


def calculate_runway_scenarios(
    cash: float,
    monthly_burn: float,
    monthly_revenue: float,
    growth_rate_percent: float
) -> RunwayScenarios:
    """
    Runway under three revenue assumptions.

    Args:
        cash: Cash on hand
        monthly_burn: Gross monthly spend
        monthly_revenue: Current monthly revenue
        growth_rate_percent: Expected monthly revenue growth in percent;
            its magnitude sets the width of the scenario band

    Returns:
        RunwayScenarios with optimistic >= base >= pessimistic
    """
    if cash <= 0:
        logger.info(f"No runway: cash on hand is {cash}")
        return RunwayScenarios(optimistic=0.0, base=0.0, pessimistic=0.0)

    if monthly_burn - monthly_revenue <= 0:
        logger.info("Revenue covers burn; runway is unbounded")
        return RunwayScenarios(
            optimistic=UNBOUNDED_RUNWAY_MONTHS,
            base=UNBOUNDED_RUNWAY_MONTHS,
            pessimistic=UNBOUNDED_RUNWAY_MONTHS
        )

    growth = abs(growth_rate_percent) / 100

    return RunwayScenarios(
        optimistic=calculate_runway(cash, monthly_burn, monthly_revenue * (1 + growth)),
        base=calculate_runway(cash, monthly_burn, monthly_revenue),
        pessimistic=calculate_runway(cash, monthly_burn, monthly_revenue * (1 - growth / 2))
    )

"""
Demo Data Generator for Financial Metric Forecasting

Generates realistic monthly revenue and expense series for demonstrations
and testing. Each industry profile carries a seasonal curve and a growth
range, so generated series exercise both the trend and seasonal paths of
the forecaster.
"""

import random
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from dateutil.relativedelta import relativedelta

from .forecasting.observations import Observation

# Industry configurations with realistic financial profiles
INDUSTRY_PROFILES = {
    "professional_services": {
        "name": "Professional Services",
        "revenue_range": (50000, 200000),
        "expense_ratio": (0.80, 0.95),
        "growth_rate": (0.02, 0.08),
        "seasonality": [1.0, 0.95, 1.05, 1.10, 1.05, 0.95, 0.85, 0.90, 1.05, 1.15, 1.10, 0.85],
    },
    "manufacturing": {
        "name": "Manufacturing",
        "revenue_range": (100000, 500000),
        "expense_ratio": (0.85, 0.98),
        "growth_rate": (0.01, 0.05),
        "seasonality": [0.90, 0.85, 0.95, 1.05, 1.10, 1.15, 1.05, 1.00, 1.05, 1.10, 1.00, 0.80],
    },
    "retail": {
        "name": "Retail",
        "revenue_range": (75000, 300000),
        "expense_ratio": (0.85, 1.00),
        "growth_rate": (0.00, 0.06),
        "seasonality": [0.70, 0.75, 0.85, 0.90, 0.95, 0.90, 0.85, 0.90, 0.95, 1.05, 1.35, 1.85],
    },
    "technology": {
        "name": "Technology",
        "revenue_range": (40000, 150000),
        "expense_ratio": (1.10, 1.60),  # venture-backed, burning cash
        "growth_rate": (0.05, 0.15),
        "seasonality": [0.95, 0.90, 1.00, 1.05, 1.00, 0.95, 0.90, 0.95, 1.05, 1.10, 1.10, 1.05],
    },
    "construction": {
        "name": "Construction",
        "revenue_range": (150000, 600000),
        "expense_ratio": (0.85, 0.97),
        "growth_rate": (0.02, 0.07),
        "seasonality": [0.60, 0.65, 0.85, 1.10, 1.25, 1.30, 1.25, 1.20, 1.10, 0.95, 0.75, 0.55],
    }
}

# Risk scenarios for demo data
RISK_SCENARIOS = {
    "healthy": {
        "description": "Strong cash position with good runway",
        "cash_buffer_months": (12, 24),
        "expense_drift": (-0.005, 0.005)
    },
    "moderate_risk": {
        "description": "Some cash pressure, needs attention",
        "cash_buffer_months": (6, 12),
        "expense_drift": (0.005, 0.015)
    },
    "high_risk": {
        "description": "Cash crunch situation, urgent action needed",
        "cash_buffer_months": (1, 4),
        "expense_drift": (0.015, 0.03)
    }
}


@dataclass
class GeneratedCompany:
    """Generated company series and current position"""
    industry: str
    risk_scenario: str
    revenue: List[Observation]
    expenses: List[Observation]
    cash: float
    growth_rate_percent: float

    @property
    def monthly_revenue(self) -> float:
        return self.revenue[-1].value if self.revenue else 0.0

    @property
    def monthly_burn(self) -> float:
        return self.expenses[-1].value if self.expenses else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "industry": self.industry,
            "risk_scenario": self.risk_scenario,
            "revenue": [o.to_dict() for o in self.revenue],
            "expenses": [o.to_dict() for o in self.expenses],
            "cash": round(self.cash, 2),
            "growth_rate_percent": round(self.growth_rate_percent, 2)
        }


class DemoDataGenerator:
    """
    Generate realistic demo series.

    Example:
        generator = DemoDataGenerator(seed=7)

        revenue = generator.generate_revenue_series("retail", months=24)
        company = generator.generate_company("technology", "high_risk")
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize generator with optional random seed for reproducibility"""
        self._random = random.Random(seed)

    def generate_revenue_series(
        self,
        industry: str = "professional_services",
        months: int = 24,
        start: Optional[date] = None,
        noise: float = 0.04
    ) -> List[Observation]:
        """
        Generate monthly revenue with growth, seasonality and noise.

        Args:
            industry: Industry type (see INDUSTRY_PROFILES)
            months: Number of months to generate
            start: First month (defaults to `months` months before this one)
            noise: Relative size of the random variance

        Returns:
            Month-start observations in chronological order
        """
        profile = INDUSTRY_PROFILES.get(industry, INDUSTRY_PROFILES["professional_services"])
        start = start or self._default_start(months)

        base_revenue = self._random.uniform(*profile["revenue_range"])
        monthly_growth = self._random.uniform(*profile["growth_rate"]) / 12

        series = []
        for offset in range(months):
            period_date = start + relativedelta(months=offset)
            seasonality = profile["seasonality"][period_date.month - 1]
            growth_factor = 1 + (monthly_growth * offset)

            revenue = base_revenue * seasonality * growth_factor
            revenue *= self._random.uniform(1 - noise, 1 + noise)
            series.append(Observation(timestamp=period_date, value=round(revenue, 2)))

        return series

    def generate_expense_series(
        self,
        industry: str = "professional_services",
        risk_scenario: str = "healthy",
        months: int = 12,
        start: Optional[date] = None,
        base_expense: Optional[float] = None
    ) -> List[Observation]:
        """
        Generate monthly expenses drifting according to the risk scenario.

        Expenses are far less seasonal than revenue; only the drift and a
        small random variance are applied.
        """
        profile = INDUSTRY_PROFILES.get(industry, INDUSTRY_PROFILES["professional_services"])
        risk = RISK_SCENARIOS.get(risk_scenario, RISK_SCENARIOS["healthy"])
        start = start or self._default_start(months)

        if base_expense is None:
            base_revenue = self._random.uniform(*profile["revenue_range"])
            base_expense = base_revenue * self._random.uniform(*profile["expense_ratio"])
        drift = self._random.uniform(*risk["expense_drift"])

        series = []
        for offset in range(months):
            expense = base_expense * (1 + drift) ** offset
            expense *= self._random.uniform(0.98, 1.02)
            series.append(Observation(
                timestamp=start + relativedelta(months=offset),
                value=round(expense, 2)
            ))

        return series

    def generate_company(
        self,
        industry: str = "professional_services",
        risk_scenario: str = "healthy",
        months_of_history: int = 24
    ) -> GeneratedCompany:
        """
        Generate revenue and expense history plus a cash position.

        The cash position is sized in months of current expenses from the
        risk scenario's buffer range.
        """
        profile = INDUSTRY_PROFILES.get(industry, INDUSTRY_PROFILES["professional_services"])
        risk = RISK_SCENARIOS.get(risk_scenario, RISK_SCENARIOS["healthy"])
        start = self._default_start(months_of_history)

        revenue = self.generate_revenue_series(industry, months_of_history, start)
        base_expense = revenue[0].value * self._random.uniform(*profile["expense_ratio"])
        expenses = self.generate_expense_series(
            industry, risk_scenario, months_of_history, start, base_expense
        )

        cash = expenses[-1].value * self._random.uniform(*risk["cash_buffer_months"])
        growth_rate_percent = self._random.uniform(*profile["growth_rate"]) / 12 * 100

        return GeneratedCompany(
            industry=industry,
            risk_scenario=risk_scenario,
            revenue=revenue,
            expenses=expenses,
            cash=cash,
            growth_rate_percent=growth_rate_percent
        )

    @staticmethod
    def _default_start(months: int) -> date:
        today = date.today()
        return date(today.year, today.month, 1) - relativedelta(months=months)

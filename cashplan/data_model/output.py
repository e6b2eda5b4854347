from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class LineItem:
    """One model's contribution to a single year's income or expenses."""

    model_id: str
    description: str
    amount: float

    def to_dict(self) -> dict[str, Any]:
        return {"modelId": self.model_id, "description": self.description, "amount": self.amount}


@dataclass(frozen=True)
class AccountBalanceYear:
    model_id: str
    description: str
    year: int
    starting_balance: float
    contributions: float
    distributions: float
    distribution_income: float
    growth: float
    ending_balance: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "modelId": self.model_id,
            "description": self.description,
            "year": self.year,
            "startingBalance": self.starting_balance,
            "contributions": self.contributions,
            "distributions": self.distributions,
            "distributionIncome": self.distribution_income,
            "growth": self.growth,
            "endingBalance": self.ending_balance,
        }


@dataclass(frozen=True)
class YearData:
    year: int
    incomes: List[LineItem]
    expenses: List[LineItem]
    total_income: float
    total_expenses: float
    yearly_net: float
    cumulative_net: float
    cash_on_hand: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "incomes": [item.to_dict() for item in self.incomes],
            "expenses": [item.to_dict() for item in self.expenses],
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "yearlyNet": self.yearly_net,
            "cumulativeNet": self.cumulative_net,
            "cashOnHand": self.cash_on_hand,
        }


@dataclass(frozen=True)
class CalculationOutput:
    scenario_name: str
    years: List[YearData] = field(default_factory=list)
    account_balances: List[AccountBalanceYear] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenarioName": self.scenario_name,
            "years": [year.to_dict() for year in self.years],
            "accountBalances": [record.to_dict() for record in self.account_balances],
        }

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..data_model import AccountBalanceYear, LineItem, RetirementAccountModel, Schedule
from .increase import apply_increase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetirementYearResult:
    income_item: Optional[LineItem]
    expense_item: Optional[LineItem]
    balance_record: AccountBalanceYear


@dataclass
class AccountProjection:
    """Year results for one account, stored densely from ``first_year``."""

    model_id: str
    first_year: int
    results: List[RetirementYearResult] = field(default_factory=list)

    def for_year(self, year: int) -> Optional[RetirementYearResult]:
        offset = year - self.first_year
        if offset < 0 or offset >= len(self.results):
            return None
        return self.results[offset]


def _scheduled_amount(schedule: Schedule | None, year: int) -> float:
    if schedule is None or not schedule.is_active(year):
        return 0.0
    return apply_increase(schedule.amount, schedule.increase_type, schedule.increase_rate, year - schedule.start_year)


def simulate_year(model: RetirementAccountModel, year: int, starting_balance: float) -> RetirementYearResult:
    contribution = _scheduled_amount(model.contributions, year)

    distribution = _scheduled_amount(model.distributions, year)
    available = starting_balance + contribution
    if distribution > available:
        distribution = max(0.0, available)

    balance_after_flows = starting_balance + contribution - distribution
    growth = balance_after_flows * (model.growth_rate / 100.0)
    ending_balance = balance_after_flows + growth

    tax_rate = model.distributions.tax_rate if model.distributions is not None else 0.0
    distribution_income = distribution * (1.0 - tax_rate / 100.0)

    income_item = None
    if distribution > 0:
        income_item = LineItem(model_id=model.id, description=model.description, amount=distribution_income)
    expense_item = None
    if contribution > 0:
        expense_item = LineItem(model_id=model.id, description=model.description, amount=contribution)

    record = AccountBalanceYear(
        model_id=model.id,
        description=model.description,
        year=year,
        starting_balance=starting_balance,
        contributions=contribution,
        distributions=distribution,
        distribution_income=distribution_income,
        growth=growth,
        ending_balance=ending_balance,
    )
    return RetirementYearResult(income_item=income_item, expense_item=expense_item, balance_record=record)


def simulate_account(
    model: RetirementAccountModel,
    scenario_start_year: int,
    scenario_end_year: int,
) -> AccountProjection:
    """Simulate an account from its balance date through the scenario's last year.

    When the balance is dated before the scenario window, the gap years are
    simulated too so the balance entering ``scenario_start_year`` carries
    their contributions, distributions and growth.
    """
    first_year = min(model.balance_as_of_year, scenario_start_year)
    projection = AccountProjection(model_id=model.id, first_year=first_year)
    logger.debug("Simulating account %s over %s-%s", model.id, first_year, scenario_end_year)

    balance = model.current_balance
    for year in range(first_year, scenario_end_year + 1):
        result = simulate_year(model, year, balance)
        projection.results.append(result)
        balance = result.balance_record.ending_balance
    return projection

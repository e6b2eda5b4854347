from __future__ import annotations

import logging
from typing import Iterable, List

from ..data_model import (
    AccountBalanceYear,
    CalculationOutput,
    LineItem,
    RetirementAccountModel,
    Scenario,
    YearData,
)
from .evaluators import line_items_for
from .retirement import simulate_account

logger = logging.getLogger(__name__)


def calculate(scenario: Scenario) -> CalculationOutput:
    """Project a scenario into per-year income, expenses, net and cash on hand.

    No validation is done here: an end year before the start year simply
    produces no years.
    """
    cfg = scenario.config
    start_year, end_year = cfg.start_year, cfg.end_year
    enabled = scenario.enabled_models()

    retirement_models = [m for m in enabled if isinstance(m, RetirementAccountModel)]
    other_models = [m for m in enabled if not isinstance(m, RetirementAccountModel)]
    projections = [simulate_account(model, start_year, end_year) for model in retirement_models]
    logger.debug(
        "Calculating %s for %s-%s: %d models, %d retirement accounts",
        scenario.name,
        start_year,
        end_year,
        len(other_models),
        len(retirement_models),
    )

    years: List[YearData] = []
    account_balances: List[AccountBalanceYear] = []
    cumulative_net = 0.0

    for year in cfg.years():
        incomes: List[LineItem] = []
        expenses: List[LineItem] = []

        for model in other_models:
            income, expense = line_items_for(model, year)
            if income is not None:
                incomes.append(income)
            if expense is not None:
                expenses.append(expense)

        for projection in projections:
            result = projection.for_year(year)
            if result is None:
                continue
            if result.income_item is not None:
                incomes.append(result.income_item)
            if result.expense_item is not None:
                expenses.append(result.expense_item)
            account_balances.append(result.balance_record)

        total_income = sum(item.amount for item in incomes)
        total_expenses = sum(item.amount for item in expenses)
        yearly_net = total_income - total_expenses
        cumulative_net += yearly_net

        years.append(
            YearData(
                year=year,
                incomes=incomes,
                expenses=expenses,
                total_income=total_income,
                total_expenses=total_expenses,
                yearly_net=yearly_net,
                cumulative_net=cumulative_net,
                cash_on_hand=cfg.starting_cash_balance + cumulative_net,
            )
        )

    return CalculationOutput(scenario_name=scenario.name, years=years, account_balances=account_balances)


def calculate_many(scenarios: Iterable[Scenario]) -> List[CalculationOutput]:
    """Calculate independent scenarios, preserving input order."""
    return [calculate(scenario) for scenario in scenarios]

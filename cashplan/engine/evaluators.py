"""Per-year evaluators for the stateless model kinds.

Each evaluator maps ``(model, year)`` to a LineItem, or None when the model is
inactive that year. ``line_items_for`` routes a model to its evaluator and
files the result as income or expense.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from ..data_model import (
    CarLoanModel,
    LineItem,
    Model,
    MortgageModel,
    OneTimeExpenseModel,
    OneTimeIncomeModel,
    RecurringExpenseModel,
    SalaryModel,
    SocialSecurityModel,
)
from .increase import apply_increase
from .loans import car_loan_payment, mortgage_payment

INCOME = "income"
EXPENSE = "expense"


def _item(model: Model, amount: float) -> LineItem:
    return LineItem(model_id=model.id, description=model.description, amount=amount)


def evaluate_salary(model: SalaryModel, year: int) -> Optional[LineItem]:
    if year < model.start_year or year > model.end_year:
        return None
    amount = apply_increase(model.amount, model.increase_type, model.increase_rate, year - model.start_year)
    return _item(model, amount)


def evaluate_recurring_expense(model: RecurringExpenseModel, year: int) -> Optional[LineItem]:
    if year < model.start_year or year > model.end_year:
        return None
    amount = apply_increase(model.amount, model.increase_type, model.increase_rate, year - model.start_year)
    return _item(model, amount)


def evaluate_onetime(model: OneTimeExpenseModel | OneTimeIncomeModel, year: int) -> Optional[LineItem]:
    if year != model.year:
        return None
    return _item(model, model.amount)


def evaluate_social_security(model: SocialSecurityModel, year: int) -> Optional[LineItem]:
    # COLA compounds as a percent; there is no flat mode for benefits.
    if year < model.start_year or year > model.end_year:
        return None
    amount = model.annual_benefit * (1.0 + model.increase_rate / 100.0) ** (year - model.start_year)
    return _item(model, amount)


def _loan_active(model: MortgageModel | CarLoanModel, year: int) -> bool:
    return model.start_year <= year < model.start_year + model.term_years


def evaluate_mortgage(model: MortgageModel, year: int) -> Optional[LineItem]:
    if not _loan_active(model, year):
        return None
    return _item(model, mortgage_payment(model))


def evaluate_car_loan(model: CarLoanModel, year: int) -> Optional[LineItem]:
    if not _loan_active(model, year):
        return None
    return _item(model, car_loan_payment(model))


EVALUATORS: Dict[str, Tuple[str, Callable[..., Optional[LineItem]]]] = {
    SalaryModel.type: (INCOME, evaluate_salary),
    RecurringExpenseModel.type: (EXPENSE, evaluate_recurring_expense),
    OneTimeExpenseModel.type: (EXPENSE, evaluate_onetime),
    OneTimeIncomeModel.type: (INCOME, evaluate_onetime),
    MortgageModel.type: (EXPENSE, evaluate_mortgage),
    CarLoanModel.type: (EXPENSE, evaluate_car_loan),
    SocialSecurityModel.type: (INCOME, evaluate_social_security),
}


def line_items_for(model: Model, year: int) -> Tuple[Optional[LineItem], Optional[LineItem]]:
    """Return ``(income, expense)`` for one model in one year."""
    entry = EVALUATORS.get(model.type)
    if entry is None:
        # retirement accounts are simulated separately
        return None, None
    flow, evaluate = entry
    item = evaluate(model, year)
    if flow == INCOME:
        return item, None
    return None, item

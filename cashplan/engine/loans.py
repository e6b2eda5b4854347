from __future__ import annotations

import math

from ..data_model import CarLoanModel, MortgageModel


def annual_loan_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Fixed annual payment of a fully amortizing loan with monthly compounding.

    A zero rate repays the principal in equal annual slices. A zero term has no
    finite payment and yields inf (nan for a zero principal) instead of raising.
    """
    if term_years == 0:
        return math.copysign(math.inf, principal) if principal else math.nan
    if annual_rate == 0:
        return principal / term_years
    monthly_rate = annual_rate / 100.0 / 12.0
    total_payments = term_years * 12
    factor = (1.0 + monthly_rate) ** total_payments
    monthly_payment = principal * (monthly_rate * factor) / (factor - 1.0)
    return monthly_payment * 12.0


def mortgage_payment(model: MortgageModel) -> float:
    return annual_loan_payment(model.loan_amount, model.interest_rate, model.term_years)


def car_loan_payment(model: CarLoanModel) -> float:
    return annual_loan_payment(model.loan_amount, model.interest_rate, model.term_years)

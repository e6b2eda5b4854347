from .calculator import calculate, calculate_many
from .increase import apply_increase
from .loans import annual_loan_payment, car_loan_payment, mortgage_payment
from .retirement import AccountProjection, RetirementYearResult, simulate_account

__all__ = [
    "AccountProjection",
    "RetirementYearResult",
    "annual_loan_payment",
    "apply_increase",
    "calculate",
    "calculate_many",
    "car_loan_payment",
    "mortgage_payment",
    "simulate_account",
]

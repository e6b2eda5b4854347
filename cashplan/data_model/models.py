from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal, Union

IncreaseType = Literal["percent", "flat"]
INCREASE_TYPES = ("percent", "flat")


@dataclass(frozen=True)
class Schedule:
    """Bounded contribution or distribution stream of a retirement account."""

    amount: float
    start_year: int
    end_year: int
    increase_type: IncreaseType = "percent"
    increase_rate: float = 0.0
    tax_rate: float = 0.0  # only applied to distributions

    def is_active(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount": self.amount,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "increaseType": self.increase_type,
            "increaseRate": self.increase_rate,
            "taxRate": self.tax_rate,
        }


@dataclass(frozen=True)
class ModelBase:
    id: str
    enabled: bool
    description: str

    type: ClassVar[str] = ""

    def _base_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass(frozen=True)
class SalaryModel(ModelBase):
    amount: float
    start_year: int
    end_year: int
    increase_type: IncreaseType
    increase_rate: float

    type: ClassVar[str] = "salary"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "amount": self.amount,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "increaseType": self.increase_type,
            "increaseRate": self.increase_rate,
        }


@dataclass(frozen=True)
class RecurringExpenseModel(ModelBase):
    amount: float
    start_year: int
    end_year: int
    increase_type: IncreaseType
    increase_rate: float

    type: ClassVar[str] = "recurring_expense"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "amount": self.amount,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "increaseType": self.increase_type,
            "increaseRate": self.increase_rate,
        }


@dataclass(frozen=True)
class OneTimeExpenseModel(ModelBase):
    amount: float
    year: int

    type: ClassVar[str] = "onetime_expense"

    def to_dict(self) -> dict[str, Any]:
        return {**self._base_dict(), "amount": self.amount, "year": self.year}


@dataclass(frozen=True)
class OneTimeIncomeModel(ModelBase):
    amount: float
    year: int

    type: ClassVar[str] = "onetime_income"

    def to_dict(self) -> dict[str, Any]:
        return {**self._base_dict(), "amount": self.amount, "year": self.year}


@dataclass(frozen=True)
class MortgageModel(ModelBase):
    loan_amount: float
    interest_rate: float  # annual, percent
    term_years: int
    start_year: int

    type: ClassVar[str] = "mortgage"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "loanAmount": self.loan_amount,
            "interestRate": self.interest_rate,
            "termYears": self.term_years,
            "startYear": self.start_year,
        }


@dataclass(frozen=True)
class CarLoanModel(ModelBase):
    loan_amount: float
    interest_rate: float  # annual, percent
    term_years: int
    start_year: int

    type: ClassVar[str] = "car_loan"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "loanAmount": self.loan_amount,
            "interestRate": self.interest_rate,
            "termYears": self.term_years,
            "startYear": self.start_year,
        }


@dataclass(frozen=True)
class RetirementAccountModel(ModelBase):
    current_balance: float
    balance_as_of_year: int
    growth_rate: float
    contributions: Schedule | None = None
    distributions: Schedule | None = None

    type: ClassVar[str] = "retirement_account"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "currentBalance": self.current_balance,
            "balanceAsOfYear": self.balance_as_of_year,
            "growthRate": self.growth_rate,
            "contributions": self.contributions.to_dict() if self.contributions else None,
            "distributions": self.distributions.to_dict() if self.distributions else None,
        }


@dataclass(frozen=True)
class SocialSecurityModel(ModelBase):
    annual_benefit: float
    start_year: int
    end_year: int
    increase_rate: float  # cost-of-living adjustment, percent only

    type: ClassVar[str] = "social_security"

    def to_dict(self) -> dict[str, Any]:
        return {
            **self._base_dict(),
            "annualBenefit": self.annual_benefit,
            "startYear": self.start_year,
            "endYear": self.end_year,
            "increaseRate": self.increase_rate,
        }


Model = Union[
    SalaryModel,
    RecurringExpenseModel,
    OneTimeExpenseModel,
    OneTimeIncomeModel,
    MortgageModel,
    CarLoanModel,
    RetirementAccountModel,
    SocialSecurityModel,
]

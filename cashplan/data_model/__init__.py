from .models import (
    INCREASE_TYPES,
    CarLoanModel,
    IncreaseType,
    Model,
    MortgageModel,
    OneTimeExpenseModel,
    OneTimeIncomeModel,
    RecurringExpenseModel,
    RetirementAccountModel,
    SalaryModel,
    Schedule,
    SocialSecurityModel,
)
from .output import AccountBalanceYear, CalculationOutput, LineItem, YearData
from .parse import (
    ScenarioFormatError,
    config_from_dict,
    model_from_dict,
    scenario_from_dict,
    schedule_from_dict,
)
from .scenario import Scenario, ScenarioConfig

__all__ = [
    "INCREASE_TYPES",
    "AccountBalanceYear",
    "CalculationOutput",
    "CarLoanModel",
    "IncreaseType",
    "LineItem",
    "Model",
    "MortgageModel",
    "OneTimeExpenseModel",
    "OneTimeIncomeModel",
    "RecurringExpenseModel",
    "RetirementAccountModel",
    "SalaryModel",
    "Scenario",
    "ScenarioConfig",
    "ScenarioFormatError",
    "Schedule",
    "SocialSecurityModel",
    "YearData",
    "config_from_dict",
    "model_from_dict",
    "scenario_from_dict",
    "schedule_from_dict",
]

"""Build scenario dataclasses from the camelCase JSON shape used on disk and over HTTP."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .models import (
    INCREASE_TYPES,
    CarLoanModel,
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
from .scenario import Scenario, ScenarioConfig


class ScenarioFormatError(ValueError):
    """Raised when a raw payload cannot be turned into a Scenario."""


def _expect_dict(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ScenarioFormatError(f"{path}: expected object")
    return value


def _expect_list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise ScenarioFormatError(f"{path}: expected array")
    return value


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data or data[key] is None:
        raise ScenarioFormatError(f"{path}.{key}: missing required field")
    return data[key]


def _number(data: dict[str, Any], key: str, path: str, default: float | None = None) -> float:
    if default is not None and data.get(key) is None:
        return default
    value = _require(data, key, path)
    if isinstance(value, bool):
        raise ScenarioFormatError(f"{path}.{key}: expected number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ScenarioFormatError(f"{path}.{key}: expected number") from None


def _year(data: dict[str, Any], key: str, path: str) -> int:
    value = _number(data, key, path)
    if not value.is_integer():
        raise ScenarioFormatError(f"{path}.{key}: expected whole year")
    return int(value)


def _increase_type(data: dict[str, Any], path: str) -> str:
    value = str(data.get("increaseType") or "percent").strip().lower()
    if value not in INCREASE_TYPES:
        raise ScenarioFormatError(f"{path}.increaseType: expected one of {', '.join(INCREASE_TYPES)}")
    return value


def _base_fields(data: dict[str, Any], path: str) -> dict[str, Any]:
    return {
        "id": str(_require(data, "id", path)),
        "enabled": bool(data.get("enabled", True)),
        "description": str(data.get("description") or ""),
    }


def schedule_from_dict(data: Any, path: str = "schedule") -> Schedule | None:
    if data is None:
        return None
    data = _expect_dict(data, path)
    return Schedule(
        amount=_number(data, "amount", path),
        start_year=_year(data, "startYear", path),
        end_year=_year(data, "endYear", path),
        increase_type=_increase_type(data, path),
        increase_rate=_number(data, "increaseRate", path, default=0.0),
        tax_rate=_number(data, "taxRate", path, default=0.0),
    )


def _recurring(cls):
    def build(data: dict[str, Any], path: str):
        return cls(
            **_base_fields(data, path),
            amount=_number(data, "amount", path),
            start_year=_year(data, "startYear", path),
            end_year=_year(data, "endYear", path),
            increase_type=_increase_type(data, path),
            increase_rate=_number(data, "increaseRate", path, default=0.0),
        )

    return build


def _one_time(cls):
    def build(data: dict[str, Any], path: str):
        return cls(
            **_base_fields(data, path),
            amount=_number(data, "amount", path),
            year=_year(data, "year", path),
        )

    return build


def _loan(cls):
    def build(data: dict[str, Any], path: str):
        return cls(
            **_base_fields(data, path),
            loan_amount=_number(data, "loanAmount", path),
            interest_rate=_number(data, "interestRate", path),
            term_years=_year(data, "termYears", path),
            start_year=_year(data, "startYear", path),
        )

    return build


def _retirement_account(data: dict[str, Any], path: str) -> RetirementAccountModel:
    return RetirementAccountModel(
        **_base_fields(data, path),
        current_balance=_number(data, "currentBalance", path),
        balance_as_of_year=_year(data, "balanceAsOfYear", path),
        growth_rate=_number(data, "growthRate", path, default=0.0),
        contributions=schedule_from_dict(data.get("contributions"), f"{path}.contributions"),
        distributions=schedule_from_dict(data.get("distributions"), f"{path}.distributions"),
    )


def _social_security(data: dict[str, Any], path: str) -> SocialSecurityModel:
    return SocialSecurityModel(
        **_base_fields(data, path),
        annual_benefit=_number(data, "annualBenefit", path),
        start_year=_year(data, "startYear", path),
        end_year=_year(data, "endYear", path),
        increase_rate=_number(data, "increaseRate", path, default=0.0),
    )


MODEL_BUILDERS: Dict[str, Callable[[dict[str, Any], str], Model]] = {
    SalaryModel.type: _recurring(SalaryModel),
    RecurringExpenseModel.type: _recurring(RecurringExpenseModel),
    OneTimeExpenseModel.type: _one_time(OneTimeExpenseModel),
    OneTimeIncomeModel.type: _one_time(OneTimeIncomeModel),
    MortgageModel.type: _loan(MortgageModel),
    CarLoanModel.type: _loan(CarLoanModel),
    RetirementAccountModel.type: _retirement_account,
    SocialSecurityModel.type: _social_security,
}


def model_from_dict(data: Any, path: str = "model") -> Model:
    data = _expect_dict(data, path)
    model_type = _require(data, "type", path)
    builder = MODEL_BUILDERS.get(model_type)
    if builder is None:
        raise ScenarioFormatError(f"{path}.type: unknown model type '{model_type}'")
    return builder(data, path)


def config_from_dict(data: Any, path: str = "config") -> ScenarioConfig:
    data = _expect_dict(data, path)
    return ScenarioConfig(
        start_year=_year(data, "startYear", path),
        end_year=_year(data, "endYear", path),
        cpi_rate=_number(data, "cpiRate", path, default=0.0),
        starting_cash_balance=_number(data, "startingCashBalance", path, default=0.0),
    )


def scenario_from_dict(data: Any) -> Scenario:
    data = _expect_dict(data, "scenario")
    name = str(_require(data, "name", "scenario")).strip()
    if not name:
        raise ScenarioFormatError("scenario.name: must not be empty")
    models_raw = _expect_list(data.get("models") or [], "scenario.models")
    based_on = data.get("basedOn")
    return Scenario(
        name=name,
        description=str(data.get("description") or ""),
        config=config_from_dict(_require(data, "config", "scenario"), "scenario.config"),
        based_on=str(based_on) if based_on is not None else None,
        models=tuple(model_from_dict(raw, f"scenario.models[{idx}]") for idx, raw in enumerate(models_raw)),
    )

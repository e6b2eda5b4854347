import pytest

from cashplan.data_model import (
    RetirementAccountModel,
    ScenarioFormatError,
    SocialSecurityModel,
    model_from_dict,
    scenario_from_dict,
)


def _payload(**overrides):
    payload = {
        "name": "Baseline",
        "description": "Current plan",
        "config": {"startYear": 2025, "endYear": 2030, "cpiRate": 3.0, "startingCashBalance": 10000},
        "basedOn": None,
        "models": [
            {
                "id": "sal-1",
                "type": "salary",
                "enabled": True,
                "description": "Salary",
                "amount": 90000,
                "startYear": 2025,
                "endYear": 2040,
                "increaseType": "percent",
                "increaseRate": 3,
            },
            {
                "id": "ira",
                "type": "retirement_account",
                "enabled": True,
                "description": "IRA",
                "currentBalance": 50000,
                "balanceAsOfYear": 2024,
                "growthRate": 7,
                "contributions": None,
                "distributions": {
                    "amount": 12000,
                    "startYear": 2035,
                    "endYear": 2050,
                    "increaseType": "flat",
                    "increaseRate": 0,
                },
            },
        ],
    }
    payload.update(overrides)
    return payload


def test_scenario_from_dict_builds_typed_models():
    scenario = scenario_from_dict(_payload())

    assert scenario.name == "Baseline"
    assert scenario.config.start_year == 2025
    assert scenario.config.starting_cash_balance == 10000.0
    assert scenario.models[0].type == "salary"
    account = scenario.models[1]
    assert isinstance(account, RetirementAccountModel)
    assert account.contributions is None
    assert account.distributions.tax_rate == 0.0


def test_missing_starting_cash_balance_defaults_to_zero():
    payload = _payload(config={"startYear": 2025, "endYear": 2026, "cpiRate": 2.5})

    scenario = scenario_from_dict(payload)

    assert scenario.config.starting_cash_balance == 0.0


def test_to_dict_restores_wire_shape():
    payload = _payload()

    scenario = scenario_from_dict(payload)
    data = scenario.to_dict()

    assert data["config"]["startingCashBalance"] == 10000.0
    assert data["models"][0]["increaseType"] == "percent"
    assert data["models"][1]["distributions"]["taxRate"] == 0.0
    assert scenario_from_dict(data) == scenario


def test_social_security_model_fields():
    model = model_from_dict(
        {
            "id": "ss",
            "type": "social_security",
            "description": "Benefits",
            "annualBenefit": 30000,
            "startYear": 2050,
            "endYear": 2070,
            "increaseRate": 2.5,
        }
    )

    assert isinstance(model, SocialSecurityModel)
    assert model.enabled is True
    assert model.annual_benefit == 30000.0


def test_unknown_model_type_is_rejected():
    payload = _payload(models=[{"id": "x", "type": "lottery"}])

    with pytest.raises(ScenarioFormatError, match=r"models\[0\]\.type"):
        scenario_from_dict(payload)


def test_missing_field_reports_path():
    payload = _payload(models=[{"id": "m", "type": "mortgage", "loanAmount": 1, "interestRate": 5, "termYears": 30}])

    with pytest.raises(ScenarioFormatError, match=r"scenario\.models\[0\]\.startYear: missing required field"):
        scenario_from_dict(payload)


def test_bad_increase_type_is_rejected():
    payload = _payload()
    payload["models"][0]["increaseType"] = "exponential"

    with pytest.raises(ScenarioFormatError, match="increaseType"):
        scenario_from_dict(payload)


def test_non_numeric_amount_is_rejected():
    payload = _payload()
    payload["models"][0]["amount"] = "lots"

    with pytest.raises(ScenarioFormatError, match="expected number"):
        scenario_from_dict(payload)


def test_non_object_payload_is_rejected():
    with pytest.raises(ScenarioFormatError, match="expected object"):
        scenario_from_dict(["not", "a", "scenario"])

from typing import Iterable

import pandas as pd

from ..data_model import CalculationOutput

YEAR_COLUMNS = [
    "Scenario",
    "Year",
    "TotalIncome",
    "TotalExpenses",
    "YearlyNet",
    "CumulativeNet",
    "CashOnHand",
    "RetirementBalance",
]

ACCOUNT_COLUMNS = [
    "Scenario",
    "ModelId",
    "Description",
    "Year",
    "StartingBalance",
    "Contributions",
    "Distributions",
    "DistributionIncome",
    "Growth",
    "EndingBalance",
]


def account_frame(output: CalculationOutput) -> pd.DataFrame:
    """One row per retirement account per projected year."""
    records = [
        {
            "Scenario": output.scenario_name,
            "ModelId": rec.model_id,
            "Description": rec.description,
            "Year": rec.year,
            "StartingBalance": rec.starting_balance,
            "Contributions": rec.contributions,
            "Distributions": rec.distributions,
            "DistributionIncome": rec.distribution_income,
            "Growth": rec.growth,
            "EndingBalance": rec.ending_balance,
        }
        for rec in output.account_balances
    ]
    return pd.DataFrame(records, columns=ACCOUNT_COLUMNS)


def yearly_frame(output: CalculationOutput) -> pd.DataFrame:
    """Yearly ledger totals with the combined retirement balance alongside."""
    df = pd.DataFrame(
        [
            {
                "Scenario": output.scenario_name,
                "Year": yd.year,
                "TotalIncome": yd.total_income,
                "TotalExpenses": yd.total_expenses,
                "YearlyNet": yd.yearly_net,
                "CumulativeNet": yd.cumulative_net,
                "CashOnHand": yd.cash_on_hand,
            }
            for yd in output.years
        ],
        columns=YEAR_COLUMNS[:-1],
    )
    if df.empty:
        return pd.DataFrame(columns=YEAR_COLUMNS)

    accounts = account_frame(output)
    balances = accounts.groupby("Year")["EndingBalance"].sum()
    df["RetirementBalance"] = df["Year"].map(balances).fillna(0.0).astype(float)
    return df


def compare_frame(outputs: Iterable[CalculationOutput]) -> pd.DataFrame:
    frames = [yearly_frame(output) for output in outputs]
    frames = [frame for frame in frames if not frame.empty]
    if not frames:
        return pd.DataFrame(columns=YEAR_COLUMNS)
    df = pd.concat(frames, ignore_index=True)
    return df.sort_values(["Scenario", "Year"], kind="stable").reset_index(drop=True)

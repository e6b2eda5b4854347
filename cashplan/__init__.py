"""Household cash-flow projection: scenarios of income, expense, loan and account models."""

from .data_model import Scenario, ScenarioFormatError, scenario_from_dict
from .engine import calculate

__all__ = ["Scenario", "ScenarioFormatError", "calculate", "scenario_from_dict"]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from .models import Model


@dataclass(frozen=True)
class ScenarioConfig:
    start_year: int
    end_year: int
    cpi_rate: float = 0.0
    starting_cash_balance: float = 0.0

    def years(self) -> range:
        return range(self.start_year, self.end_year + 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "startYear": self.start_year,
            "endYear": self.end_year,
            "cpiRate": self.cpi_rate,
            "startingCashBalance": self.starting_cash_balance,
        }


@dataclass(frozen=True)
class Scenario:
    name: str
    config: ScenarioConfig
    description: str = ""
    based_on: str | None = None
    models: Tuple[Model, ...] = field(default_factory=tuple)

    def enabled_models(self) -> list[Model]:
        return [model for model in self.models if model.enabled]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "config": self.config.to_dict(),
            "basedOn": self.based_on,
            "models": [model.to_dict() for model in self.models],
        }

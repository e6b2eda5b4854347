# engine/state.py
import copy
import logging
import os
from typing import Any, Dict, List

from ..data_model import Scenario, ScenarioFormatError, scenario_from_dict
from .storage import ensure_dir, load_json, save_json, slugify

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "cpiRate": 3.0,
    "estimatedTaxRate": 22.0,
    "typicalCosts": {
        "utilities": 4800.0,
        "householdExpenses": 12000.0,
        "autoInsurance": 1800.0,
        "healthInsurance": 7200.0,
        "homeownersInsurance": 2400.0,
    },
    "retirementGrowthRate": 7.0,
    "socialSecurityCOLA": 2.5,
}


class ScenarioStore:
    """One JSON file per scenario, named after the slug of the scenario name."""

    def __init__(self, storage_dir: str = "user_data/scenarios"):
        self.storage_dir = storage_dir

    def _path(self, name: str) -> str:
        return os.path.join(self.storage_dir, f"{slugify(name)}.json")

    def list_names(self) -> List[str]:
        if not os.path.isdir(self.storage_dir):
            return []
        return sorted(f[: -len(".json")] for f in os.listdir(self.storage_dir) if f.endswith(".json"))

    def get_raw(self, name: str) -> dict | None:
        data = load_json(self._path(name))
        return data if isinstance(data, dict) else None

    def get(self, name: str) -> Scenario | None:
        raw = self.get_raw(name)
        if raw is None:
            return None
        try:
            return scenario_from_dict(raw)
        except ScenarioFormatError as exc:
            logger.warning("Skipping unreadable scenario %s: %s", self._path(name), exc)
            return None

    def save(self, scenario: Scenario) -> None:
        if not slugify(scenario.name):
            raise ScenarioFormatError("scenario.name: must contain at least one letter or digit")
        ensure_dir(self.storage_dir)
        save_json(self._path(scenario.name), scenario.to_dict())

    def delete(self, name: str) -> bool:
        path = self._path(name)
        if not os.path.exists(path):
            return False
        os.remove(path)
        return True


class DefaultsState:
    def __init__(self, storage_path: str = "user_data/defaults.json"):
        self.storage_path = storage_path
        self.defaults: Dict[str, Any] = load_json(storage_path) or copy.deepcopy(DEFAULTS)

    def get(self) -> Dict[str, Any]:
        return self.defaults

    def save(self, payload: Dict[str, Any]) -> None:
        self.defaults = payload
        save_json(self.storage_path, self.defaults)

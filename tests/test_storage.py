import json
import math

import pytest

from cashplan.backend import _sanitize_records
from cashplan.data_model import Scenario, ScenarioConfig, ScenarioFormatError
from cashplan.engine.state import DEFAULTS, DefaultsState, ScenarioStore
from cashplan.engine.storage import _sanitize_json_compat, load_json, save_json, slugify


def test_sanitize_json_compat_replaces_special_numbers():
    payload = {
        "float": math.nan,
        "list": [1, float("inf"), -float("inf")],
        "nested": {"value": math.nan},
    }

    clean = _sanitize_json_compat(payload)

    assert clean == {
        "float": None,
        "list": [1, None, None],
        "nested": {"value": None},
    }


def test_save_json_persists_sanitized_values(tmp_path):
    path = tmp_path / "nested" / "data.json"
    data = {"Plan": {"value": math.nan, "items": [1, float("inf")]}}

    save_json(str(path), data)

    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)

    assert stored == {"Plan": {"value": None, "items": [1, None]}}
    assert sorted(p.name for p in (tmp_path / "nested").iterdir()) == ["data.json"]


def test_load_json_tolerates_missing_empty_and_corrupt_files(tmp_path):
    empty = tmp_path / "empty.json"
    empty.write_text("  ", encoding="utf-8")
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")

    assert load_json(str(tmp_path / "missing.json"), default={}) == {}
    assert load_json(str(empty)) is None
    assert load_json(str(corrupt), default=[]) == []


def test_sanitize_records_used_for_api_payloads():
    rows = [{"value": float("nan"), "other": 5}]

    clean = _sanitize_records(rows)

    assert clean == [{"value": None, "other": 5}]


def test_slugify():
    assert slugify("My Plan (2025)!") == "my-plan-2025"
    assert slugify("--Early Retire--") == "early-retire"


def test_scenario_store_round_trip(tmp_path):
    store = ScenarioStore(str(tmp_path / "scenarios"))
    scenario = Scenario(name="Early Retire", config=ScenarioConfig(start_year=2025, end_year=2040))

    assert store.list_names() == []
    store.save(scenario)

    assert store.list_names() == ["early-retire"]
    assert store.get("Early Retire") == scenario
    assert store.get("early-retire") == scenario
    assert store.get("missing") is None


def test_scenario_store_defaults_starting_cash_on_load(tmp_path):
    folder = tmp_path / "scenarios"
    folder.mkdir()
    (folder / "legacy.json").write_text(
        json.dumps({"name": "legacy", "config": {"startYear": 2025, "endYear": 2026, "cpiRate": 3}, "models": []}),
        encoding="utf-8",
    )

    scenario = ScenarioStore(str(folder)).get("legacy")

    assert scenario.config.starting_cash_balance == 0.0


def test_scenario_store_delete(tmp_path):
    store = ScenarioStore(str(tmp_path))
    store.save(Scenario(name="temp", config=ScenarioConfig(start_year=2025, end_year=2025)))

    assert store.delete("temp") is True
    assert store.delete("temp") is False
    assert store.list_names() == []


def test_defaults_state_falls_back_and_persists(tmp_path):
    path = tmp_path / "defaults.json"
    state = DefaultsState(str(path))

    assert state.get() == DEFAULTS

    state.save({"cpiRate": 2.0})

    assert DefaultsState(str(path)).get() == {"cpiRate": 2.0}


def test_save_json_repeated_writes_leave_no_temp_files(tmp_path):
    path = tmp_path / "data.json"

    save_json(str(path), {"n": 1})
    save_json(str(path), {"n": 2})

    assert load_json(str(path)) == {"n": 2}
    assert list(tmp_path.glob("*.tmp")) == []


def test_scenario_store_skips_malformed_file(tmp_path):
    folder = tmp_path / "scenarios"
    store = ScenarioStore(str(folder))
    store.save(Scenario(name="good", config=ScenarioConfig(start_year=2025, end_year=2026)))
    (folder / "bad.json").write_text(json.dumps({"name": "bad", "config": {}}), encoding="utf-8")

    assert store.get("bad") is None
    assert store.get("good") is not None
    assert store.list_names() == ["bad", "good"]


def test_scenario_store_rejects_name_without_letters_or_digits(tmp_path):
    store = ScenarioStore(str(tmp_path))

    with pytest.raises(ScenarioFormatError):
        store.save(Scenario(name="!!!", config=ScenarioConfig(start_year=2025, end_year=2025)))

    assert store.list_names() == []

"""REST backend for household cash-flow scenarios."""

from __future__ import annotations

import math
import os
from typing import Any, Dict, List

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from cashplan.data_model import CalculationOutput, Scenario, ScenarioFormatError, scenario_from_dict
from cashplan.engine.aggregate import account_frame, compare_frame, yearly_frame
from cashplan.engine.calculator import calculate, calculate_many
from cashplan.engine.state import DefaultsState, ScenarioStore
from cashplan.engine.storage import _sanitize_json_compat, slugify


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _scenario_payload(scenario: Scenario) -> Dict[str, Any]:
    return _sanitize_json_compat({"scenario": scenario.to_dict(), "calculated": calculate(scenario).to_dict()})


def _store() -> ScenarioStore:
    return current_app.extensions["cashplan.scenarios"]


def _defaults() -> DefaultsState:
    return current_app.extensions["cashplan.defaults"]


def _compared_outputs() -> List[CalculationOutput] | None:
    names_param = request.args.get("names", "").strip()
    if not names_param:
        return None
    scenarios = [_store().get(name.strip()) for name in names_param.split(",")]
    return calculate_many(scenario for scenario in scenarios if scenario is not None)


def _parse_body() -> Scenario:
    payload = request.get_json(silent=True)
    if payload is None:
        raise ScenarioFormatError("request body must be a JSON object")
    return scenario_from_dict(payload)


def create_app(data_dir: str | None = None) -> Flask:
    app = Flask(__name__)
    data_dir = data_dir or os.environ.get("CASHPLAN_DATA_DIR", "user_data")
    app.extensions["cashplan.scenarios"] = ScenarioStore(os.path.join(data_dir, "scenarios"))
    app.extensions["cashplan.defaults"] = DefaultsState(os.path.join(data_dir, "defaults.json"))

    @app.after_request
    def apply_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(ScenarioFormatError)
    def handle_format_error(exc: ScenarioFormatError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    @app.get("/api/health")
    def healthcheck():
        return jsonify({"status": "ok"})

    @app.get("/api/scenarios")
    def list_scenarios():
        return jsonify(_store().list_names())

    @app.get("/api/scenarios/compare")
    def compare_scenarios():
        outputs = _compared_outputs()
        if outputs is None:
            return jsonify({"error": "names query parameter required"}), 400
        return jsonify([_sanitize_json_compat(output.to_dict()) for output in outputs])

    @app.get("/api/scenarios/compare/table")
    def compare_scenarios_table():
        outputs = _compared_outputs()
        if outputs is None:
            return jsonify({"error": "names query parameter required"}), 400
        return jsonify({"years": _sanitize_records(compare_frame(outputs).to_dict(orient="records"))})

    @app.get("/api/scenarios/<name>")
    def get_scenario(name: str):
        scenario = _store().get(name)
        if scenario is None:
            return jsonify({"error": "Scenario not found"}), 404
        return jsonify(_scenario_payload(scenario))

    @app.get("/api/scenarios/<name>/table")
    def get_scenario_table(name: str):
        scenario = _store().get(name)
        if scenario is None:
            return jsonify({"error": "Scenario not found"}), 404
        output = calculate(scenario)
        return jsonify(
            {
                "years": _sanitize_records(yearly_frame(output).to_dict(orient="records")),
                "accounts": _sanitize_records(account_frame(output).to_dict(orient="records")),
            }
        )

    @app.post("/api/scenarios")
    def create_scenario():
        scenario = _parse_body()
        _store().save(scenario)
        app.logger.info("Saved scenario %s", scenario.name)
        return jsonify(_scenario_payload(scenario)), 201

    @app.put("/api/scenarios/<name>")
    def update_scenario(name: str):
        scenario = _parse_body()
        _store().save(scenario)
        if slugify(scenario.name) != slugify(name):
            _store().delete(name)
        return jsonify(_scenario_payload(scenario))

    @app.delete("/api/scenarios/<name>")
    def delete_scenario(name: str):
        if not _store().delete(name):
            return jsonify({"error": "Scenario not found"}), 404
        return "", 204

    @app.post("/api/calculate")
    def calculate_unsaved():
        scenario = _parse_body()
        return jsonify(_sanitize_json_compat(calculate(scenario).to_dict()))

    @app.get("/api/defaults")
    def get_defaults():
        return jsonify(_defaults().get())

    @app.put("/api/defaults")
    def update_defaults():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"error": "Defaults must be an object."}), 400
        _defaults().save(payload)
        return jsonify(_defaults().get())

    return app


app = create_app()


def main() -> None:
    app.run(debug=False, port=int(os.environ.get("PORT", 8000)))


if __name__ == "__main__":
    main()

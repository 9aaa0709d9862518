"""REST backend for net-worth projections."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Dict, List

import pandas as pd
from flask import Flask, jsonify, request

from networth.config import load_settings
from networth.data_model import (
    ALL_EXAMPLES,
    COMPONENT_CATEGORIES,
    SERIES_TYPES,
    ComponentTableModel,
    dataframe_to_components,
    example_scenario_config,
    get_example,
)
from networth.engine.aggregate import aggregate_by_year, breakdown_frame
from networth.engine.evaluator import evaluate
from networth.engine.serialization import (
    ValidationError,
    scenario_to_dict,
    validate_plan,
    validate_scenario,
    validate_time_series,
)
from networth.engine.simulator import project_scenario, projection_frame
from networth.engine.state import PlanState

settings = load_settings()

app = Flask(__name__)

plan_state = PlanState(settings.plans_path)

COMPONENT_MODEL = ComponentTableModel()


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


def _model_payload(model: ComponentTableModel) -> Dict[str, Any]:
    columns: List[Dict[str, Any]] = []
    for col in model.columns:
        columns.append(
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "options": col.options or [],
                "min": col.min_value,
                "step": col.step,
                "format": col.format,
                "help": col.help,
            }
        )
    defaults = _sanitize_records(model.create_default_df().to_dict("records"))
    return {
        "name": model.name,
        "columns": columns,
        "defaults": defaults,
    }


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _require_int(payload: dict, *keys: str) -> int:
    value = _extract_payload_value(payload, *keys)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or _is_nan(value) or value != int(value):
        raise ValidationError("must be a whole number", keys[0])
    return int(value)


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")
    return payload


def _frame_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    return _sanitize_records(frame.to_dict(orient="records"))


def _validation_failed(exc: ValidationError):
    app.logger.warning("Rejected %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,DELETE,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    payload = {
        "scenarioDefaults": {
            "baseYear": settings.base_year,
            "projectionYears": settings.projection_years,
            "initialNetWorth": 0.0,
            "investmentReturnRate": settings.investment_return_rate,
        },
        "components": _model_payload(COMPONENT_MODEL),
        "categories": list(COMPONENT_CATEGORIES),
        "seriesTypes": list(SERIES_TYPES),
    }
    return jsonify(payload)


@app.get("/api/examples")
def list_examples():
    return jsonify(
        {"examples": [{"id": ex.id, "name": ex.name, "description": ex.description} for ex in ALL_EXAMPLES]}
    )


@app.get("/api/examples/<example_id>")
def get_example_scenario(example_id: str):
    example = get_example(example_id)
    if example is None:
        return jsonify({"error": "Example not found."}), 404
    config = example_scenario_config(
        example,
        projection_years=settings.projection_years,
        investment_return_rate=settings.investment_return_rate,
    )
    return jsonify(
        {
            "id": example.id,
            "name": example.name,
            "description": example.description,
            "scenario": scenario_to_dict(config),
        }
    )


@app.post("/api/evaluate")
def evaluate_series():
    try:
        payload = _json_payload()
        series = validate_time_series(payload.get("series"))
        year = _require_int(payload, "year")
        base_year = _require_int(payload, "baseYear", "base_year")
    except ValidationError as exc:
        return _validation_failed(exc)
    value = evaluate(series, year, base_year)
    return jsonify({"value": None if _is_nan(value) else value})


@app.post("/api/breakdown")
def yearly_breakdown():
    try:
        payload = _json_payload()
        plan = validate_plan(payload)
        start_year = _require_int(payload, "startYear", "start_year")
        end_year = _require_int(payload, "endYear", "end_year")
        if end_year - start_year > settings.max_projection_years:
            raise ValidationError(f"range must span at most {settings.max_projection_years} years", "endYear")
    except ValidationError as exc:
        return _validation_failed(exc)
    rows = aggregate_by_year(plan, start_year, end_year)
    return jsonify({"breakdown": _frame_records(breakdown_frame(rows))})


def _projection_response(config):
    projection = project_scenario(config)
    breakdown = aggregate_by_year(config.plan, config.start_year, config.end_year)
    app.logger.info(
        "Projected %d component(s) over %d year(s)", len(config.plan.components), config.projection_years
    )
    return jsonify(
        {
            "projection": _frame_records(projection_frame(projection)),
            "breakdown": _frame_records(breakdown_frame(breakdown)),
        }
    )


@app.post("/api/project")
def project():
    try:
        payload = _json_payload()
        config = validate_scenario(payload, max_projection_years=settings.max_projection_years)
    except ValidationError as exc:
        return _validation_failed(exc)
    return _projection_response(config)


@app.post("/api/project/table")
def project_table():
    """Project a scenario whose components come as editor table rows."""
    try:
        payload = _json_payload()
        rows = payload.get("rows")
        if rows is None:
            rows = COMPONENT_MODEL.default_rows
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            raise ValidationError("rows must be an array of objects", "rows")
        config = validate_scenario(
            {**payload, "components": []}, max_projection_years=settings.max_projection_years
        )
        try:
            components = dataframe_to_components(pd.DataFrame(rows), config.plan.base_year)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValidationError(f"invalid row value ({exc})", "rows") from None
    except ValidationError as exc:
        return _validation_failed(exc)
    config = replace(config, plan=replace(config.plan, components=tuple(components)))
    return _projection_response(config)


@app.get("/api/plans")
def list_saved_plans():
    return jsonify({"plans": plan_state.list_names()})


@app.get("/api/plans/<plan_name>")
def get_plan(plan_name: str):
    plan = plan_state.get(plan_name)
    if not plan:
        return jsonify({"error": "Plan not found."}), 404
    return jsonify(plan)


@app.post("/api/plans")
def save_plan():
    try:
        payload = _json_payload()
    except ValidationError as exc:
        return _validation_failed(exc)
    name = str(payload.get("name", "")).strip()
    if not name:
        return jsonify({"error": "Plan name is required."}), 400
    try:
        config = validate_scenario(payload, max_projection_years=settings.max_projection_years)
    except ValidationError as exc:
        return _validation_failed(exc)
    stored = {"name": name, **scenario_to_dict(config)}
    plan_state.save(name, stored)
    app.logger.info("Saved plan %r", name)
    return jsonify({
        "message": "Plan saved.",
        "plans": plan_state.list_names(),
        "plan": stored,
    })


@app.delete("/api/plans/<plan_name>")
def delete_plan(plan_name: str):
    if not plan_state.delete(plan_name):
        return jsonify({"error": "Plan not found."}), 404
    return jsonify({"message": "Plan deleted.", "plans": plan_state.list_names()})


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    app.run(debug=settings.debug, port=settings.port)

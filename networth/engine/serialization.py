"""JSON (de)serialization with validation for plans and scenarios.

Payloads use the camelCase keys shared with the web client. Every validator
raises `ValidationError` carrying the path of the offending field, e.g.
``plan.components[2].series.segments[0].endYear``.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict

from ..data_model.components import COMPONENT_CATEGORIES, FinancialComponent
from ..data_model.plan import Plan, ScenarioConfig
from ..data_model.series import Composite, Constant, Linear, Ratio, Segment, TimeSeries


class ValidationError(ValueError):
    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
        self.path = path


# --- field checks ---


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _require_object(data: Any, path: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("expected object", path)
    return data


def _require_number(data: Dict[str, Any], key: str, path: str) -> float:
    value = data.get(key)
    if not _is_number(value):
        raise ValidationError(f"{key} must be a finite number", f"{path}.{key}")
    return value


def _require_year(data: Dict[str, Any], key: str, path: str) -> int:
    value = _require_number(data, key, path)
    if value != int(value):
        raise ValidationError(f"{key} must be a whole year", f"{path}.{key}")
    return int(value)


def _require_list(data: Dict[str, Any], key: str, path: str) -> list:
    value = data.get(key)
    if not isinstance(value, list):
        raise ValidationError(f"{key} must be an array", f"{path}.{key}")
    return value


# --- time series ---


def _validate_segment(data: Any, path: str) -> Segment:
    seg = _require_object(data, path)
    start_year = _require_year(seg, "startYear", path)
    end_year = _require_year(seg, "endYear", path)
    return Segment(
        series=validate_time_series(seg.get("series"), f"{path}.series"),
        start_year=start_year,
        end_year=end_year,
    )


def validate_time_series(data: Any, path: str = "series") -> TimeSeries:
    obj = _require_object(data, path)
    kind = obj.get("type")

    if kind == "constant":
        return Constant(_require_number(obj, "value", path))

    if kind == "linear":
        return Linear(
            start_value=_require_number(obj, "startValue", path),
            yearly_increment=_require_number(obj, "yearlyIncrement", path),
        )

    if kind == "ratio":
        start_value = _require_number(obj, "startValue", path)
        rate = _require_number(obj, "yearlyGrowthRate", path)
        if rate <= -1:
            raise ValidationError("yearlyGrowthRate must be greater than -1", f"{path}.yearlyGrowthRate")
        return Ratio(start_value=start_value, yearly_growth_rate=rate)

    if kind == "composite":
        raw_segments = _require_list(obj, "segments", path)
        return Composite(
            tuple(_validate_segment(seg, f"{path}.segments[{i}]") for i, seg in enumerate(raw_segments))
        )

    raise ValidationError(f"unknown series type: {kind}", f"{path}.type")


# --- components and plans ---


def validate_component(data: Any, path: str = "component") -> FinancialComponent:
    obj = _require_object(data, path)
    name = obj.get("name")
    if not isinstance(name, str):
        raise ValidationError("name must be a string", f"{path}.name")
    category = obj.get("category")
    if category not in COMPONENT_CATEGORIES:
        raise ValidationError(
            f"category must be one of: {', '.join(COMPONENT_CATEGORIES)}",
            f"{path}.category",
        )
    return FinancialComponent(
        name=name,
        category=category,
        series=validate_time_series(obj.get("series"), f"{path}.series"),
    )


def _validate_components(obj: Dict[str, Any], path: str) -> tuple:
    raw = _require_list(obj, "components", path)
    return tuple(validate_component(comp, f"{path}.components[{i}]") for i, comp in enumerate(raw))


def validate_plan(data: Any, path: str = "plan") -> Plan:
    obj = _require_object(data, path)
    base_year = _require_year(obj, "baseYear", path)
    return Plan(base_year=base_year, components=_validate_components(obj, path))


def validate_scenario(data: Any, path: str = "plan", max_projection_years: int | None = None) -> ScenarioConfig:
    obj = _require_object(data, path)
    base_year = _require_year(obj, "baseYear", path)
    projection_years = _require_year(obj, "projectionYears", path)
    if projection_years < 0:
        raise ValidationError("projectionYears must not be negative", f"{path}.projectionYears")
    if max_projection_years is not None and projection_years > max_projection_years:
        raise ValidationError(
            f"projectionYears must be at most {max_projection_years}", f"{path}.projectionYears"
        )
    initial_net_worth = _require_number(obj, "initialNetWorth", path)
    return_rate = _require_number(obj, "investmentReturnRate", path)
    return ScenarioConfig(
        plan=Plan(base_year=base_year, components=_validate_components(obj, path)),
        initial_net_worth=initial_net_worth,
        projection_years=projection_years,
        investment_return_rate=return_rate,
    )


# --- to plain data ---


def series_to_dict(series: TimeSeries) -> Dict[str, Any]:
    if isinstance(series, Constant):
        return {"type": "constant", "value": series.value}
    if isinstance(series, Linear):
        return {"type": "linear", "startValue": series.start_value, "yearlyIncrement": series.yearly_increment}
    if isinstance(series, Ratio):
        return {"type": "ratio", "startValue": series.start_value, "yearlyGrowthRate": series.yearly_growth_rate}
    if isinstance(series, Composite):
        return {
            "type": "composite",
            "segments": [
                {"series": series_to_dict(seg.series), "startYear": seg.start_year, "endYear": seg.end_year}
                for seg in series.segments
            ],
        }
    raise TypeError(f"Unsupported series: {series!r}")


def component_to_dict(comp: FinancialComponent) -> Dict[str, Any]:
    return {"name": comp.name, "category": comp.category, "series": series_to_dict(comp.series)}


def plan_to_dict(plan: Plan) -> Dict[str, Any]:
    return {
        "baseYear": plan.base_year,
        "components": [component_to_dict(c) for c in plan.components],
    }


def scenario_to_dict(config: ScenarioConfig) -> Dict[str, Any]:
    return {
        "baseYear": config.plan.base_year,
        "projectionYears": config.projection_years,
        "initialNetWorth": config.initial_net_worth,
        "investmentReturnRate": config.investment_return_rate,
        "components": [component_to_dict(c) for c in config.plan.components],
    }


# --- JSON text ---


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        # JSONDecodeError, or an int literal past the digit limit
        raise ValidationError("invalid JSON") from None


def serialize(plan: Plan) -> str:
    return json.dumps(plan_to_dict(plan), allow_nan=False)


def deserialize(text: str) -> Plan:
    return validate_plan(_parse_json(text))


def serialize_scenario(config: ScenarioConfig) -> str:
    return json.dumps(scenario_to_dict(config), allow_nan=False)


def deserialize_scenario(text: str) -> ScenarioConfig:
    return validate_scenario(_parse_json(text))

import json
import math

import pytest

from networth.backend import _sanitize_records
from networth.engine.state import PlanState
from networth.engine.storage import _sanitize_json_compat, load_plans, save_plans


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


def test_save_plans_persists_sanitized_values(tmp_path):
    path = tmp_path / "nested" / "plans.json"
    data = {"Plan": {"initialNetWorth": math.nan, "components": [1, float("inf")]}}

    save_plans(str(path), data)

    with path.open("r", encoding="utf-8") as handle:
        stored = json.load(handle)

    assert stored == {"Plan": {"initialNetWorth": None, "components": [1, None]}}
    assert not (tmp_path / "nested" / "plans.json.tmp").exists()


def test_load_plans_tolerates_missing_empty_and_corrupt_files(tmp_path):
    path = tmp_path / "plans.json"
    assert load_plans(str(path)) == {}

    path.write_text("", encoding="utf-8")
    assert load_plans(str(path)) == {}

    path.write_text("{oops", encoding="utf-8")
    assert load_plans(str(path)) == {}

    path.write_text("[1, 2]", encoding="utf-8")
    assert load_plans(str(path)) == {}


def test_sanitize_records_used_for_api_payloads():
    rows = [{"netWorth": float("nan"), "year": 2025}]

    clean = _sanitize_records(rows)

    assert clean == [{"netWorth": None, "year": 2025}]


def test_plan_state_round_trip(tmp_path):
    path = str(tmp_path / "plans.json")
    state = PlanState(path)

    state.save("b-plan", {"baseYear": 2025})
    state.save("a-plan", {"baseYear": 2030})

    reloaded = PlanState(path)
    assert reloaded.list_names() == ["a-plan", "b-plan"]
    assert reloaded.get("a-plan") == {"baseYear": 2030}
    assert reloaded.get("missing") is None


def test_plan_state_delete(tmp_path):
    path = str(tmp_path / "plans.json")
    state = PlanState(path)
    state.save("plan", {"baseYear": 2025})

    assert state.delete("plan") is True
    assert state.delete("plan") is False
    assert PlanState(path).list_names() == []


def test_plan_state_unchanged_when_write_fails(tmp_path, monkeypatch):
    state = PlanState(str(tmp_path / "plans.json"))
    state.save("kept", {"baseYear": 2025})

    def failing_save(path, plans):
        raise OSError("disk full")

    monkeypatch.setattr("networth.engine.state.save_plans", failing_save)

    with pytest.raises(OSError):
        state.save("lost", {"baseYear": 2030})
    with pytest.raises(OSError):
        state.delete("kept")

    assert state.list_names() == ["kept"]
    assert state.get("lost") is None

import pytest

from networth import backend
from networth.engine.state import PlanState


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(backend, "plan_state", PlanState(str(tmp_path / "plans.json")))
    backend.app.config["TESTING"] = True
    with backend.app.test_client() as test_client:
        yield test_client


def _scenario(**overrides):
    payload = {
        "baseYear": 2025,
        "projectionYears": 1,
        "initialNetWorth": 0,
        "investmentReturnRate": 0.10,
        "components": [
            {"name": "Salary", "category": "income", "series": {"type": "constant", "value": 100000}},
            {"name": "Living", "category": "spending", "series": {"type": "constant", "value": 50000}},
            {"name": "401k", "category": "investment", "series": {"type": "constant", "value": 20000}},
        ],
    }
    payload.update(overrides)
    return payload


def test_healthcheck_sets_cors_headers(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_schema_describes_component_table(client):
    data = client.get("/api/schema").get_json()

    assert data["categories"] == ["income", "spending", "investment"]
    assert data["seriesTypes"] == ["constant", "linear", "ratio", "composite"]
    assert [col["field"] for col in data["components"]["columns"]][:3] == ["Name", "Category", "Series Type"]
    assert len(data["components"]["defaults"]) == 2
    assert "projectionYears" in data["scenarioDefaults"]


def test_lists_and_fetches_examples(client):
    listing = client.get("/api/examples").get_json()["examples"]
    assert [ex["id"] for ex in listing] == ["high-saver", "dual-income", "career-change", "variable-income"]

    detail = client.get("/api/examples/high-saver").get_json()
    assert detail["scenario"]["baseYear"] == 2025
    assert len(detail["scenario"]["components"]) == 5

    assert client.get("/api/examples/nope").status_code == 404


def test_evaluate_endpoint(client):
    response = client.post(
        "/api/evaluate",
        json={"series": {"type": "ratio", "startValue": 100000, "yearlyGrowthRate": 0.1}, "year": 2030, "baseYear": 2025},
    )

    assert response.status_code == 200
    assert response.get_json()["value"] == pytest.approx(161051)


def test_evaluate_rejects_fractional_year(client):
    response = client.post(
        "/api/evaluate",
        json={"series": {"type": "constant", "value": 1}, "year": 2030.5, "baseYear": 2025},
    )

    assert response.status_code == 400
    assert response.get_json()["error"].startswith("year:")


def test_breakdown_endpoint(client):
    payload = _scenario(startYear=2025, endYear=2028)

    response = client.post("/api/breakdown", json=payload)

    rows = response.get_json()["breakdown"]
    assert [r["Year"] for r in rows] == [2025, 2026, 2027]
    assert rows[0]["NetCashFlow"] == 50000
    assert rows[0]["Investment"] == 20000


def test_project_endpoint(client):
    response = client.post("/api/project", json=_scenario())

    data = response.get_json()
    assert response.status_code == 200
    assert data["projection"][0]["Year"] == 2025
    assert data["projection"][0]["NetWorth"] == pytest.approx(52000)
    assert data["breakdown"][0]["NetCashFlow"] == 50000


def test_project_reports_validation_path(client):
    payload = _scenario()
    payload["components"][0]["category"] = "bonus"

    response = client.post("/api/project", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"].startswith("plan.components[0].category:")


def test_save_list_get_delete_plan(client):
    saved = client.post("/api/plans", json={"name": "Mine", **_scenario()})
    assert saved.status_code == 200
    assert saved.get_json()["plans"] == ["Mine"]

    assert client.get("/api/plans").get_json() == {"plans": ["Mine"]}
    stored = client.get("/api/plans/Mine").get_json()
    assert stored["name"] == "Mine"
    assert stored["projectionYears"] == 1

    deleted = client.delete("/api/plans/Mine")
    assert deleted.get_json()["plans"] == []
    assert client.get("/api/plans/Mine").status_code == 404
    assert client.delete("/api/plans/Mine").status_code == 404


def test_save_plan_requires_name_and_valid_scenario(client):
    assert client.post("/api/plans", json=_scenario()).status_code == 400

    response = client.post("/api/plans", json={"name": "Broken", "baseYear": 2025})
    assert response.status_code == 400
    assert client.get("/api/plans").get_json() == {"plans": []}


@pytest.mark.parametrize("path", ["/api/evaluate", "/api/breakdown", "/api/project", "/api/project/table", "/api/plans"])
def test_non_object_body_is_rejected(client, path):
    response = client.post(path, json=[1, 2, 3])

    assert response.status_code == 400
    assert response.get_json()["error"] == "request body must be a JSON object"


def test_project_rejects_horizon_past_limit(client):
    too_long = backend.settings.max_projection_years + 1

    response = client.post("/api/project", json=_scenario(projectionYears=too_long))
    assert response.status_code == 400
    assert response.get_json()["error"].startswith("plan.projectionYears:")

    saved = client.post("/api/plans", json={"name": "Long", **_scenario(projectionYears=too_long)})
    assert saved.status_code == 400
    assert client.get("/api/plans").get_json() == {"plans": []}


def test_breakdown_rejects_huge_year_span(client):
    response = client.post("/api/breakdown", json=_scenario(startYear=0, endYear=10**9))

    assert response.status_code == 400
    assert response.get_json()["error"].startswith("endYear:")


def _table_scenario(rows=None):
    payload = {"baseYear": 2025, "projectionYears": 2, "initialNetWorth": 0, "investmentReturnRate": 0.10}
    if rows is not None:
        payload["rows"] = rows
    return payload


def test_project_table_uses_default_rows(client):
    response = client.post("/api/project/table", json=_table_scenario())

    data = response.get_json()
    assert response.status_code == 200
    assert [r["Year"] for r in data["projection"]] == [2025, 2026]
    assert data["projection"][0]["NetWorth"] == pytest.approx(35000)


def test_project_table_builds_components_from_rows(client):
    rows = [
        {"Name": "Salary", "Category": "income", "Series Type": "constant", "Value": 100000},
        {"Name": "Living", "Category": "spending", "Series Type": "constant", "Value": 50000},
        {"Name": "401k", "Category": "investment", "Series Type": "constant", "Value": 20000},
        {"Name": "Bonus", "Category": "income", "Series Type": "constant", "Value": 5000, "Start Year": 2026},
    ]

    response = client.post("/api/project/table", json=_table_scenario(rows))

    data = response.get_json()
    assert response.status_code == 200
    assert data["projection"][0]["NetWorth"] == pytest.approx(52000)
    assert data["breakdown"][0]["Income"] == 100000
    assert data["breakdown"][1]["Income"] == 105000


def test_project_table_rejects_bad_rows(client):
    response = client.post("/api/project/table", json=_table_scenario(["not a row"]))
    assert response.status_code == 400
    assert response.get_json()["error"].startswith("rows:")

    bad_value = [{"Name": "Salary", "Category": "income", "Series Type": "constant", "Value": "lots"}]
    response = client.post("/api/project/table", json=_table_scenario(bad_value))
    assert response.status_code == 400
    assert response.get_json()["error"].startswith("rows:")

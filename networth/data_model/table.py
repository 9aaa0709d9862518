from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd

from .components import COMPONENT_CATEGORIES, FinancialComponent
from .series import SERIES_TYPES, Segment, TimeSeries, composite, constant, linear, ratio

DEFAULT_VALUES = {
    "income": ("Income", 80000.0),
    "spending": ("Spending", 45000.0),
    "investment": ("Investment", 10000.0),
}

# stands in for a blank "End Year"
OPEN_END_YEAR = 9999


@dataclass
class ColumnDefinition:
    """Lightweight schema descriptor used by table editors."""

    field: str
    label: str
    kind: str = "text"  # text | number | select
    default: Any = ""
    options: List[str] | None = None
    min_value: float | None = None
    step: float | None = None
    format: str | None = None
    help: str | None = None


@dataclass
class TableModel:
    """Container for a table schema plus default rows."""

    name: str
    columns: List[ColumnDefinition]
    default_rows: List[dict[str, Any]] = field(default_factory=list)

    def create_default_df(self) -> pd.DataFrame:
        if self.default_rows:
            return pd.DataFrame(self.default_rows, columns=[col.field for col in self.columns])
        seed = {col.field: col.default for col in self.columns}
        return pd.DataFrame([seed])


def default_row(category: str, existing_count: int = 0) -> dict[str, Any]:
    name, value = DEFAULT_VALUES[category]
    suffix = f" {existing_count + 1}" if existing_count > 0 else ""
    return {
        "Name": f"{name}{suffix}",
        "Category": category,
        "Series Type": "constant",
        "Value": value,
        "Start Value": value,
        "Yearly Increment": 0.0,
        "Growth Rate (%)": 3.0,
        "Start Year": "",
        "End Year": "",
    }


class ComponentTableModel(TableModel):
    def __init__(self) -> None:
        columns = [
            ColumnDefinition("Name", "Name"),
            ColumnDefinition(
                "Category",
                "Category",
                kind="select",
                default="income",
                options=list(COMPONENT_CATEGORIES),
            ),
            ColumnDefinition(
                "Series Type",
                "Series Type",
                kind="select",
                default="constant",
                options=[t for t in SERIES_TYPES if t != "composite"],
                help="constant / linear / ratio",
            ),
            ColumnDefinition("Value", "Value (USD/yr)", kind="number", default=0.0, step=1000.0, format="%.2f"),
            ColumnDefinition(
                "Start Value", "Start Value (USD/yr)", kind="number", default=0.0, step=1000.0, format="%.2f"
            ),
            ColumnDefinition("Yearly Increment", "Yearly Increment (USD)", kind="number", default=0.0, step=500.0),
            ColumnDefinition("Growth Rate (%)", "Growth Rate (%)", kind="number", default=3.0, step=0.25),
            ColumnDefinition("Start Year", "Start Year", kind="number", default="", help="blank = plan base year"),
            ColumnDefinition("End Year", "End Year (exclusive)", kind="number", default="", help="blank = open-ended"),
        ]
        super().__init__("components", columns, [default_row("income"), default_row("spending")])


def _number(row: dict, key: str, default: float = 0.0) -> float:
    value = row.get(key, default)
    if value is None or value == "" or pd.isna(value):
        return default
    return float(value)


def _optional_year(row: dict, key: str) -> int | None:
    value = row.get(key)
    if value is None or str(value).strip() == "" or pd.isna(value):
        return None
    return int(float(value))


def _row_series(row: dict) -> TimeSeries:
    kind = str(row.get("Series Type", "constant") or "constant").strip().lower()
    if kind == "linear":
        return linear(_number(row, "Start Value"), _number(row, "Yearly Increment"))
    if kind == "ratio":
        return ratio(_number(row, "Start Value"), _number(row, "Growth Rate (%)") / 100.0)
    return constant(_number(row, "Value"))


def dataframe_to_components(df: pd.DataFrame, base_year: int) -> List[FinancialComponent]:
    """Build components from editor rows.

    A row with either year bound set becomes a single-segment composite: a
    blank start means `base_year`, a blank end means open-ended.
    """
    items: List[FinancialComponent] = []
    for row in df.to_dict("records"):
        name = row.get("Name", "")
        name = "" if name is None or pd.isna(name) else str(name).strip()
        if not name:
            continue
        category = str(row.get("Category", "")).strip().lower()
        if category not in COMPONENT_CATEGORIES:
            continue
        series = _row_series(row)
        start_year = _optional_year(row, "Start Year")
        end_year = _optional_year(row, "End Year")
        if start_year is not None or end_year is not None:
            segment = Segment(
                series,
                base_year if start_year is None else start_year,
                OPEN_END_YEAR if end_year is None else end_year,
            )
            series = composite([segment])
        items.append(FinancialComponent(name=name, category=category, series=series))
    return items

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

from ..data_model.components import ComponentCategory
from ..data_model.plan import Plan
from .evaluator import evaluate

BREAKDOWN_COLUMNS = ["Year", "Income", "Spending", "Investment", "NetCashFlow"]


@dataclass(frozen=True)
class YearlyBreakdown:
    year: int
    income: float
    spending: float
    investment: float
    net_cash_flow: float


def total_by_category(plan: Plan, category: ComponentCategory, year: int) -> float:
    """Sum every component of `category` for a given year."""
    return sum(
        (evaluate(c.series, year, plan.base_year) for c in plan.components if c.category == category),
        0.0,
    )


def net_cash_flow(plan: Plan, year: int) -> float:
    """Income minus spending. Investment contributions are not part of this figure."""
    income = total_by_category(plan, "income", year)
    spending = total_by_category(plan, "spending", year)
    return income - spending


def aggregate_by_year(plan: Plan, start_year: int, end_year: int) -> List[YearlyBreakdown]:
    """Category totals for each year in [start_year, end_year)."""
    rows: List[YearlyBreakdown] = []
    for year in range(start_year, end_year):
        income = total_by_category(plan, "income", year)
        spending = total_by_category(plan, "spending", year)
        investment = total_by_category(plan, "investment", year)
        rows.append(
            YearlyBreakdown(
                year=year,
                income=income,
                spending=spending,
                investment=investment,
                net_cash_flow=income - spending,
            )
        )
    return rows


def breakdown_frame(records: Iterable[YearlyBreakdown]) -> pd.DataFrame:
    rows = [asdict(r) for r in records]
    if not rows:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)
    df = pd.DataFrame(rows)
    df.columns = BREAKDOWN_COLUMNS
    return df

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable, List

import pandas as pd

from ..data_model.plan import ProjectionParams, ScenarioConfig
from .aggregate import total_by_category

PROJECTION_COLUMNS = ["Year", "Income", "Spending", "Investment", "NetWorth"]


@dataclass(frozen=True)
class YearlyProjection:
    year: int
    income: float
    spending: float
    investment: float  # contributions
    net_worth: float


def project_net_worth(params: ProjectionParams) -> List[YearlyProjection]:
    """Fold the plan's yearly cash flow into a running net worth.

    Each year the prior balance plus this year's contributions earns a full
    year of returns; whatever income is left after spending and contributions
    is added afterwards, uninvested.
    """
    plan = params.plan
    rate = params.investment_return_rate
    records: List[YearlyProjection] = []

    net_worth = params.initial_net_worth
    for year in range(params.start_year, params.end_year):
        income = total_by_category(plan, "income", year)
        spending = total_by_category(plan, "spending", year)
        investment = total_by_category(plan, "investment", year)

        invested_amount = net_worth + investment
        after_returns = invested_amount * (1 + rate)
        remaining_cash_flow = income - spending - investment

        net_worth = after_returns + remaining_cash_flow
        records.append(
            YearlyProjection(
                year=year,
                income=income,
                spending=spending,
                investment=investment,
                net_worth=net_worth,
            )
        )

    return records


def project_scenario(config: ScenarioConfig) -> List[YearlyProjection]:
    return project_net_worth(config.to_params())


def projection_frame(records: Iterable[YearlyProjection]) -> pd.DataFrame:
    rows = [asdict(r) for r in records]
    if not rows:
        return pd.DataFrame(columns=PROJECTION_COLUMNS)
    df = pd.DataFrame(rows)
    df.columns = PROJECTION_COLUMNS
    return df

# data_model/plan.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .components import FinancialComponent


@dataclass(frozen=True)
class Plan:
    base_year: int
    components: Tuple[FinancialComponent, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))


@dataclass(frozen=True)
class ProjectionParams:
    plan: Plan
    initial_net_worth: float
    start_year: int
    end_year: int  # exclusive
    investment_return_rate: float  # 0.07 for 7%


@dataclass(frozen=True)
class ScenarioConfig:
    """A plan plus the basic parameters a user edits alongside it."""

    plan: Plan
    initial_net_worth: float = 0.0
    projection_years: int = 30
    investment_return_rate: float = 0.07

    @property
    def start_year(self) -> int:
        return self.plan.base_year

    @property
    def end_year(self) -> int:
        return self.plan.base_year + self.projection_years

    def to_params(self) -> ProjectionParams:
        return ProjectionParams(
            plan=self.plan,
            initial_net_worth=self.initial_net_worth,
            start_year=self.start_year,
            end_year=self.end_year,
            investment_return_rate=self.investment_return_rate,
        )


def plan(base_year: int, components: Iterable[FinancialComponent]) -> Plan:
    return Plan(base_year=base_year, components=tuple(components))

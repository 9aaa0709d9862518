from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from .series import TimeSeries

ComponentCategory = Literal["income", "spending", "investment"]
COMPONENT_CATEGORIES: Tuple[str, ...] = ("income", "spending", "investment")


@dataclass(frozen=True)
class FinancialComponent:
    name: str
    category: ComponentCategory
    series: TimeSeries


def component(name: str, category: ComponentCategory, series: TimeSeries) -> FinancialComponent:
    return FinancialComponent(name=name, category=category, series=series)

from .aggregate import YearlyBreakdown, aggregate_by_year, breakdown_frame, net_cash_flow, total_by_category
from .evaluator import evaluate
from .simulator import YearlyProjection, project_net_worth, project_scenario, projection_frame

__all__ = [
    "YearlyBreakdown",
    "YearlyProjection",
    "aggregate_by_year",
    "breakdown_frame",
    "evaluate",
    "net_cash_flow",
    "project_net_worth",
    "project_scenario",
    "projection_frame",
    "total_by_category",
]

from .components import (
    COMPONENT_CATEGORIES,
    ComponentCategory,
    FinancialComponent,
    component,
)
from .examples import ALL_EXAMPLES, ExampleScenario, example_scenario_config, get_example
from .plan import Plan, ProjectionParams, ScenarioConfig, plan
from .series import (
    SERIES_TYPES,
    Composite,
    Constant,
    Linear,
    Ratio,
    Segment,
    TimeSeries,
    composite,
    constant,
    linear,
    ratio,
    series_type,
)
from .table import ComponentTableModel, dataframe_to_components

__all__ = [
    "ALL_EXAMPLES",
    "COMPONENT_CATEGORIES",
    "SERIES_TYPES",
    "ComponentCategory",
    "ComponentTableModel",
    "Composite",
    "Constant",
    "ExampleScenario",
    "FinancialComponent",
    "Linear",
    "Plan",
    "ProjectionParams",
    "Ratio",
    "ScenarioConfig",
    "Segment",
    "TimeSeries",
    "component",
    "composite",
    "constant",
    "dataframe_to_components",
    "example_scenario_config",
    "get_example",
    "linear",
    "plan",
    "ratio",
    "series_type",
]

"""Pre-built plans covering the common shapes of a household's finances."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .components import component
from .plan import Plan, ScenarioConfig, plan
from .series import composite, constant, linear, ratio


@dataclass(frozen=True)
class ExampleScenario:
    id: str
    name: str
    description: str
    plan: Plan


HIGH_SAVER_PROFESSIONAL = ExampleScenario(
    id="high-saver",
    name="High Saver Professional",
    description="Software engineer with 3% annual raises, high savings rate",
    plan=plan(
        2025,
        [
            component("Salary", "income", ratio(150000, 0.03)),
            component("Living Expenses", "spending", constant(48000)),
            component("Discretionary", "spending", constant(12000)),
            component("401k + Match", "investment", constant(23000)),
            component("Brokerage", "investment", constant(30000)),
        ],
    ),
)

DUAL_INCOME_HOUSEHOLD = ExampleScenario(
    id="dual-income",
    name="Dual Income Household",
    description="Two professionals, combined income with different growth rates",
    plan=plan(
        2025,
        [
            component("Primary Salary", "income", ratio(120000, 0.03)),
            component("Spouse Salary", "income", ratio(85000, 0.025)),
            component("Housing", "spending", constant(36000)),
            component("Other Expenses", "spending", constant(48000)),
            # five years of childcare
            component("Childcare", "spending", composite([(constant(24000), 2025, 2030)])),
            component("401k (Both)", "investment", constant(40000)),
        ],
    ),
)

CAREER_CHANGE = ExampleScenario(
    id="career-change",
    name="Career Change",
    description="Professional taking a pay cut to switch careers at 40",
    plan=plan(
        2025,
        [
            component(
                "Salary",
                "income",
                composite(
                    [
                        (ratio(130000, 0.02), 2025, 2030),
                        (constant(20000), 2030, 2031),  # gap year
                        (ratio(80000, 0.05), 2031, 2050),
                    ]
                ),
            ),
            component("Living Expenses", "spending", constant(54000)),
            component("Career Transition Costs", "spending", composite([(constant(15000), 2030, 2031)])),
            component(
                "Retirement Savings",
                "investment",
                composite(
                    [
                        (constant(25000), 2025, 2030),
                        (constant(0), 2030, 2031),
                        (constant(10000), 2031, 2050),
                    ]
                ),
            ),
        ],
    ),
)

VARIABLE_INCOME = ExampleScenario(
    id="variable-income",
    name="Variable Income",
    description="Freelancer with variable income and major planned expenses",
    plan=plan(
        2025,
        [
            component("Freelance Income", "income", linear(75000, 5000)),
            component("Base Expenses", "spending", constant(42000)),
            component("Home Purchase", "spending", composite([(constant(50000), 2027, 2028)])),
            component("College Fund (Child)", "spending", composite([(constant(30000), 2035, 2039)])),
            component("SEP IRA", "investment", linear(15000, 1000)),
        ],
    ),
)

ALL_EXAMPLES: List[ExampleScenario] = [
    HIGH_SAVER_PROFESSIONAL,
    DUAL_INCOME_HOUSEHOLD,
    CAREER_CHANGE,
    VARIABLE_INCOME,
]


def get_example(example_id: str) -> Optional[ExampleScenario]:
    for example in ALL_EXAMPLES:
        if example.id == example_id:
            return example
    return None


def example_scenario_config(
    example: ExampleScenario,
    projection_years: int = 30,
    initial_net_worth: float = 0.0,
    investment_return_rate: float = 0.07,
) -> ScenarioConfig:
    return ScenarioConfig(
        plan=example.plan,
        initial_net_worth=initial_net_worth,
        projection_years=projection_years,
        investment_return_rate=investment_return_rate,
    )

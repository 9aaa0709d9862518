from __future__ import annotations

import math

from ..data_model.series import Composite, Constant, Linear, Ratio, TimeSeries


def evaluate(series: TimeSeries, year: int, base_year: int) -> float:
    """Value of `series` in calendar `year`, with `base_year` as year zero.

    Composite segments are evaluated against their own start year, so growth
    restarts at each segment boundary. Years outside every segment are 0.
    """
    elapsed = year - base_year

    if isinstance(series, Constant):
        return series.value

    if isinstance(series, Linear):
        return series.start_value + elapsed * series.yearly_increment

    if isinstance(series, Ratio):
        try:
            growth = (1 + series.yearly_growth_rate) ** elapsed
        except (OverflowError, ZeroDivisionError):
            growth = math.inf
        return series.start_value * growth

    if isinstance(series, Composite):
        for segment in series.segments:
            if segment.contains(year):
                return evaluate(segment.series, year, segment.start_year)
        return 0.0

    raise TypeError(f"Unsupported series: {series!r}")

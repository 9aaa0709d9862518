from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union

SERIES_TYPES: Tuple[str, ...] = ("constant", "linear", "ratio", "composite")


@dataclass(frozen=True)
class Constant:
    """Same value in every year."""

    value: float


@dataclass(frozen=True)
class Linear:
    """Start value plus a fixed amount per elapsed year (may be negative)."""

    start_value: float
    yearly_increment: float


@dataclass(frozen=True)
class Ratio:
    """Start value compounding by `yearly_growth_rate` (0.03 for 3%)."""

    start_value: float
    yearly_growth_rate: float


@dataclass(frozen=True)
class Segment:
    """A sub-series active over the half-open interval [start_year, end_year)."""

    series: "TimeSeries"
    start_year: int
    end_year: int

    def contains(self, year: int) -> bool:
        return self.start_year <= year < self.end_year


@dataclass(frozen=True)
class Composite:
    """Ordered segments; the first one containing a year wins, gaps are zero."""

    segments: Tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))


TimeSeries = Union[Constant, Linear, Ratio, Composite]


def series_type(series: TimeSeries) -> str:
    if isinstance(series, Constant):
        return "constant"
    if isinstance(series, Linear):
        return "linear"
    if isinstance(series, Ratio):
        return "ratio"
    if isinstance(series, Composite):
        return "composite"
    raise TypeError(f"Unsupported series: {series!r}")


# --- helper constructors ---


def constant(value: float) -> Constant:
    return Constant(value)


def linear(start_value: float, yearly_increment: float) -> Linear:
    return Linear(start_value, yearly_increment)


def ratio(start_value: float, yearly_growth_rate: float) -> Ratio:
    return Ratio(start_value, yearly_growth_rate)


def _to_segment(raw: Any) -> Segment:
    if isinstance(raw, Segment):
        return raw
    if isinstance(raw, Mapping):
        return Segment(raw["series"], int(raw["start_year"]), int(raw["end_year"]))
    series, start_year, end_year = raw
    return Segment(series, int(start_year), int(end_year))


def composite(segments: Iterable[Any]) -> Composite:
    """Build a composite from Segments, (series, start, end) tuples or mappings."""
    return Composite(tuple(_to_segment(seg) for seg in segments))

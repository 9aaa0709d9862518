"""Year-by-year net-worth projections from time-varying cash flows."""

__version__ = "0.1.0"

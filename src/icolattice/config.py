"""Configuration knobs for numerical routines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolveConfig:
    """Config knobs for Gaussian elimination."""

    # Pivot candidates with magnitude <= pivot_tolerance count as zero.
    pivot_tolerance: float = 0.0

    def __post_init__(self) -> None:
        if not self.pivot_tolerance >= 0.0:
            raise ValueError("pivot_tolerance must be a non-negative number.")

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

import numpy as np

EPSILON: float = float(np.finfo(np.float64).eps) # machine epsilon, absolute tolerance for every approximate comparison


@dataclass(slots=True)
class KernelSettings:
    tolerance: float = EPSILON

    def __post_init__(self) -> None:
        self.tolerance = float(self.tolerance)
        if not math.isfinite(self.tolerance) or self.tolerance < 0.0:
            raise ValueError(f"Tolerance must be a finite non-negative number, got {self.tolerance}")


_KERNEL_SETTINGS = KernelSettings()

_PROFILE_COUNTERS: Dict[str, int] = {
    "ray_intersections": 0,
    "sphere_hits": 0,
    "matrix_inversions": 0,
}


def configure_kernel(settings: KernelSettings) -> None:
    global _KERNEL_SETTINGS
    _KERNEL_SETTINGS = settings


def get_kernel_settings() -> KernelSettings:
    return _KERNEL_SETTINGS


def resolve_tolerance(tolerance: float | None) -> float:
    """Explicit tolerance wins, otherwise the configured one."""
    if tolerance is None:
        return _KERNEL_SETTINGS.tolerance
    return float(tolerance)


def count(counter: str, amount: int = 1) -> None:
    _PROFILE_COUNTERS[counter] += amount


def get_profile_counters() -> Dict[str, int]:
    return dict(_PROFILE_COUNTERS)


def reset_profile_counters() -> None:
    for key in _PROFILE_COUNTERS:
        _PROFILE_COUNTERS[key] = 0

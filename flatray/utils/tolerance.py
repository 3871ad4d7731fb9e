from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

DEFAULT_EPSILON: float = 1e-6 # every containment and ordering decision compares against this


@dataclass(frozen=True, slots=True)
class ToleranceSettings:
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if not self.epsilon > 0.0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")


_TOLERANCE_SETTINGS = ToleranceSettings()


def configure_tolerance(settings: ToleranceSettings) -> None:
    global _TOLERANCE_SETTINGS
    _TOLERANCE_SETTINGS = settings


def get_tolerance() -> ToleranceSettings:
    return _TOLERANCE_SETTINGS


def get_epsilon() -> float:
    return _TOLERANCE_SETTINGS.epsilon


@contextmanager
def tolerance(epsilon: float) -> Iterator[ToleranceSettings]:
    """Temporarily switch the active epsilon, restoring the previous settings on exit."""
    previous = _TOLERANCE_SETTINGS
    settings = ToleranceSettings(epsilon=epsilon)
    configure_tolerance(settings)
    try:
        yield settings
    finally:
        configure_tolerance(previous)


def eq_0(x: float) -> bool:
    return abs(x) < _TOLERANCE_SETTINGS.epsilon


def eq(a: float, b: float) -> bool:
    # Equal infinities have a NaN difference, so test exact equality first.
    return a == b or abs(a - b) < _TOLERANCE_SETTINGS.epsilon


def lt(a: float, b: float) -> bool:
    return a < b and not eq(a, b)


def le(a: float, b: float) -> bool:
    return a < b or eq(a, b)


def gt(a: float, b: float) -> bool:
    return a > b and not eq(a, b)


def ge(a: float, b: float) -> bool:
    return a > b or eq(a, b)

"""Viewport width classification into breakpoint tiers.

Each tier has a closed upper bound (``width <= threshold``) and the tiers are
checked from narrowest to widest, so a width sitting exactly on a threshold
belongs to the narrower tier::

    width <= mobile_max  -> MOBILE
    width <= narrow_max  -> NARROW
    width <= mid_max     -> MID
    otherwise            -> FULL

Thresholds are validated once, when :class:`BreakpointThresholds` is built.
Classification itself never fails.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from functools import lru_cache
from typing import Optional

from django_slotgrid.conf import (
    DEFAULT_MID_MAX_PX,
    DEFAULT_MOBILE_MAX_PX,
    DEFAULT_NARROW_MAX_PX,
    settings,
)
from .constants import Breakpoint
from .exceptions import InvalidBreakpointConfig

__all__ = [
    "Breakpoint",
    "BreakpointThresholds",
    "BreakpointClassifier",
    "get_default_classifier",
    "classify",
]


@dataclass(frozen=True)
class BreakpointThresholds:
    """Inclusive upper pixel bounds for the three narrowed tiers."""

    mobile_max: float = DEFAULT_MOBILE_MAX_PX
    narrow_max: float = DEFAULT_NARROW_MAX_PX
    mid_max: float = DEFAULT_MID_MAX_PX

    def __post_init__(self):
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidBreakpointConfig(
                    f"Breakpoint threshold '{name}' must be a number, got {value!r}."
                )
            if math.isnan(value) or value < 0:
                raise InvalidBreakpointConfig(
                    f"Breakpoint threshold '{name}' must be a non-negative number, got {value!r}."
                )
        if not self.mobile_max < self.narrow_max < self.mid_max:
            raise InvalidBreakpointConfig(
                "Breakpoint thresholds must be strictly ordered "
                f"(mobile {self.mobile_max} < narrow {self.narrow_max} < mid {self.mid_max})."
            )

    @classmethod
    def from_settings(cls) -> "BreakpointThresholds":
        return cls(
            mobile_max=settings.SLOTGRID_MOBILE_MAX_PX,
            narrow_max=settings.SLOTGRID_NARROW_MAX_PX,
            mid_max=settings.SLOTGRID_MID_MAX_PX,
        )

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


class BreakpointClassifier:
    """Map viewport widths to :class:`Breakpoint` tiers."""

    def __init__(self, thresholds: Optional[BreakpointThresholds] = None):
        if thresholds is None:
            thresholds = BreakpointThresholds()
        elif not isinstance(thresholds, BreakpointThresholds):
            raise InvalidBreakpointConfig(
                f"Expected BreakpointThresholds, got {type(thresholds).__name__}."
            )
        self.thresholds = thresholds
        # Narrowest first so ties resolve to the narrower tier.
        self._tiers = (
            (Breakpoint.MOBILE, thresholds.mobile_max),
            (Breakpoint.NARROW, thresholds.narrow_max),
            (Breakpoint.MID, thresholds.mid_max),
        )

    def __repr__(self):
        t = self.thresholds
        return (
            f"BreakpointClassifier(mobile_max={t.mobile_max}, "
            f"narrow_max={t.narrow_max}, mid_max={t.mid_max})"
        )

    def classify(self, width: float) -> Breakpoint:
        for breakpoint, upper in self._tiers:
            if width <= upper:
                return breakpoint
        return Breakpoint.FULL

    def bounds(self) -> list[tuple[Breakpoint, Optional[float], Optional[float]]]:
        """Return ``(breakpoint, lower_exclusive, upper_inclusive)`` per tier.

        The intervals are contiguous and ordered narrowest first; ``None``
        marks an open end.
        """
        result = []
        lower = None
        for breakpoint, upper in self._tiers:
            result.append((breakpoint, lower, upper))
            lower = upper
        result.append((Breakpoint.FULL, lower, None))
        return result


@lru_cache(maxsize=None)
def get_default_classifier() -> BreakpointClassifier:
    """Classifier built from the ``SLOTGRID_*`` threshold settings."""
    return BreakpointClassifier(BreakpointThresholds.from_settings())


def classify(width: float) -> Breakpoint:
    return get_default_classifier().classify(width)

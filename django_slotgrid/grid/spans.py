"""Span resolution for declared grid slots.

A slot is declared once as ``columns x rows`` at full width. As the grid
narrows, its column span follows :data:`~django_slotgrid.grid.constants.SPAN_TABLE`
and its row span is copied unchanged.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .breakpoints import BreakpointClassifier, get_default_classifier
from .constants import GRID_COLUMNS, SPAN_TABLE, Breakpoint, ColumnBucket, RowBucket
from .exceptions import InvalidBucket

__all__ = [
    "GridItemSpec",
    "ResolvedSpan",
    "grid_columns",
    "resolve_column_span",
    "resolve_row_span",
    "resolve_span",
    "resolve_all",
    "resolve_for_width",
]

_LABEL_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def _column_bucket(value) -> ColumnBucket:
    try:
        return ColumnBucket(value)
    except (ValueError, TypeError):
        raise InvalidBucket(
            f"Column bucket must be one of {ColumnBucket.values}, got {value!r}."
        ) from None


def _row_bucket(value) -> RowBucket:
    try:
        return RowBucket(value)
    except (ValueError, TypeError):
        raise InvalidBucket(
            f"Row bucket must be one of {RowBucket.values}, got {value!r}."
        ) from None


@dataclass(frozen=True)
class GridItemSpec:
    """Declared full-width span of a grid slot."""

    column_bucket: ColumnBucket
    row_bucket: RowBucket

    def __post_init__(self):
        # Booleans are ints; reject them before enum coercion accepts True as 1.
        for value in (self.column_bucket, self.row_bucket):
            if isinstance(value, bool):
                raise InvalidBucket(f"Bucket must be an integer, got {value!r}.")
        object.__setattr__(self, "column_bucket", _column_bucket(self.column_bucket))
        object.__setattr__(self, "row_bucket", _row_bucket(self.row_bucket))

    @classmethod
    def parse(cls, label: str) -> "GridItemSpec":
        """Build a spec from slot-label notation such as ``"5x2"``."""
        match = _LABEL_RE.match(str(label))
        if not match:
            raise InvalidBucket(f"Slot label must look like '<columns>x<rows>', got {label!r}.")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def label(self) -> str:
        return f"{int(self.column_bucket)}x{int(self.row_bucket)}"


class ResolvedSpan(NamedTuple):
    column_span: int
    row_span: int

    def as_dict(self) -> dict[str, int]:
        return {"column_span": self.column_span, "row_span": self.row_span}


def grid_columns(breakpoint) -> int:
    """Number of grid columns active at ``breakpoint``."""
    return GRID_COLUMNS[Breakpoint(breakpoint)]


def resolve_column_span(column_bucket, breakpoint) -> int:
    return SPAN_TABLE[(_column_bucket(column_bucket), Breakpoint(breakpoint))]


def resolve_row_span(row_bucket) -> int:
    return int(_row_bucket(row_bucket))


def resolve_span(item: GridItemSpec, breakpoint) -> ResolvedSpan:
    return ResolvedSpan(
        column_span=SPAN_TABLE[(item.column_bucket, Breakpoint(breakpoint))],
        row_span=int(item.row_bucket),
    )


def resolve_all(item: GridItemSpec) -> dict[Breakpoint, ResolvedSpan]:
    """Resolve ``item`` at every breakpoint, narrowest first."""
    return {breakpoint: resolve_span(item, breakpoint) for breakpoint in Breakpoint}


def resolve_for_width(
    item: GridItemSpec,
    width: float,
    classifier: Optional[BreakpointClassifier] = None,
) -> tuple[Breakpoint, ResolvedSpan]:
    classifier = classifier or get_default_classifier()
    breakpoint = classifier.classify(width)
    return breakpoint, resolve_span(item, breakpoint)

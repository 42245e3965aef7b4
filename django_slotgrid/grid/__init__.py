"""Breakpoint classification and span resolution for slot grids."""

from .breakpoints import (
    BreakpointClassifier,
    BreakpointThresholds,
    classify,
    get_default_classifier,
)
from .constants import GRID_COLUMNS, SPAN_TABLE, Breakpoint, ColumnBucket, RowBucket
from .exceptions import InvalidBreakpointConfig, InvalidBucket
from .spans import (
    GridItemSpec,
    ResolvedSpan,
    grid_columns,
    resolve_all,
    resolve_column_span,
    resolve_for_width,
    resolve_row_span,
    resolve_span,
)

__all__ = [
    "Breakpoint",
    "BreakpointClassifier",
    "BreakpointThresholds",
    "ColumnBucket",
    "GRID_COLUMNS",
    "GridItemSpec",
    "InvalidBreakpointConfig",
    "InvalidBucket",
    "ResolvedSpan",
    "RowBucket",
    "SPAN_TABLE",
    "classify",
    "get_default_classifier",
    "grid_columns",
    "resolve_all",
    "resolve_column_span",
    "resolve_for_width",
    "resolve_row_span",
    "resolve_span",
]

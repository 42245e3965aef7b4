"""Stylesheet generation for slot classes.

Every slot label gets a class (``.slot-5x2``) whose full-width span matches
its declaration. Narrower tiers are emitted as ``@media (max-width: ...)``
blocks, widest first, and each block only overrides the column spans that
change relative to the tier above it.
"""
from __future__ import annotations

import logging
from typing import Optional

from django_slotgrid.conf import settings
from .breakpoints import BreakpointClassifier, get_default_classifier
from .constants import GRID_COLUMNS, SPAN_TABLE, Breakpoint, ColumnBucket, RowBucket
from .spans import GridItemSpec

logger = logging.getLogger(__name__)

__all__ = ["slot_class_name", "grid_class_name", "media_blocks", "render_grid_css"]

_NARROWED_TIERS = (Breakpoint.MID, Breakpoint.NARROW, Breakpoint.MOBILE)


def _prefix(prefix: Optional[str]) -> str:
    return prefix if prefix is not None else settings.SLOTGRID_CSS_PREFIX


def slot_class_name(item: GridItemSpec, prefix: Optional[str] = None) -> str:
    return f"{_prefix(prefix)}-{item.label}"


def grid_class_name(prefix: Optional[str] = None) -> str:
    return f"{_prefix(prefix)}-grid"


def _px(value: float) -> str:
    return f"{value:g}px"


def media_blocks(classifier: Optional[BreakpointClassifier] = None) -> list[dict]:
    """Describe the media-query overrides for each narrowed tier.

    Returns one dict per tier (widest first) with ``breakpoint``,
    ``max_width``, ``columns`` and ``overrides``, a mapping of column bucket
    to its new span for buckets whose span changes at that tier.
    """
    classifier = classifier or get_default_classifier()
    upper_bounds = {bp: upper for bp, _lower, upper in classifier.bounds()}
    current = {bucket: SPAN_TABLE[(bucket, Breakpoint.FULL)] for bucket in ColumnBucket}
    blocks = []
    for breakpoint in _NARROWED_TIERS:
        overrides = {}
        for bucket in ColumnBucket:
            span = SPAN_TABLE[(bucket, breakpoint)]
            if span != current[bucket]:
                overrides[bucket] = span
                current[bucket] = span
        blocks.append(
            {
                "breakpoint": breakpoint,
                "max_width": upper_bounds[breakpoint],
                "columns": GRID_COLUMNS[breakpoint],
                "overrides": overrides,
            }
        )
    return blocks


def _selectors(bucket: ColumnBucket, prefix: str) -> str:
    return ", ".join(
        f".{slot_class_name(GridItemSpec(bucket, row), prefix)}" for row in RowBucket
    )


def render_grid_css(
    classifier: Optional[BreakpointClassifier] = None,
    prefix: Optional[str] = None,
) -> str:
    """Render the slot grid stylesheet for the given thresholds."""
    prefix = _prefix(prefix)
    grid = grid_class_name(prefix)
    lines = [
        f".{grid} {{",
        "  display: grid;",
        f"  grid-template-columns: repeat({GRID_COLUMNS[Breakpoint.FULL]}, minmax(0, 1fr));",
        "}",
    ]
    for bucket in reversed(ColumnBucket):
        for row in RowBucket:
            item = GridItemSpec(bucket, row)
            lines.append(
                f".{slot_class_name(item, prefix)} {{ "
                f"grid-column: span {SPAN_TABLE[(bucket, Breakpoint.FULL)]}; "
                f"grid-row: span {int(row)}; }}"
            )

    for block in media_blocks(classifier):
        lines.append("")
        lines.append(f"@media (max-width: {_px(block['max_width'])}) {{")
        lines.append(
            f"  .{grid} {{ grid-template-columns: repeat({block['columns']}, minmax(0, 1fr)); }}"
        )
        for bucket, span in block["overrides"].items():
            lines.append(f"  {_selectors(bucket, prefix)} {{ grid-column: span {span}; }}")
        lines.append("}")

    css = "\n".join(lines) + "\n"
    logger.debug("Rendered slot grid stylesheet (%d bytes, prefix=%r)", len(css), prefix)
    return css

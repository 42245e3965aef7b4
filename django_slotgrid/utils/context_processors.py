"""Context processors exposing slot grid breakpoints to templates."""
from __future__ import annotations

from django_slotgrid.grid.breakpoints import get_default_classifier
from django_slotgrid.grid.constants import GRID_COLUMNS

__all__ = ["slotgrid"]


def slotgrid(request):
    """Expose thresholds and per-breakpoint column counts to templates."""
    classifier = get_default_classifier()
    return {
        "slotgrid_thresholds": classifier.thresholds.as_dict(),
        "slotgrid_columns": {bp.name.lower(): GRID_COLUMNS[bp] for bp in GRID_COLUMNS},
    }

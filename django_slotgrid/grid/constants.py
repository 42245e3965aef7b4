from types import MappingProxyType

from django.db import models


class Breakpoint(models.IntegerChoices):
    """Viewport tiers, ordered from narrowest to widest."""

    MOBILE = 0, "Mobile"
    NARROW = 1, "Narrow"
    MID = 2, "Mid"
    FULL = 3, "Full"


class ColumnBucket(models.IntegerChoices):
    ONE = 1, "1 column"
    TWO = 2, "2 columns"
    THREE = 3, "3 columns"
    FOUR = 4, "4 columns"
    FIVE = 5, "5 columns"
    SIX = 6, "6 columns"


class RowBucket(models.IntegerChoices):
    ONE = 1, "1 row"
    TWO = 2, "2 rows"
    THREE = 3, "3 rows"


# Grid container column count per breakpoint
GRID_COLUMNS = MappingProxyType(
    {
        Breakpoint.FULL: 6,
        Breakpoint.MID: 4,
        Breakpoint.NARROW: 4,
        Breakpoint.MOBILE: 2,
    }
)

# Effective column span per declared column bucket.
# Columns read FULL, MID, NARROW, MOBILE.
_SPAN_ROWS = {
    ColumnBucket.SIX: (6, 4, 4, 2),
    ColumnBucket.FIVE: (5, 4, 3, 2),
    ColumnBucket.FOUR: (4, 4, 4, 2),
    ColumnBucket.THREE: (3, 3, 3, 2),
    ColumnBucket.TWO: (2, 2, 2, 2),
    # Single-column slots keep span 1 until the mobile grid.
    ColumnBucket.ONE: (1, 1, 1, 2),
}
_SPAN_ORDER = (Breakpoint.FULL, Breakpoint.MID, Breakpoint.NARROW, Breakpoint.MOBILE)

SPAN_TABLE = MappingProxyType(
    {
        (bucket, breakpoint): span
        for bucket, spans in _SPAN_ROWS.items()
        for breakpoint, span in zip(_SPAN_ORDER, spans)
    }
)

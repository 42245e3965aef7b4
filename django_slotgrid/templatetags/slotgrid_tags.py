"""Template tags rendering resolved slot spans."""
from __future__ import annotations

from django import template
from django.utils.safestring import mark_safe

from django_slotgrid.grid.constants import Breakpoint
from django_slotgrid.grid.spans import GridItemSpec, resolve_span
from django_slotgrid.grid.stylesheet import render_grid_css, slot_class_name

register = template.Library()


def _spec(value) -> GridItemSpec:
    if isinstance(value, GridItemSpec):
        return value
    return GridItemSpec.parse(value)


def _breakpoint(value) -> Breakpoint:
    """Accept a Breakpoint, its integer value or its name (``"narrow"``)."""
    if isinstance(value, str):
        try:
            return Breakpoint[value.strip().upper()]
        except KeyError:
            raise template.TemplateSyntaxError(f"Unknown breakpoint {value!r}.") from None
    return Breakpoint(value)


@register.simple_tag
def slot_class(slot) -> str:
    """``{% slot_class "5x2" %}`` renders ``slot-5x2``."""
    return slot_class_name(_spec(slot))


@register.simple_tag
def slot_span(slot, breakpoint):
    """Resolve ``slot`` at ``breakpoint``; use with ``as`` to keep the result."""
    return resolve_span(_spec(slot), _breakpoint(breakpoint))


@register.simple_tag
def slot_style(slot, breakpoint) -> str:
    span = resolve_span(_spec(slot), _breakpoint(breakpoint))
    return f"grid-column: span {span.column_span}; grid-row: span {span.row_span};"


@register.simple_tag
def slotgrid_css():
    return mark_safe(render_grid_css())

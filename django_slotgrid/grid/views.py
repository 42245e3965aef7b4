import logging

from django.http import HttpResponse, JsonResponse
from django.views import View

from django_slotgrid.grid.breakpoints import get_default_classifier
from django_slotgrid.grid.constants import GRID_COLUMNS, SPAN_TABLE, Breakpoint, ColumnBucket
from django_slotgrid.grid.forms import ResolveSpanForm
from django_slotgrid.grid.spans import resolve_span
from django_slotgrid.grid.stylesheet import render_grid_css

logger = logging.getLogger(__name__)


def breakpoint_key(breakpoint: Breakpoint) -> str:
    return breakpoint.name.lower()


class ResolveSpanView(View):
    """Resolve one slot at a viewport width.

    ``GET ?width=900&column=5&row=2`` returns the active breakpoint, the grid
    column count and the slot's resolved spans.
    """

    def get(self, request, *args, **kwargs):
        form = ResolveSpanForm(request.GET)
        if not form.is_valid():
            errors = {field: [str(e) for e in errs] for field, errs in form.errors.items()}
            logger.info("Rejected span resolution request: %s", errors)
            return JsonResponse({"errors": errors}, status=400)

        breakpoint = get_default_classifier().classify(form.cleaned_data["width"])
        span = resolve_span(form.cleaned_data["spec"], breakpoint)
        return JsonResponse(
            {
                "breakpoint": breakpoint_key(breakpoint),
                "columns": GRID_COLUMNS[breakpoint],
                **span.as_dict(),
            }
        )


class SpanTableView(View):
    """Expose the thresholds and the full span table as JSON."""

    def get(self, request, *args, **kwargs):
        classifier = get_default_classifier()
        breakpoints = [
            {
                "name": breakpoint_key(bp),
                "min_width_exclusive": lower,
                "max_width": upper,
                "columns": GRID_COLUMNS[bp],
            }
            for bp, lower, upper in classifier.bounds()
        ]
        spans = {
            str(int(bucket)): {
                breakpoint_key(bp): SPAN_TABLE[(bucket, bp)] for bp in Breakpoint
            }
            for bucket in ColumnBucket
        }
        return JsonResponse(
            {
                "thresholds": classifier.thresholds.as_dict(),
                "breakpoints": breakpoints,
                "spans": spans,
            }
        )


class GridStylesheetView(View):
    def get(self, request, *args, **kwargs):
        return HttpResponse(render_grid_css(), content_type="text/css")

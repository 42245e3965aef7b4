import logging

from django.core.management.base import BaseCommand, CommandError

from django_slotgrid.grid.breakpoints import get_default_classifier
from django_slotgrid.grid.constants import GRID_COLUMNS, SPAN_TABLE, Breakpoint, ColumnBucket
from django_slotgrid.grid.exceptions import InvalidBreakpointConfig
from django_slotgrid.grid.stylesheet import render_grid_css

logger = logging.getLogger(__name__)

# Widest first, matching how the table is usually read.
COLUMN_ORDER = (Breakpoint.FULL, Breakpoint.MID, Breakpoint.NARROW, Breakpoint.MOBILE)


class Command(BaseCommand):
    help = (
        "Print the slot span table, classify a viewport width, or write the "
        "generated slot grid stylesheet."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--width",
            type=float,
            help="Viewport width in pixels; only the matching breakpoint column is shown.",
        )
        parser.add_argument(
            "--css",
            action="store_true",
            help="Write the generated stylesheet instead of the table.",
        )

    def handle(self, *args, **options):
        width = options.get("width")
        try:
            if options.get("css"):
                self.stdout.write(render_grid_css(), ending="")
                logger.info("Wrote slot grid stylesheet")
                return

            classifier = get_default_classifier()
            if width is not None:
                if width < 0:
                    raise CommandError("--width must be a non-negative number.")
                breakpoints = (classifier.classify(width),)
                self.stdout.write(
                    f"Width {width:g}px -> {breakpoints[0].label} "
                    f"({GRID_COLUMNS[breakpoints[0]]} columns)"
                )
            else:
                breakpoints = COLUMN_ORDER

            header = ["bucket"] + [bp.label for bp in breakpoints]
            self.stdout.write("\t".join(header))
            self.stdout.write("\t".join(["columns"] + [str(GRID_COLUMNS[bp]) for bp in breakpoints]))
            for bucket in reversed(ColumnBucket):
                row = [str(int(bucket))] + [str(SPAN_TABLE[(bucket, bp)]) for bp in breakpoints]
                self.stdout.write("\t".join(row))
            logger.info("Printed slot span table for %s", ", ".join(bp.label for bp in breakpoints))
        except CommandError:
            raise
        except InvalidBreakpointConfig as exc:
            raise CommandError(f"Invalid slot grid configuration: {exc}")
